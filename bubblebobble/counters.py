"""Observers that count enemies, show lives and high score, and keep items."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Generic, Optional, TypeVar, Union

from bubblebobble.highscores import first_score

T = TypeVar("T")


class EnemyCounter:
    """Counts living enemies and reports when the last one has died."""

    def __init__(self, on_all_defeated: Optional[Callable[[], object]] = None) -> None:
        self.amount = 0
        self._on_all_defeated = on_all_defeated

    def add_enemy(self) -> None:
        self.amount += 1

    def notify(self) -> None:
        """Register the death of one enemy."""
        if self.amount <= 0:
            raise RuntimeError("amount of enemies would drop below 0")
        self.amount -= 1
        if self.amount == 0 and self._on_all_defeated is not None:
            self._on_all_defeated()


class LivesDisplay(Generic[T]):
    """Holds one object per remaining life and drops the last on each hit."""

    def __init__(self, on_life_lost: Optional[Callable[[T], object]] = None) -> None:
        self._lives: list[T] = []
        self._on_life_lost = on_life_lost

    def add_life(self, life: T) -> None:
        self._lives.append(life)

    def notify(self) -> Optional[T]:
        """Remove the last life and return it, or None if there are none."""
        if not self._lives:
            return None
        life = self._lives.pop()
        if self._on_life_lost is not None:
            self._on_life_lost(life)
        return life

    def remaining_lives(self) -> int:
        return len(self._lives)


class HighScoreDisplay:
    """Shows the best score seen, starting from the table's top entry."""

    def __init__(self, current_high_score: int = 0) -> None:
        self.current_high_score = current_high_score
        self.text = str(current_high_score)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "HighScoreDisplay":
        return cls(first_score(path).score)

    def notify(self, score: int) -> str:
        """Raise the high score if ``score`` beats it and return the text."""
        if score > self.current_high_score:
            self.current_high_score = score
        self.text = str(self.current_high_score)
        return self.text


class Inventory:
    """Items a player picked up, with the position where each was taken."""

    def __init__(
        self,
        player_type: Any = None,
        on_item_added: Optional[Callable[["Inventory"], object]] = None,
    ) -> None:
        self.player_type = player_type
        self._items: list[tuple[Any, tuple[float, float]]] = []
        self._observers: list[Callable[[Inventory], object]] = []
        if on_item_added is not None:
            self._observers.append(on_item_added)

    def add_observer(self, callback: Callable[["Inventory"], object]) -> None:
        self._observers.append(callback)

    def add_item(self, pick_up_type: Any, position: tuple[float, float]) -> None:
        self._items.append((pick_up_type, position))
        for callback in list(self._observers):
            callback(self)

    def last_added_item(self) -> tuple[Any, tuple[float, float]]:
        """Return the most recent item; raises LookupError if there is none."""
        if not self._items:
            raise LookupError("there are no items in the inventory")
        return self._items[-1]