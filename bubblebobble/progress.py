"""Player scores and lives carried over from one level to the next."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

START_HEALTH = 3
MAX_LEVEL = 3
GENERAL_COLLISION_OFFSET = 2.0

PLAYER_ONE_COLOR = (116, 251, 77, 255)
PLAYER_TWO_COLOR = (77, 166, 248, 255)

Color = tuple[int, int, int, int]
Vec2 = tuple[float, float]
IntSource = Callable[[], int]


@dataclass
class PlayerInfo:
    """What is remembered of a player between levels.

    ``score_source`` and ``lives_source`` read the live values from the level's
    score and lives displays while a level is running.
    """

    text_color: Color = (255, 255, 255, 255)
    spawn_pos: Vec2 = (0.0, 0.0)
    score: int = 0
    health: int = START_HEALTH
    score_source: Optional[IntSource] = field(default=None, repr=False, compare=False)
    lives_source: Optional[IntSource] = field(default=None, repr=False, compare=False)

    @classmethod
    def player_one(cls, window_size: Vec2) -> "PlayerInfo":
        """Player one, spawning in the bottom-left corner."""
        _, height = window_size
        return cls(PLAYER_ONE_COLOR, (24.0, height - 24.0))

    @classmethod
    def player_two(cls, window_size: Vec2) -> "PlayerInfo":
        """Player two, spawning in the bottom-right corner."""
        width, height = window_size
        return cls(PLAYER_TWO_COLOR, (width - 40.0, height - 24.0))

    def sync(self, score: Optional[int] = None, lives: Optional[int] = None) -> None:
        """Store the given score and lives; a player never carries 0 lives over."""
        if score is not None:
            self.score = score
        if lives is not None:
            self.health = lives
        if self.health == 0:
            self.health = 1

    def reset(self) -> None:
        """Start afresh: no score, full health and no attached displays."""
        self.score = 0
        self.health = START_HEALTH
        self.score_source = None
        self.lives_source = None

    def _sync_from_sources(self) -> None:
        self.sync(
            self.score_source() if self.score_source is not None else None,
            self.lives_source() if self.lives_source is not None else None,
        )


class LevelProgress:
    """Moves through the levels and hands over to the results after the last."""

    def __init__(
        self,
        players: tuple[PlayerInfo, ...] = (),
        on_level_loaded: Optional[Callable[[int], object]] = None,
        on_results: Optional[Callable[[], object]] = None,
        level_number: int = 1,
        max_level: int = MAX_LEVEL,
    ) -> None:
        if max_level < 1:
            raise ValueError(f"max_level must be at least 1, got {max_level}")
        if not 1 <= level_number <= max_level:
            raise ValueError(f"level_number must lie in 1..{max_level}, got {level_number}")
        self.players = list(players)
        self.level_number = level_number
        self.max_level = max_level
        self._on_level_loaded = on_level_loaded
        self._on_results = on_results

    @property
    def is_last_level(self) -> bool:
        return self.level_number == self.max_level

    def advance(self) -> bool:
        """Save the players' state and go to the next level.

        Returns True when the last level was finished and the results are shown.
        """
        for player in self.players:
            player._sync_from_sources()
        if self.is_last_level:
            if self._on_results is not None:
                self._on_results()
            return True
        self.level_number += 1
        if self._on_level_loaded is not None:
            self._on_level_loaded(self.level_number)
        return False