"""Achievements unlocked by the score of a player."""

from __future__ import annotations

from dataclasses import dataclass

SCORE_ACHIEVEMENT_THRESHOLD = 500

DEFAULT_ACHIEVEMENTS = ("Score500Points", "WinOneGame", "WinAHundredGames")


@dataclass
class Achievement:
    """A named achievement and whether it has been unlocked."""

    name: str
    achieved: bool = False


class Achievements:
    """Tracks the game's achievements and unlocks them from score updates."""

    def __init__(self, names: tuple[str, ...] = DEFAULT_ACHIEVEMENTS) -> None:
        if not names:
            raise ValueError("at least one achievement is required")
        self.achievements = [Achievement(name) for name in names]

    def notify(self, score: int) -> None:
        """Unlock the score achievement once the score reaches the threshold."""
        first = self.achievements[0]
        if not first.achieved and score >= SCORE_ACHIEVEMENT_THRESHOLD:
            print(first.name)
            first.achieved = True

    def is_achieved(self, name: str) -> bool:
        """Return whether the named achievement is unlocked; KeyError if unknown."""
        for achievement in self.achievements:
            if achievement.name == name:
                return achievement.achieved
        raise KeyError(name)