"""Game logic for a Bubble Bobble style arcade game: high scores, menus, levels and scene flow."""

__version__ = "0.1.0"

__all__ = [
    "achievements",
    "buttons",
    "cache_experiment",
    "counters",
    "fps",
    "highscores",
    "initials",
    "levels",
    "progress",
    "scenes",
]