"""High-score table stored as a plain text file of ``NAME,SCORE`` lines."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from itertools import islice
from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]

FILE_NAME = "HighScores.txt"
FONT_NAME = "Fonts/Pixel_NES.otf"
FONT_SIZE = 10
MAX_INITIALS = 3
DEFAULT_TABLE_SIZE = 10

_LINE_PATTERN = re.compile(r"(\D{3}),(\d+)")
_RANK_SUFFIXES = {1: "ST", 2: "ND", 3: "RD"}

_log = logging.getLogger(__name__)


@dataclass
class PlayerScore:
    """One entry of the high-score table."""

    name: str = ""
    score: int = 0

    def to_line(self) -> str:
        """Return the entry in its file form, ``NAME,SCORE``."""
        return f"{self.name},{self.score}"


def parse_score_line(line: str) -> Optional[PlayerScore]:
    """Parse one line of the table; return None if it is not a valid entry."""
    match = _LINE_PATTERN.fullmatch(line.rstrip("\n"))
    if match is None:
        return None
    return PlayerScore(match.group(1), int(match.group(2)))


def load_high_scores(path: PathLike) -> list[PlayerScore]:
    """Read every valid entry from the file, in file order."""
    scores = []
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            entry = parse_score_line(line)
            if entry is None:
                _log.debug("Invalid line: %s", line.rstrip("\n"))
                continue
            scores.append(entry)
    return scores


def _write_scores(path: PathLike, scores: list[PlayerScore]) -> None:
    with open(path, "w", encoding="utf-8") as handle:
        handle.writelines(entry.to_line() + "\n" for entry in scores)


def write_high_score(path: PathLike, initials: str, score: int) -> None:
    """Add an entry to the table and rewrite it sorted by descending score."""
    if len(initials) > MAX_INITIALS:
        raise ValueError(
            f"initials may be at most {MAX_INITIALS} characters, got {initials!r}"
        )
    scores = load_high_scores(path)
    scores.append(PlayerScore(initials, score))
    scores.sort(key=lambda entry: entry.score, reverse=True)
    _write_scores(path, scores)


def name_in_list(path: PathLike, name: str) -> bool:
    """Return True if any entry carries this name."""
    return any(entry.name == name for entry in load_high_scores(path))


def first_score(path: PathLike) -> PlayerScore:
    """Return the entry on the first line, or an empty entry if it is invalid."""
    with open(path, encoding="utf-8") as handle:
        first_line = handle.readline()
    entry = parse_score_line(first_line)
    return entry if entry is not None else PlayerScore()


def remove_high_score(path: PathLike, name: str) -> None:
    """Remove every entry with this name and rewrite the table."""
    scores = [entry for entry in load_high_scores(path) if entry.name != name]
    _write_scores(path, scores)


def rank_label(rank: int) -> str:
    """Return the ordinal label shown in front of a table line, e.g. ``1ST``."""
    return f"{rank}{_RANK_SUFFIXES.get(rank, 'TH')}"


def top_scores(path: PathLike, limit: int = DEFAULT_TABLE_SIZE) -> list[tuple[str, PlayerScore]]:
    """Return the first ``limit`` entries of the table with their rank labels."""
    entries = islice(load_high_scores(path), limit)
    return [(rank_label(rank), entry) for rank, entry in enumerate(entries, start=1)]