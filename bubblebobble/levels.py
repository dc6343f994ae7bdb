"""Reading level layouts and enemy spawns from the levels text file."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]

LEVEL_FILE = "Levels.txt"
LEVEL_SEPARATOR = "-"
STAGE_END = ":"
STAGE_START_MARKER = "01"
ROW_PREFIX_LENGTH = 2

_ENEMY_PATTERN = re.compile(r"(\D+): (\d+), (\d+)")


class TileKind(Enum):
    """What a character in the stage grid places."""

    PLATFORM = "p"
    WALL = "w"
    FILLER = "f"

    @property
    def collides(self) -> bool:
        return self is not TileKind.FILLER


class EnemyType(Enum):
    ZEN_CHAN = "ZenChan"
    MAITA = "Maita"


@dataclass(frozen=True)
class Tile:
    row: int
    col: int
    kind: TileKind


@dataclass(frozen=True)
class EnemySpawn:
    kind: EnemyType
    x: float
    y: float


@dataclass
class LevelData:
    level_number: int
    tiles: list[Tile] = field(default_factory=list)
    enemies: list[EnemySpawn] = field(default_factory=list)

    @property
    def sprite_col(self) -> int:
        """Column of the tile sheet used for this level's tiles."""
        return self.level_number - 1


def extract_level_block(text: str, level_number: int) -> str:
    """Return the section of ``text`` for the level, from its first row on.

    Sections are separated by ``-``; the first one mentioning ``Level N`` is
    taken. An empty string is returned when there is no such section.
    """
    marker = f"Level {level_number}"
    for chunk in text.split(LEVEL_SEPARATOR):
        if marker in chunk:
            start = chunk.find(STAGE_START_MARKER)
            return "" if start == -1 else chunk[start:]
    return ""


def parse_stage(block: str) -> list[Tile]:
    """Parse the grid part of a level block, up to the first ``:``."""
    stage = block.split(STAGE_END, 1)[0]
    kinds = {kind.value: kind for kind in TileKind}
    tiles = []
    for row, line in enumerate(stage.splitlines()):
        if len(line) >= ROW_PREFIX_LENGTH:
            line = line[ROW_PREFIX_LENGTH:]
        tiles.extend(
            Tile(row, col, kinds[char]) for col, char in enumerate(line) if char in kinds
        )
    return tiles


def parse_enemies(block: str) -> list[EnemySpawn]:
    """Parse the ``Name: x, y`` lines that follow the first ``:`` of a block."""
    _, _, rest = block.partition(STAGE_END)
    known = {kind.value: kind for kind in EnemyType}
    spawns = []
    for line in rest.split("\n"):
        match = _ENEMY_PATTERN.fullmatch(line)
        if match is None or match.group(1) not in known:
            continue
        spawns.append(
            EnemySpawn(known[match.group(1)], float(match.group(2)), float(match.group(3)))
        )
    return spawns


def load_level(path: PathLike, level_number: int) -> LevelData:
    """Read the levels file and return the layout and enemies of one level."""
    with open(path, encoding="utf-8") as handle:
        text = handle.read()
    block = extract_level_block(text, level_number)
    return LevelData(level_number, parse_stage(block), parse_enemies(block))