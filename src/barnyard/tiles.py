"""Tile and overlay mark definitions.

Board cells store the integer value of a :class:`Tile`; overlay cells store
the integer value of a :class:`Mark`.  ``0`` is always the empty value so a
freshly zeroed grid is an empty board.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, Tuple


class Tile(IntEnum):
    """Identity painted on one board cell."""

    EMPTY = 0
    SHEEP = 1
    GOAT = 2
    CHICKEN = 3
    COW = 4
    PIG = 5
    WOLF = 6
    BLACK_SHEEP = 7


class Mark(IntEnum):
    """Terrain modifier on one overlay cell."""

    NONE = 0
    EGG = 1
    TURD = 2


# Only these kinds ever form clearable regions.
ANIMALS: Tuple[Tile, ...] = (
    Tile.SHEEP,
    Tile.GOAT,
    Tile.CHICKEN,
    Tile.COW,
    Tile.PIG,
)

GROUP_NAMES: Dict[Tile, str] = {
    Tile.SHEEP: "flock",
    Tile.GOAT: "herd",
    Tile.CHICKEN: "flock",
    Tile.COW: "herd",
    Tile.PIG: "sounder",
}

TILE_LABELS: Dict[Tile, str] = {
    Tile.EMPTY: ".",
    Tile.SHEEP: "S",
    Tile.GOAT: "G",
    Tile.CHICKEN: "C",
    Tile.COW: "M",
    Tile.PIG: "P",
    Tile.WOLF: "W",
    Tile.BLACK_SHEEP: "B",
}

TILE_COLORS: Dict[Tile, Tuple[int, int, int]] = {
    Tile.SHEEP: (203, 213, 225),
    Tile.GOAT: (215, 182, 140),
    Tile.CHICKEN: (243, 230, 164),
    Tile.COW: (185, 199, 255),
    Tile.PIG: (255, 192, 203),
    Tile.WOLF: (123, 135, 153),
    Tile.BLACK_SHEEP: (18, 18, 26),
}


def is_animal(value: int) -> bool:
    """Return ``True`` if ``value`` is one of the five clearable animals."""

    return Tile.SHEEP <= value <= Tile.PIG


def group_name(tile: Tile) -> str:
    """Return the collective noun used when ``tile`` is cleared."""

    return GROUP_NAMES.get(Tile(tile), "group")
