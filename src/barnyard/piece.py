"""Falling piece definitions and the rotation kernel.

A piece is a small matrix of tile values anchored on the board by the
position of its top-left corner.  Normal pieces use the seven tetromino-like
shapes on a 4x4 matrix painted with a single animal; the two special kinds
are non-rotating 2x2 blocks of wolves or black sheep.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from .tiles import Tile

Matrix = NDArray[np.uint8]
Cell = Tuple[int, int]


class PieceKind(str, Enum):
    """How a piece behaves when it locks."""

    NORMAL = "normal"
    WOLVES = "wolves"
    BLACK_SHEEP = "black_sheep"


class ShapeKey(str, Enum):
    """The seven normal piece shapes."""

    I = "I"
    O = "O"
    T = "T"
    S = "S"
    Z = "Z"
    J = "J"
    L = "L"


# Spawn orientation of every shape on its 4x4 bounding box.
SHAPES: Dict[ShapeKey, Tuple[Tuple[int, ...], ...]] = {
    ShapeKey.I: ((0, 0, 0, 0), (1, 1, 1, 1), (0, 0, 0, 0), (0, 0, 0, 0)),
    ShapeKey.O: ((0, 1, 1, 0), (0, 1, 1, 0), (0, 0, 0, 0), (0, 0, 0, 0)),
    ShapeKey.T: ((0, 1, 0, 0), (1, 1, 1, 0), (0, 0, 0, 0), (0, 0, 0, 0)),
    ShapeKey.S: ((0, 1, 1, 0), (1, 1, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0)),
    ShapeKey.Z: ((1, 1, 0, 0), (0, 1, 1, 0), (0, 0, 0, 0), (0, 0, 0, 0)),
    ShapeKey.J: ((1, 0, 0, 0), (1, 1, 1, 0), (0, 0, 0, 0), (0, 0, 0, 0)),
    ShapeKey.L: ((0, 0, 1, 0), (1, 1, 1, 0), (0, 0, 0, 0), (0, 0, 0, 0)),
}

SPECIAL_TILES: Dict[PieceKind, Tile] = {
    PieceKind.WOLVES: Tile.WOLF,
    PieceKind.BLACK_SHEEP: Tile.BLACK_SHEEP,
}


def shape_matrix(shape: ShapeKey, tile: Tile) -> Matrix:
    """Return the spawn matrix for ``shape`` painted with ``tile``."""

    mask = np.array(SHAPES[shape], dtype=np.uint8)
    return mask * np.uint8(tile)


def special_matrix(kind: PieceKind) -> Matrix:
    return np.full((2, 2), SPECIAL_TILES[kind], dtype=np.uint8)


def rotate_matrix(matrix: Matrix, clockwise: bool = True) -> Matrix:
    """Return ``matrix`` turned a quarter turn.

    The whole bounding box is rotated, so a 4x4 matrix stays 4x4 and the
    cells move within it rather than being re-normalised to the corner.
    """

    return np.ascontiguousarray(np.rot90(matrix, k=-1 if clockwise else 1))


@dataclass(eq=False)
class Piece:
    """The falling entity controlled by the player."""

    kind: PieceKind
    matrix: Matrix
    x: int = 0
    y: int = 0
    rotates: bool = True
    shape: Optional[ShapeKey] = None
    tile: Tile = field(default=Tile.EMPTY)

    def move(self, dx: int, dy: int) -> None:
        self.x += dx
        self.y += dy

    def cells(
        self, dx: int = 0, dy: int = 0, matrix: Optional[Matrix] = None
    ) -> List[Cell]:
        """Return absolute ``(x, y)`` board coordinates of every filled cell.

        ``dx``/``dy`` offset the anchor and ``matrix`` replaces the piece's
        own matrix, which lets callers probe a candidate transform without
        mutating the piece.
        """

        m = self.matrix if matrix is None else matrix
        rows, cols = np.nonzero(m)
        return [
            (self.x + int(c) + dx, self.y + int(r) + dy) for r, c in zip(rows, cols)
        ]

    def tiles(self) -> List[Tuple[int, int, Tile]]:
        """Return ``(x, y, tile)`` for every filled cell."""

        return [(x, y, Tile(int(self.matrix[y - self.y, x - self.x]))) for x, y in self.cells()]

    def footprint(self, width: int, height: int) -> List[Cell]:
        """Return the filled cells that lie on a ``width`` x ``height`` board."""

        return [(x, y) for x, y in self.cells() if 0 <= x < width and 0 <= y < height]

    def copy(self) -> "Piece":
        return Piece(
            kind=self.kind,
            matrix=self.matrix.copy(),
            x=self.x,
            y=self.y,
            rotates=self.rotates,
            shape=self.shape,
            tile=self.tile,
        )
