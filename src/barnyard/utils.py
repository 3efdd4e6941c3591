"""Utility helpers for the barnyard engine."""

from __future__ import annotations

import math
from typing import List, Optional

from .board import Board
from .piece import Matrix, Piece


BASE_FALL_MS = 650
MIN_FALL_MS = 120
FALL_DECAY = 0.88
LOCKS_PER_LEVEL = 12


def collides(
    board: Board,
    piece: Piece,
    dx: int = 0,
    dy: int = 0,
    matrix: Optional[Matrix] = None,
) -> bool:
    """Return ``True`` if ``piece`` offset by ``dx``/``dy`` would not fit.

    Every filled cell of ``matrix`` (or the piece's own matrix) is translated
    to board coordinates.  A cell off any edge of the board, including above
    the top row, or on a non-empty tile counts as a collision.  Overlay marks
    never block.
    """

    for x, y in piece.cells(dx, dy, matrix):
        if not board.is_empty(x, y):
            return True
    return False


def level_for_locks(locks: int, locks_per_level: int = LOCKS_PER_LEVEL) -> int:
    """Return the level reached after ``locks`` pieces have locked."""

    return 1 + locks // locks_per_level


def fall_interval_ms(
    level: int,
    base_ms: int = BASE_FALL_MS,
    min_ms: int = MIN_FALL_MS,
    decay: float = FALL_DECAY,
) -> int:
    """Return the gravity interval in milliseconds for ``level``.

    The interval decays exponentially with each level above the first and
    never drops below ``min_ms``.
    """

    return max(min_ms, math.floor(base_ms * decay ** (level - 1)))


def render_grid(board: Board, active: Optional[Piece] = None) -> List[List[int]]:
    """Return a copy of the tile grid with the active piece painted in.

    Renderers and agents get a single 2D array to draw without the piece
    being locked.  Cells of the piece that are off the board are skipped.
    """

    grid = board.grid.tolist()
    if active is not None:
        for x, y, tile in active.tiles():
            if board.in_bounds(x, y):
                grid[y][x] = int(tile)
    return grid
