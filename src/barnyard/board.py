"""Board representation for the barnyard playfield.

The board holds two independent layers of the same shape: the placed tiles
and the overlay marks.  Coordinates are given as ``(x, y)`` with ``x`` the
column and ``y`` the row, row ``0`` being the spawn row at the top.  Both
layers are stored as ``numpy`` arrays indexed ``[y, x]``.
"""

from __future__ import annotations

from random import Random

import numpy as np
from numpy.typing import NDArray

from .tiles import Mark, Tile


# Reference dimensions of the playfield.
WIDTH = 10
HEIGHT = 16

Grid = NDArray[np.uint8]


def create_empty_grid(rows: int = HEIGHT, cols: int = WIDTH) -> Grid:
    """Return a new grid of ``rows`` x ``cols`` zeros."""

    return np.zeros((rows, cols), dtype=np.uint8)


class Board:
    """Placed tiles plus the overlay of eggs and turds."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        self.width = width
        self.height = height
        self.grid: Grid = create_empty_grid(height, width)
        self.overlay: Grid = create_empty_grid(height, width)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_cell(self, x: int, y: int) -> Tile:
        """Return the tile at ``(x, y)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if self.in_bounds(x, y):
            return Tile(int(self.grid[y, x]))
        raise IndexError("Cell out of bounds")

    def set_cell(self, x: int, y: int, tile: int) -> None:
        """Write ``tile`` at ``(x, y)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if self.in_bounds(x, y):
            self.grid[y, x] = np.uint8(tile)
        else:
            raise IndexError("Cell out of bounds")

    def get_mark(self, x: int, y: int) -> Mark:
        if self.in_bounds(x, y):
            return Mark(int(self.overlay[y, x]))
        raise IndexError("Cell out of bounds")

    def set_mark(self, x: int, y: int, mark: int) -> None:
        if self.in_bounds(x, y):
            self.overlay[y, x] = np.uint8(mark)
        else:
            raise IndexError("Cell out of bounds")

    def is_empty(self, x: int, y: int) -> bool:
        """Return ``True`` if the cell at ``(x, y)`` holds no tile.

        Any coordinates outside the board are treated as occupied so that
        off-board positions are rejected by collision checks.
        """

        if self.in_bounds(x, y):
            return bool(self.grid[y, x] == Tile.EMPTY)
        return False

    def clone(self) -> "Board":
        """Return an independent copy of both layers."""

        copy = Board(self.width, self.height)
        copy.grid = self.grid.copy()
        copy.overlay = self.overlay.copy()
        return copy

    def clear(self) -> None:
        self.grid.fill(0)
        self.overlay.fill(0)

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.grid))

    def apply_gravity(self) -> None:
        """Compact every column so its tiles rest on the floor.

        Relative top-to-bottom order inside a column is preserved.  The
        overlay is terrain and does not move.
        """

        for x in range(self.width):
            column = self.grid[:, x]
            tiles = column[column != Tile.EMPTY]
            if tiles.size == self.height:
                continue
            compacted = np.zeros(self.height, dtype=self.grid.dtype)
            if tiles.size:
                compacted[self.height - tiles.size:] = tiles
            self.grid[:, x] = compacted

    def sprinkle_overlay(
        self,
        rng: Random,
        *,
        eggs: int,
        turds: int,
        depth: int = 7,
        max_tries: int = 8000,
    ) -> None:
        """Reset the overlay and scatter marks over the bottom ``depth`` rows."""

        self.overlay.fill(0)
        start_row = max(self.height - depth, 0)
        self._place_marks(rng, Mark.EGG, eggs, start_row, max_tries)
        self._place_marks(rng, Mark.TURD, turds, start_row, max_tries)

    def _place_marks(
        self, rng: Random, mark: Mark, count: int, start_row: int, max_tries: int
    ) -> None:
        tries = 0
        span = self.height - start_row
        while count > 0 and tries < max_tries and span > 0:
            tries += 1
            x = rng.randrange(self.width)
            y = start_row + rng.randrange(span)
            if self.overlay[y, x] == Mark.NONE:
                self.overlay[y, x] = np.uint8(mark)
                count -= 1
