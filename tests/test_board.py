from __future__ import annotations

from random import Random

import numpy as np
import pytest

from barnyard.board import Board
from barnyard.tiles import Mark, Tile


def test_cells_round_trip_and_reject_out_of_bounds() -> None:
    board = Board(10, 16)
    board.set_cell(3, 5, Tile.GOAT)
    board.set_mark(3, 5, Mark.EGG)

    assert board.get_cell(3, 5) == Tile.GOAT
    assert board.grid[5, 3] == Tile.GOAT
    assert board.get_mark(3, 5) == Mark.EGG
    assert board.in_bounds(9, 15)
    assert not board.in_bounds(10, 15)

    with pytest.raises(IndexError):
        board.set_cell(10, 0, Tile.SHEEP)
    with pytest.raises(IndexError):
        board.get_cell(0, -1)
    with pytest.raises(IndexError):
        board.set_mark(-1, 0, Mark.TURD)
    with pytest.raises(IndexError):
        board.get_mark(0, 16)


def test_off_board_cells_are_never_empty() -> None:
    board = Board(4, 4)
    assert board.is_empty(0, 0)
    assert not board.is_empty(-1, 0)
    assert not board.is_empty(0, 4)


def test_gravity_compacts_each_column_preserving_order() -> None:
    board = Board(3, 5)
    board.set_cell(0, 0, Tile.SHEEP)
    board.set_cell(0, 2, Tile.GOAT)
    board.set_cell(2, 1, Tile.WOLF)
    board.set_mark(0, 0, Mark.EGG)

    board.apply_gravity()

    assert [board.get_cell(0, y) for y in range(5)] == [
        Tile.EMPTY,
        Tile.EMPTY,
        Tile.EMPTY,
        Tile.SHEEP,
        Tile.GOAT,
    ]
    assert board.get_cell(2, 4) == Tile.WOLF
    assert board.get_cell(1, 4) == Tile.EMPTY
    # The overlay is terrain and stays where it was.
    assert board.get_mark(0, 0) == Mark.EGG
    assert board.get_mark(0, 3) == Mark.NONE


def test_gravity_is_idempotent() -> None:
    rng = Random(12)
    board = Board(10, 16)
    for y in range(16):
        for x in range(10):
            if rng.random() < 0.4:
                board.set_cell(x, y, rng.randint(1, 7))

    board.apply_gravity()
    once = board.grid.copy()
    board.apply_gravity()

    assert np.array_equal(board.grid, once)
    assert board.occupied_count() == int(np.count_nonzero(once))


def test_clone_is_independent() -> None:
    board = Board(5, 5)
    board.set_cell(1, 1, Tile.PIG)
    copy = board.clone()
    copy.set_cell(1, 1, Tile.EMPTY)
    copy.set_mark(2, 2, Mark.TURD)

    assert board.get_cell(1, 1) == Tile.PIG
    assert board.get_mark(2, 2) == Mark.NONE


def test_sprinkle_overlay_fills_bottom_rows_only() -> None:
    board = Board(10, 16)
    board.sprinkle_overlay(Random(3), eggs=10, turds=10, depth=7)

    assert int(np.count_nonzero(board.overlay == Mark.EGG)) == 10
    assert int(np.count_nonzero(board.overlay == Mark.TURD)) == 10
    assert not board.overlay[:9].any()
    assert not board.grid.any()


def test_sprinkle_overlay_gives_up_when_full() -> None:
    board = Board(2, 2)
    board.sprinkle_overlay(Random(0), eggs=3, turds=3, depth=7, max_tries=200)

    assert int(np.count_nonzero(board.overlay == Mark.EGG)) == 3
    assert int(np.count_nonzero(board.overlay == Mark.TURD)) == 1
