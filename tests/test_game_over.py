import sys
sys.path.append('src')

import numpy as np

from barnyard.config import GameConfig
from barnyard.events import GameOver
from barnyard.game_state import GameSession
from barnyard.piece import ShapeKey
from barnyard.tiles import Mark, Tile


def _session_with_log():
    session = GameSession(GameConfig(seed=21))
    events = []
    session.subscribe(events.append)
    return session, events


def test_spawn_collision_triggers_game_over():
    session, events = _session_with_log()
    session.board.grid[0:2, :] = Tile.WOLF
    piece = session.generator.make_normal(ShapeKey.O, Tile.PIG)
    piece.y = session.board.height - 2
    session.active = piece
    session.upcoming = session.generator.make_normal(ShapeKey.T, Tile.COW)

    assert session.soft_drop() is False

    assert session.game_over
    assert session.locks == 1
    assert [type(e) for e in events][-1] is GameOver


def test_game_over_freezes_commands():
    session, _ = _session_with_log()
    session.board.grid[0:2, :] = Tile.WOLF
    session.active.y = session.board.height - 4
    session.upcoming = session.generator.make_normal(ShapeKey.I, Tile.SHEEP)
    while session.step():
        pass
    assert session.game_over

    board_before = session.board.grid.copy()
    active_before = (session.active.x, session.active.y)
    assert not session.move_left()
    assert not session.move_right()
    assert not session.rotate_cw()
    assert not session.rotate_ccw()
    assert not session.soft_drop()
    assert not session.step()
    assert not session.tick(10_000)
    assert np.array_equal(session.board.grid, board_before)
    assert (session.active.x, session.active.y) == active_before


def test_lock_above_top_row_ends_game_without_placing():
    session, events = _session_with_log()
    for x in range(3, 7):
        session.board.set_cell(x, 0, Tile.WOLF)
    piece = session.generator.make_normal(ShapeKey.I, Tile.SHEEP)
    piece.y = -2  # the filled row of the matrix sits at row -1
    session.active = piece

    session.soft_drop()

    assert session.game_over
    assert session.locks == 0
    assert int(np.count_nonzero(session.board.grid == Tile.SHEEP)) == 0
    assert sum(isinstance(e, GameOver) for e in events) == 1


def test_restart_fully_resets():
    session, _ = _session_with_log()
    session.score = 77
    session.locks = 30
    session.level = 3
    session.clears = 4
    session.board.grid[:, :] = Tile.WOLF
    session.game_over = True
    session.paused = True
    session.fall_accum = 300

    session.restart()

    assert (session.score, session.level, session.locks, session.clears) == (0, 1, 0, 0)
    assert not session.board.grid.any()
    assert int(np.count_nonzero(session.board.overlay == Mark.EGG)) == 10
    assert int(np.count_nonzero(session.board.overlay == Mark.TURD)) == 10
    assert not session.game_over
    assert not session.paused
    assert session.fall_accum == 0
    assert session.fall_interval == 650
    assert session.active is not None and session.upcoming is not None
    assert session.move_left() or session.move_right()
