from __future__ import annotations

import numpy as np

from barnyard.config import GameConfig
from barnyard.events import PieceLocked, RegionCleared, WolvesBlast
from barnyard.game_state import GameSession
from barnyard.piece import PieceKind, ShapeKey
from barnyard.tiles import Tile


def _session(seed: int = 8) -> GameSession:
    return GameSession(GameConfig(seed=seed))


def test_new_session_state() -> None:
    session = _session()

    assert (session.score, session.level, session.locks, session.clears) == (0, 1, 0, 0)
    assert session.fall_interval == 650
    assert session.active is not None and session.active.y == 0
    assert session.upcoming is not None
    assert not session.board.grid.any()
    assert not session.paused and not session.game_over


def test_same_seed_same_game() -> None:
    first, second = _session(4), _session(4)

    assert np.array_equal(first.board.overlay, second.board.overlay)
    assert first.active.kind is second.active.kind
    assert np.array_equal(first.active.matrix, second.active.matrix)
    assert np.array_equal(first.upcoming.matrix, second.upcoming.matrix)


def test_horizontal_moves_until_wall() -> None:
    session = _session()
    session.active = session.generator.make_normal(ShapeKey.O, Tile.SHEEP)

    moves = 0
    while session.move_left():
        moves += 1

    assert moves == 4
    assert session.active.x == -1
    assert session.move_right()


def test_pause_blocks_commands_but_not_reads() -> None:
    session = _session()
    session.set_paused(True)
    position = (session.active.x, session.active.y)

    assert not session.move_left()
    assert not session.rotate_cw()
    assert not session.soft_drop()
    assert not session.tick(5_000)
    assert (session.active.x, session.active.y) == position
    assert session.snapshot().paused

    session.set_paused(False)
    assert session.soft_drop()
    assert session.active.y == position[1] + 1


def test_tick_steps_once_interval_is_reached() -> None:
    session = _session()
    start = session.active.y

    assert not session.tick(649)
    assert session.active.y == start
    assert session.tick(1)
    assert session.active.y == start + 1
    assert session.fall_accum == 0


def test_lock_promotes_upcoming_piece() -> None:
    session = _session()
    session.active = session.generator.make_normal(ShapeKey.O, Tile.SHEEP)
    upcoming = session.generator.make_normal(ShapeKey.T, Tile.COW)
    session.upcoming = upcoming

    while session.soft_drop():
        pass

    assert session.locks == 1
    assert session.active is upcoming
    assert session.upcoming is not upcoming
    assert int(np.count_nonzero(session.board.grid == Tile.SHEEP)) == 4


def test_clear_scores_and_emits_events() -> None:
    session = _session()
    session.board.overlay[:] = 0
    for x in range(8):
        session.board.set_cell(x, 15, Tile.SHEEP)
    piece = session.generator.make_normal(ShapeKey.O, Tile.SHEEP)
    piece.x = 7
    session.active = piece
    events = []
    session.subscribe(events.append)

    while session.soft_drop():
        pass

    assert session.score == 12 + 3
    assert session.clears == 1
    assert isinstance(events[0], RegionCleared)
    assert (events[0].region_size, events[0].animal) == (12, Tile.SHEEP)
    assert (events[0].egg_count, events[0].turd_count) == (0, 0)
    assert isinstance(events[-1], PieceLocked)
    assert not session.board.grid.any()


def test_wolves_lock_emits_popped_cells() -> None:
    session = _session()
    session.board.set_cell(4, 15, Tile.GOAT)
    session.active = session.generator.make_special(PieceKind.WOLVES)
    events = []
    unsubscribe = session.subscribe(events.append)

    while session.step():
        pass

    blasts = [e for e in events if isinstance(e, WolvesBlast)]
    assert blasts == [WolvesBlast(popped=((4, 15, Tile.GOAT),))]
    assert session.locks == 1
    assert not session.board.grid.any()

    unsubscribe()
    session.active = session.generator.make_special(PieceKind.WOLVES)
    while session.step():
        pass
    assert len(blasts) == 1
    assert len([e for e in events if isinstance(e, WolvesBlast)]) == 1


def test_snapshot_is_a_detached_copy() -> None:
    session = _session()
    for x in range(3):
        session.board.set_cell(x, 15, Tile.PIG)
    session.score = -5

    snap = session.snapshot()
    snap.board[15, 0] = Tile.EMPTY
    snap.active.move(1, 0)

    assert session.board.get_cell(0, 15) == Tile.PIG
    assert snap.active.x == session.active.x + 1
    assert snap.display_score == 0
    assert snap.best_group.animal == Tile.PIG
    assert snap.best_group.size == 3
    assert snap.ghost_row == session.ghost_row()


def test_render_grid_paints_active_piece() -> None:
    session = _session()
    session.active = session.generator.make_normal(ShapeKey.I, Tile.CHICKEN)

    grid = session.render_grid()

    assert grid[1][3:7] == [int(Tile.CHICKEN)] * 4
    assert not session.board.grid.any()


def test_sessions_do_not_share_state() -> None:
    first, second = _session(1), _session(1)
    first.board.set_cell(0, 15, Tile.COW)
    first.score = 10

    assert second.board.get_cell(0, 15) == Tile.EMPTY
    assert second.score == 0
    assert first.rng is not second.rng
