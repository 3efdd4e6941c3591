import math
import sys
sys.path.append('src')

from barnyard.config import GameConfig
from barnyard.game_state import GameSession
from barnyard.piece import PieceKind
from barnyard.utils import fall_interval_ms, level_for_locks


def _lock_wolves(session: GameSession) -> None:
    """Drop a wolves piece; on an empty board it never leaves tiles behind."""

    session.active = session.generator.make_special(PieceKind.WOLVES)
    while session.step():
        pass


def test_level_advances_every_12_locks():
    assert level_for_locks(0) == 1
    assert level_for_locks(11) == 1
    assert level_for_locks(12) == 2
    assert level_for_locks(35) == 3
    assert level_for_locks(36) == 4


def test_fall_interval_decays_to_floor():
    assert fall_interval_ms(1) == 650
    assert fall_interval_ms(2) == math.floor(650 * 0.88)
    assert fall_interval_ms(5) == math.floor(650 * 0.88 ** 4)
    assert fall_interval_ms(50) == 120
    intervals = [fall_interval_ms(level) for level in range(1, 30)]
    assert intervals == sorted(intervals, reverse=True)


def test_session_recomputes_level_after_each_lock():
    session = GameSession(GameConfig(seed=3))
    for _ in range(11):
        _lock_wolves(session)
    assert session.locks == 11
    assert session.level == 1
    assert session.fall_interval == 650

    _lock_wolves(session)
    assert session.locks == 12
    assert session.level == 2
    assert session.fall_interval == fall_interval_ms(2)


def test_reset_resets_counters():
    session = GameSession(GameConfig(seed=3))
    for _ in range(13):
        _lock_wolves(session)
    session.restart()
    assert session.locks == 0
    assert session.level == 1
    assert session.fall_interval == 650
