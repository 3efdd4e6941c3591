import logging
import sys
from pathlib import Path
from random import Random

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from examples.simulate_sessions import log_summary, run_session
from barnyard.config import GameConfig
from barnyard.game_state import GameSession


def test_run_session_reports_counters():
    session = GameSession(GameConfig(seed=4))
    result = run_session(session, steps=3000, rng=Random(4))

    assert result["locks"] > 0
    assert result["locks"] == session.locks
    assert result["score"] == session.display_score
    assert len(session.events) == 0


def test_log_summary_reports_means(caplog):
    results = [
        {"score": 10, "level": 1, "locks": 4, "clears": 1},
        {"score": 30, "level": 2, "locks": 14, "clears": 3},
    ]

    with caplog.at_level(logging.INFO, logger="examples.simulate_sessions"):
        summary = log_summary(results, index=2)

    assert summary["mean_score"] == 20
    assert summary["best_score"] == 30
    message = "".join(caplog.messages)
    assert "mean score 20.0" in message
    assert "best 30" in message
