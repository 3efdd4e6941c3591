"""Play random sessions headlessly and log how they went.

Run with::

    PYTHONPATH=src python examples/simulate_sessions.py

Pass ``--help`` to see options for the number of games, the per-game step
cap and periodic logging summaries.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from random import Random

from barnyard.config import CLASSIC, COMPACT
from barnyard.events import Event, RegionCleared, WolvesBlast
from barnyard.game_state import GameSession


LOGGER = logging.getLogger(__name__)

COMMANDS = ("move_left", "move_right", "rotate_cw", "rotate_ccw", "soft_drop")


def run_session(session: GameSession, steps: int, rng: Random) -> dict[str, int]:
    """Drive ``session`` with random commands until game over or ``steps``."""

    tally = {"regions": 0, "blasts": 0, "popped": 0}

    def on_event(event: Event) -> None:
        if isinstance(event, RegionCleared):
            tally["regions"] += 1
        elif isinstance(event, WolvesBlast):
            tally["blasts"] += 1
            tally["popped"] += len(event.popped)

    unsubscribe = session.subscribe(on_event)
    try:
        for _ in range(steps):
            if session.game_over:
                break
            getattr(session, rng.choice(COMMANDS))()
            session.tick(session.config.tick_ms)
    finally:
        unsubscribe()
    return {
        "score": session.display_score,
        "level": session.level,
        "locks": session.locks,
        "clears": session.clears,
        **tally,
    }


def _format_result(result: dict[str, int]) -> str:
    return ", ".join(f"{key}={value}" for key, value in result.items())


def log_summary(results: list[dict[str, int]], *, index: int) -> dict[str, float]:
    if not results:
        LOGGER.info("Game %d: no sessions played", index)
        return {}
    summary = {
        "games": float(len(results)),
        "mean_score": sum(r["score"] for r in results) / len(results),
        "best_score": float(max(r["score"] for r in results)),
        "mean_locks": sum(r["locks"] for r in results) / len(results),
    }
    LOGGER.info(
        "After %d games: mean score %.1f, best %d, mean locks %.1f",
        index,
        summary["mean_score"],
        int(summary["best_score"]),
        summary["mean_locks"],
    )
    return summary


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--games", type=int, default=10, help="How many games to play.")
    parser.add_argument("--steps", type=int, default=20000, help="Command cap per game.")
    parser.add_argument("--seed", type=int, default=0, help="Seed for the board and the player.")
    parser.add_argument(
        "--preset",
        choices=("classic", "compact"),
        default="classic",
        help="Board preset (16 or 13 rows).",
    )
    parser.add_argument(
        "--log-interval",
        type=int,
        default=5,
        help="Emit a summary every N games (0 disables periodic logging).",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")

    preset = CLASSIC if args.preset == "classic" else COMPACT
    config = replace(preset, seed=args.seed)
    session = GameSession(config)
    player = Random(args.seed)
    results: list[dict[str, int]] = []
    for game_idx in range(1, args.games + 1):
        if game_idx > 1:
            session.restart()
        result = run_session(session, args.steps, player)
        results.append(result)
        LOGGER.debug("Game %d: %s", game_idx, _format_result(result))
        if (args.log_interval > 0 and game_idx % args.log_interval == 0) or game_idx == args.games:
            log_summary(results, index=game_idx)


if __name__ == "__main__":
    main()
