"""Simple ASCII demo for the barnyard engine.

Run with: `python -m barnyard [seed]`

This module prints a single frame composed of the board, the overlay marks
underneath empty cells and the active piece, useful as a minimal smoke test
that renderers see more than a blank grid.
"""

from __future__ import annotations

import sys

from . import GameConfig, GameSession
from .tiles import Mark, TILE_LABELS, Tile

_MARK_LABELS = {Mark.EGG: "o", Mark.TURD: "~"}


def _print_frame(session: GameSession) -> None:
    grid = session.render_grid()
    for y, row in enumerate(grid):
        line = []
        for x, cell in enumerate(row):
            mark = session.board.get_mark(x, y)
            if cell == Tile.EMPTY and mark != Mark.NONE:
                line.append(_MARK_LABELS[mark])
            else:
                line.append(TILE_LABELS[Tile(cell)])
        print("".join(line))
    upcoming = session.upcoming
    print(f"next: {upcoming.kind.value if upcoming else '-'}  score: {session.display_score}")


def main() -> None:
    seed = int(sys.argv[1]) if len(sys.argv) > 1 else None
    session = GameSession(GameConfig(seed=seed))
    _print_frame(session)


if __name__ == "__main__":
    main()
