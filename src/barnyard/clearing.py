"""Connected-region detection and the cascading clear resolver.

Regions are maximal sets of same-animal cells joined up, down, left or
right.  Wolves, black sheep and empty cells never belong to a region.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from .board import Board
from .events import RegionCleared
from .scoring import ScoringRules
from .tiles import Mark, Tile, is_animal

Cell = Tuple[int, int]

_NEIGHBOURS = ((1, 0), (-1, 0), (0, 1), (0, -1))


@dataclass(frozen=True)
class Region:
    animal: Tile
    cells: Tuple[Cell, ...]

    @property
    def size(self) -> int:
        return len(self.cells)


@dataclass
class ResolveResult:
    """Outcome of running the resolver to a fixpoint."""

    score: int
    cleared: List[RegionCleared] = field(default_factory=list)
    passes: int = 0


def flood_region(
    board: Board,
    x: int,
    y: int,
    seen: Optional[NDArray[np.bool_]] = None,
) -> List[Cell]:
    """Return every cell of the region containing ``(x, y)``.

    ``seen`` is a visited mask shared across calls during a full scan; cells
    are marked as they are discovered.  An empty list is returned when the
    start cell holds no animal.
    """

    if seen is None:
        seen = np.zeros((board.height, board.width), dtype=bool)
    animal = int(board.grid[y, x])
    if not is_animal(animal):
        return []

    stack: deque[Cell] = deque([(x, y)])
    seen[y, x] = True
    cells: List[Cell] = []
    while stack:
        cx, cy = stack.pop()
        cells.append((cx, cy))
        for dx, dy in _NEIGHBOURS:
            nx, ny = cx + dx, cy + dy
            if not board.in_bounds(nx, ny) or seen[ny, nx]:
                continue
            if board.grid[ny, nx] == animal:
                seen[ny, nx] = True
                stack.append((nx, ny))
    return cells


def find_regions(board: Board, min_size: int = 1) -> List[Region]:
    """Scan the board top-left to bottom-right for regions of ``min_size``+."""

    seen = np.zeros((board.height, board.width), dtype=bool)
    regions: List[Region] = []
    for y in range(board.height):
        for x in range(board.width):
            if seen[y, x]:
                continue
            if not is_animal(int(board.grid[y, x])):
                seen[y, x] = True
                continue
            cells = flood_region(board, x, y, seen)
            if len(cells) >= min_size:
                regions.append(Region(Tile(int(board.grid[y, x])), tuple(cells)))
    return regions


def best_group(board: Board) -> Optional[Region]:
    """Return the largest live region, the first found on ties."""

    best: Optional[Region] = None
    for region in find_regions(board):
        if best is None or region.size > best.size:
            best = region
    return best


def count_marks(board: Board, cells: Tuple[Cell, ...]) -> Tuple[int, int]:
    """Return ``(eggs, turds)`` lying under ``cells``."""

    eggs = turds = 0
    for x, y in cells:
        mark = board.overlay[y, x]
        if mark == Mark.EGG:
            eggs += 1
        elif mark == Mark.TURD:
            turds += 1
    return eggs, turds


def resolve_board(board: Board, score: int, rules: Optional[ScoringRules] = None) -> ResolveResult:
    """Clear qualifying regions and apply gravity until none remain.

    Every region found in one pass is scored and cleared before gravity
    runs, then the board is scanned again.  Each pass removes at least
    ``clear_threshold`` tiles so the loop always terminates.
    """

    rules = rules or ScoringRules()
    result = ResolveResult(score=score)
    while True:
        regions = find_regions(board, rules.clear_threshold)
        if not regions:
            break
        result.passes += 1
        for region in regions:
            eggs, turds = count_marks(board, region.cells)
            result.score = rules.score_region(result.score, region.size, eggs, turds)
            for x, y in region.cells:
                board.grid[y, x] = Tile.EMPTY
                board.overlay[y, x] = Mark.NONE
            result.cleared.append(
                RegionCleared(
                    region_size=region.size,
                    animal=region.animal,
                    egg_count=eggs,
                    turd_count=turds,
                    cells=region.cells,
                )
            )
        board.apply_gravity()
    return result
