"""Falling-block barnyard puzzle engine.

Pieces made of animal tiles fall onto a board; ten or more connected tiles
of the same animal are cleared for points.
"""

from .board import Board
from .clearing import Region, best_group, find_regions, flood_region, resolve_board
from .config import CLASSIC, COMPACT, GameConfig
from .events import EventHub, GameOver, PieceLocked, RegionCleared, WolvesBlast
from .game_state import GameSession, SessionSnapshot
from .generator import PieceGenerator
from .movement import KICK_OFFSETS, ghost_row, move_horizontal, rotate, soft_drop_step
from .piece import Piece, PieceKind, ShapeKey, rotate_matrix
from .scoring import ScoringRules, fibonacci
from .tiles import ANIMALS, Mark, Tile
from .utils import collides, fall_interval_ms, level_for_locks, render_grid

__all__ = [
    "ANIMALS",
    "Board",
    "CLASSIC",
    "COMPACT",
    "EventHub",
    "GameConfig",
    "GameOver",
    "GameSession",
    "KICK_OFFSETS",
    "Mark",
    "Piece",
    "PieceGenerator",
    "PieceKind",
    "PieceLocked",
    "Region",
    "RegionCleared",
    "ScoringRules",
    "SessionSnapshot",
    "ShapeKey",
    "Tile",
    "WolvesBlast",
    "best_group",
    "collides",
    "fall_interval_ms",
    "fibonacci",
    "find_regions",
    "flood_region",
    "ghost_row",
    "level_for_locks",
    "move_horizontal",
    "render_grid",
    "resolve_board",
    "rotate",
    "rotate_matrix",
    "soft_drop_step",
]
