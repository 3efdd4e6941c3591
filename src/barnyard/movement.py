"""Translation, rotation and drop probing for the active piece.

All functions mutate the piece in place only when the move is legal and
report the outcome as a boolean.  A ``False`` result is a blocked move, not
an error.
"""

from __future__ import annotations

from typing import Tuple

from .board import Board
from .piece import Piece, rotate_matrix
from .utils import collides


# Horizontal offsets tried in order when a rotation is blocked in place.
KICK_OFFSETS: Tuple[int, ...] = (0, -1, 1, -2, 2)


def move_horizontal(board: Board, piece: Piece, dx: int) -> bool:
    """Shift ``piece`` sideways by ``dx`` columns if nothing is in the way."""

    if collides(board, piece, dx, 0):
        return False
    piece.move(dx, 0)
    return True


def soft_drop_step(board: Board, piece: Piece) -> bool:
    """Advance ``piece`` one row.

    Returns ``False`` when the piece is resting and must be locked instead.
    """

    if collides(board, piece, 0, 1):
        return False
    piece.move(0, 1)
    return True


def rotate(board: Board, piece: Piece, clockwise: bool = True) -> bool:
    """Rotate ``piece`` a quarter turn, kicking sideways if needed.

    The first offset in :data:`KICK_OFFSETS` at which the rotated matrix fits
    wins and the anchor shifts by it.  When no offset fits the piece keeps
    its matrix and position.
    """

    if not piece.rotates:
        return False
    rotated = rotate_matrix(piece.matrix, clockwise)
    for offset in KICK_OFFSETS:
        if not collides(board, piece, offset, 0, rotated):
            piece.matrix = rotated
            piece.move(offset, 0)
            return True
    return False


def ghost_row(board: Board, piece: Piece) -> int:
    """Return the row ``piece`` would rest on if dropped straight down."""

    row = piece.y
    while not collides(board, piece, 0, row - piece.y + 1):
        row += 1
    return row
