"""Committing a resting piece to the board.

Normal pieces are written as-is.  Black sheep are written and then turned
into the animal that dominates their neighbourhood.  Wolves never land:
they eat everything around them instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from random import Random
from typing import Dict, List, Optional, Tuple

from .board import Board
from .piece import Piece, PieceKind
from .tiles import ANIMALS, Mark, Tile, is_animal

Cell = Tuple[int, int]
Popped = Tuple[int, int, Tile]

_ORTHOGONAL = ((1, 0), (-1, 0), (0, 1), (0, -1))
_MOORE = tuple((dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1))


@dataclass
class LockResult:
    kind: PieceKind
    topped_out: bool = False
    popped: Tuple[Popped, ...] = ()
    converted_to: Optional[Tile] = None


def blast_cells(board: Board, piece: Piece) -> List[Cell]:
    """Return the on-board cells within one step (diagonals included) of the piece."""

    blast = set()
    for x, y in piece.footprint(board.width, board.height):
        for dx, dy in _MOORE:
            nx, ny = x + dx, y + dy
            if board.in_bounds(nx, ny):
                blast.add((nx, ny))
    return sorted(blast, key=lambda cell: (cell[1], cell[0]))


def wolves_blast(board: Board, piece: Piece) -> List[Popped]:
    """Empty every tile around ``piece`` and wipe the overlay under the blast.

    Returns ``(x, y, prior_tile)`` for each tile that was removed.
    """

    popped: List[Popped] = []
    for x, y in blast_cells(board, piece):
        tile = int(board.grid[y, x])
        if tile != Tile.EMPTY:
            popped.append((x, y, Tile(tile)))
            board.grid[y, x] = Tile.EMPTY
        board.overlay[y, x] = Mark.NONE
    return popped


def neighbour_tally(board: Board, cells: List[Cell]) -> Dict[Tile, int]:
    """Count animal tiles orthogonally adjacent to each of ``cells``.

    A tile next to two footprint cells is counted twice.
    """

    counts = {animal: 0 for animal in ANIMALS}
    for x, y in cells:
        for dx, dy in _ORTHOGONAL:
            nx, ny = x + dx, y + dy
            if not board.in_bounds(nx, ny):
                continue
            tile = int(board.grid[ny, nx])
            if is_animal(tile):
                counts[Tile(tile)] += 1
    return counts


def choose_conversion(board: Board, piece: Piece, rng: Random) -> Tile:
    """Pick the animal a black sheep turns into.

    The most common neighbouring animal wins; ties are settled by a uniform
    draw among the tied animals and an animal-free neighbourhood draws from
    all five.
    """

    counts = neighbour_tally(board, piece.footprint(board.width, board.height))
    best = max(counts.values())
    if best <= 0:
        return rng.choice(ANIMALS)
    tied = [animal for animal in ANIMALS if counts[animal] == best]
    return rng.choice(tied)


def place_piece(board: Board, piece: Piece) -> bool:
    """Write every filled cell of ``piece`` onto the board.

    Returns ``False`` without touching the board when any cell is still above
    the top row.
    """

    placed = piece.tiles()
    if any(y < 0 for _, y, _ in placed):
        return False
    for x, y, tile in placed:
        board.set_cell(x, y, tile)
    return True


def lock_piece(board: Board, piece: Piece, rng: Random) -> LockResult:
    """Commit ``piece`` according to its kind and report what happened."""

    if piece.kind is PieceKind.WOLVES:
        return LockResult(kind=piece.kind, popped=tuple(wolves_blast(board, piece)))

    if not place_piece(board, piece):
        return LockResult(kind=piece.kind, topped_out=True)

    if piece.kind is PieceKind.BLACK_SHEEP:
        chosen = choose_conversion(board, piece, rng)
        for x, y in piece.footprint(board.width, board.height):
            board.set_cell(x, y, chosen)
        return LockResult(kind=piece.kind, converted_to=chosen)

    return LockResult(kind=piece.kind)
