"""Weighted random piece generation."""

from __future__ import annotations

from random import Random
from typing import Optional

from .config import GameConfig
from .piece import (
    Piece,
    PieceKind,
    ShapeKey,
    SPECIAL_TILES,
    shape_matrix,
    special_matrix,
)
from .tiles import ANIMALS, Tile


class PieceGenerator:
    """Produce new pieces from an injected random source.

    Each spawn draws one uniform number to pick the kind: the first
    ``wolves_weight`` of the unit interval yields wolves, the next
    ``black_sheep_weight`` yields a black sheep and the remainder a normal
    piece.  Normal pieces then draw a shape and an animal independently.
    """

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[Random] = None) -> None:
        self.config = config or GameConfig()
        self.rng = rng if rng is not None else Random(self.config.seed)

    def spawn_kind(self) -> PieceKind:
        r = self.rng.random()
        if r < self.config.wolves_weight:
            return PieceKind.WOLVES
        if r < self.config.wolves_weight + self.config.black_sheep_weight:
            return PieceKind.BLACK_SHEEP
        return PieceKind.NORMAL

    def spawn(self) -> Piece:
        kind = self.spawn_kind()
        if kind is PieceKind.NORMAL:
            shape = self.rng.choice(list(ShapeKey))
            animal = self.rng.choice(ANIMALS)
            return self.make_normal(shape, animal)
        return self.make_special(kind)

    def make_normal(self, shape: ShapeKey, animal: Tile) -> Piece:
        """Build a normal piece at its spawn anchor."""

        return Piece(
            kind=PieceKind.NORMAL,
            matrix=shape_matrix(shape, animal),
            x=self.config.cols // 2 - 2,
            y=0,
            rotates=True,
            shape=shape,
            tile=Tile(animal),
        )

    def make_special(self, kind: PieceKind) -> Piece:
        """Build a 2x2 wolves or black sheep piece at its spawn anchor."""

        if kind not in SPECIAL_TILES:
            raise ValueError(f"{kind!r} is not a special piece kind")
        return Piece(
            kind=kind,
            matrix=special_matrix(kind),
            x=self.config.cols // 2 - 1,
            y=0,
            rotates=False,
            tile=SPECIAL_TILES[kind],
        )
