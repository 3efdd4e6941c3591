"""Tunable game settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GameConfig:
    """Every knob of a session in one place.

    The two shipped presets only differ in board height; all other defaults
    are shared.
    """

    cols: int = 10
    rows: int = 16
    clear_threshold: int = 10
    base_fall_ms: int = 650
    min_fall_ms: int = 120
    fall_decay: float = 0.88
    locks_per_level: int = 12
    wolves_weight: float = 0.04
    black_sheep_weight: float = 0.08
    initial_eggs: int = 10
    initial_turds: int = 10
    overlay_depth: int = 7
    overlay_tries: int = 8000
    tick_ms: int = 16
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.cols <= 0 or self.rows <= 0:
            raise ValueError("Board dimensions must be positive")
        if self.clear_threshold < 1:
            raise ValueError("Clear threshold must be at least 1")
        if self.locks_per_level < 1:
            raise ValueError("locks_per_level must be at least 1")
        for name in ("wolves_weight", "black_sheep_weight"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must lie in [0, 1]")
        if self.wolves_weight + self.black_sheep_weight > 1.0:
            raise ValueError("Special piece weights exceed 1")
        if self.min_fall_ms > self.base_fall_ms:
            raise ValueError("min_fall_ms cannot exceed base_fall_ms")
        if min(self.initial_eggs, self.initial_turds, self.overlay_depth) < 0:
            raise ValueError("Overlay settings must be non-negative")

    @property
    def normal_weight(self) -> float:
        return 1.0 - self.wolves_weight - self.black_sheep_weight


CLASSIC = GameConfig()
COMPACT = GameConfig(rows=13)
