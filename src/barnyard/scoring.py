"""Score rules for cleared regions."""

from __future__ import annotations

from dataclasses import dataclass


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number with ``F(1) == F(2) == 1``.

    Non-positive indices yield ``0``.
    """

    if n <= 0:
        return 0
    a, b = 0, 1
    for _ in range(n - 1):
        a, b = b, a + b
    return b


@dataclass(frozen=True)
class ScoringRules:
    clear_threshold: int = 10
    bonus_min_size: int = 11
    bonus_offset: int = 8

    def qualifies(self, size: int) -> bool:
        return size >= self.clear_threshold

    def bonus(self, size: int) -> int:
        """Extra points for a region of ``size`` cells."""

        if size < self.bonus_min_size:
            return 0
        return fibonacci(size - self.bonus_offset)

    def apply_marks(self, score: int, eggs: int, turds: int) -> int:
        """Double ``score`` per egg, then halve it per turd, flooring each step."""

        if eggs:
            score = score * 2 ** eggs
        if turds:
            score = score // 2 ** turds
        return score

    def score_region(self, score: int, size: int, eggs: int = 0, turds: int = 0) -> int:
        """Return the running ``score`` after clearing one region.

        Base and bonus points are added first; the overlay marks under the
        region then scale the whole running total, not just this region's
        share.
        """

        score += size + self.bonus(size)
        return self.apply_marks(score, eggs, turds)
