from __future__ import annotations

import pytest

from barnyard.config import CLASSIC, COMPACT, GameConfig


def test_presets_differ_only_in_height() -> None:
    assert (CLASSIC.rows, CLASSIC.cols) == (16, 10)
    assert (COMPACT.rows, COMPACT.cols) == (13, 10)
    assert CLASSIC.normal_weight == pytest.approx(0.88)


@pytest.mark.parametrize(
    "overrides",
    [
        {"cols": 0},
        {"rows": -1},
        {"clear_threshold": 0},
        {"wolves_weight": 1.5},
        {"wolves_weight": 0.6, "black_sheep_weight": 0.6},
        {"min_fall_ms": 700},
        {"initial_eggs": -1},
    ],
)
def test_invalid_settings_rejected(overrides) -> None:
    with pytest.raises(ValueError):
        GameConfig(**overrides)
