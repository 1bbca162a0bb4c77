from __future__ import annotations

import math

import pytest

from frame_planner.core.rounding import round_half_away_from_zero


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0.4, 0),
        (0.5, 1),
        (2.5, 3),
        (100.5, 101),
        (247.487, 247),
        (-0.5, -1),
        (-2.5, -3),
        (-0.4, 0),
        (0.49999999999999994, 0),
        (-0.49999999999999994, 0),
        (1.4999999999999998, 1),
    ],
)
def test_round_half_away_from_zero(value: float, expected: int) -> None:
    assert round_half_away_from_zero(value) == expected


def test_round_half_away_from_zero_differs_from_builtin_round_on_even_ties() -> None:
    assert round(100.5) == 100
    assert round_half_away_from_zero(100.5) == 101


def test_round_half_away_from_zero_rejects_non_finite() -> None:
    with pytest.raises(ValueError):
        round_half_away_from_zero(math.nan)
    with pytest.raises(ValueError):
        round_half_away_from_zero(math.inf)
