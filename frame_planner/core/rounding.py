from __future__ import annotations

import math


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, ties going away from zero (2.5 -> 3, -2.5 -> -3).

    The builtin ``round`` uses banker's rounding, which drops a pixel on
    exact halves such as 100.5.
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot round non-finite value: {value}")
    magnitude = abs(value)
    whole = math.floor(magnitude)
    # Comparing the fraction avoids ``magnitude + 0.5`` rounding up just below a half.
    if magnitude - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, value)) if whole else 0
