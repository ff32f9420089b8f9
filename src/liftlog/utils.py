"""Shared numeric helpers for the load suggestion engine."""

from __future__ import annotations

import math
from collections.abc import Sequence


def round_to_half(value: float) -> float:
    """Round to the nearest 0.5 kg, halves rounding up (80.25 -> 80.5).

    NaN and infinities come back unchanged.
    """
    if not math.isfinite(value):
        return value
    return math.floor(value * 2 + 0.5) / 2


def finite_values(values: Sequence[float]) -> list[float]:
    return [value for value in values if math.isfinite(value)]
