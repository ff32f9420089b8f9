"""One-rep-max estimation from a single completed set (Brzycki)."""

from __future__ import annotations

import math

from .utils import round_to_half

MIN_ESTIMABLE_REPS = 1
MAX_ESTIMABLE_REPS = 10

_BRZYCKI_INTERCEPT = 1.0278
_BRZYCKI_SLOPE = 0.0278


def estimate_one_rm(weight: float, reps: int) -> float | None:
    """Estimate 1RM using the Brzycki formula.

    Returns None for non-positive or non-finite weight and for reps outside
    1-10; the formula is not extrapolated beyond that range. A single rep is
    taken as-is.
    """
    if not math.isfinite(weight) or weight <= 0:
        return None
    if reps < MIN_ESTIMABLE_REPS or reps > MAX_ESTIMABLE_REPS:
        return None
    if reps == 1:
        return weight
    brzycki = weight / (_BRZYCKI_INTERCEPT - _BRZYCKI_SLOPE * reps)
    return round_to_half(brzycki)
