"""Rescale a working weight between RPE targets."""

from __future__ import annotations

from .percentages import percent_for_rpe
from .utils import round_to_half

MAX_EFFORT_RPE = 10


def adjust_for_target_rpe(base_weight: float, current_rpe: float, target_rpe: float) -> float:
    """Scale ``base_weight`` from ``current_rpe`` to ``target_rpe``.

    A weight worked out for maximal effort (RPE 10) comes down when the set
    should leave reps in reserve. Equal RPEs return the weight untouched.
    """
    if current_rpe == target_rpe:
        return base_weight
    ratio = percent_for_rpe(target_rpe) / percent_for_rpe(current_rpe)
    return round_to_half(base_weight * ratio)
