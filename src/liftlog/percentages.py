"""Fixed rep-max and RPE percentage tables."""

from __future__ import annotations

from .utils import round_to_half

# Percent of 1RM that can be lifted for N reps at maximal effort.
RM_PERCENTAGES: dict[int, float] = {
    1: 100,
    2: 95,
    3: 93,
    4: 90,
    5: 89,
    6: 86,
    7: 83,
    8: 81,
    9: 78,
    10: 75,
    11: 73,
    12: 71,
    13: 69,
    14: 67,
    15: 65,
}

# Percent of the maximal-effort weight for a rep count, by target RPE.
RPE_PERCENTAGES: dict[int, float] = {
    10: 100,
    9: 95,
    8: 90,
    7: 85,
    6: 80,
}

DEFAULT_REPS_PERCENTAGE = 75.0
DEFAULT_RPE_PERCENTAGE = 85.0  # roughly RPE 7-8


def percent_for_reps(target_reps: int) -> float:
    """Percent of 1RM for ``target_reps``; 75% for anything outside 1-15."""
    return float(RM_PERCENTAGES.get(target_reps, DEFAULT_REPS_PERCENTAGE))


def percent_for_rpe(rpe: float) -> float:
    """Percent of maximal effort for ``rpe``; 85% for RPE outside 6-10."""
    return float(RPE_PERCENTAGES.get(rpe, DEFAULT_RPE_PERCENTAGE))


def suggested_weight_from_rm(one_rm: float, target_reps: int) -> float:
    return round_to_half(one_rm * percent_for_reps(target_reps) / 100)
