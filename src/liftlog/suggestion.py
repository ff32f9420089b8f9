"""Compose a next-set weight suggestion from 1RM or recent history."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

from .percentages import suggested_weight_from_rm
from .progression import (
    STANDARD_INCREMENT,
    TREND_DECREASING,
    TREND_INCREASING,
    analyze_progression,
)
from .rpe_adjustment import MAX_EFFORT_RPE, adjust_for_target_rpe
from .utils import finite_values, round_to_half

logger = logging.getLogger(__name__)

DEFAULT_TARGET_RPE = 8
STARTING_WEIGHT_KG = 20.0

_TREND_QUALIFIERS = {
    TREND_INCREASING: " (increasing trend - push harder)",
    TREND_DECREASING: " (decreasing - hold weight)",
}


@dataclass(frozen=True)
class WeightSuggestion:
    suggested_weight: float
    reason: str
    increase: float


def _from_one_rm(
    one_rm: float,
    target_reps: int,
    recent_weights: Sequence[float],
    target_rpe: float,
) -> WeightSuggestion:
    # The rep table describes maximal effort, so the base is an RPE 10 figure.
    base_weight = suggested_weight_from_rm(one_rm, target_reps)
    adjusted = adjust_for_target_rpe(base_weight, MAX_EFFORT_RPE, target_rpe)
    last_weight = recent_weights[-1] if recent_weights else 0.0

    logger.debug(
        "Suggestion from 1RM",
        extra={"liftlog_branch": "one_rm", "liftlog_base_weight": base_weight},
    )
    return WeightSuggestion(
        suggested_weight=adjusted,
        reason=f"Based on 1RM ({one_rm:g} kg) and {target_reps} reps @ RPE {target_rpe:g}",
        increase=round_to_half(adjusted - last_weight),
    )


def _from_history(
    recent_weights: Sequence[float],
    standard_increment: float,
) -> WeightSuggestion:
    progression = analyze_progression(recent_weights, standard_increment)
    if progression is None:
        logger.debug("No 1RM or history, using starting weight", extra={"liftlog_branch": "cold_start"})
        return WeightSuggestion(
            suggested_weight=STARTING_WEIGHT_KG,
            reason="Starting weight (no history)",
            increase=0.0,
        )

    suggested = round_to_half(progression.last_weight + progression.suggested_increase)
    logger.debug(
        "Suggestion from recent history",
        extra={
            "liftlog_branch": "history",
            "liftlog_trend": progression.trend,
            "liftlog_session_count": progression.session_count,
        },
    )
    return WeightSuggestion(
        suggested_weight=suggested,
        reason="Based on recent training" + _TREND_QUALIFIERS.get(progression.trend, ""),
        increase=round_to_half(suggested - progression.last_weight),
    )


def get_smart_weight_suggestion(
    one_rm: float | None,
    target_reps: int,
    recent_weights: Sequence[float],
    target_rpe: float = DEFAULT_TARGET_RPE,
    *,
    standard_increment: float = STANDARD_INCREMENT,
) -> WeightSuggestion:
    """Suggest the weight for the next set of one exercise.

    A positive 1RM always wins; otherwise the suggestion follows the trend
    of ``recent_weights`` (oldest first), and with no history at all it is
    the fixed 20 kg starting weight. A non-finite 1RM counts as unknown and
    non-finite history entries are skipped, so this never raises for numeric
    input.
    """
    weights = finite_values(recent_weights)
    if not math.isfinite(standard_increment):
        standard_increment = STANDARD_INCREMENT
    if one_rm is not None and math.isfinite(one_rm) and one_rm > 0:
        return _from_one_rm(one_rm, target_reps, weights, target_rpe)
    return _from_history(weights, standard_increment)
