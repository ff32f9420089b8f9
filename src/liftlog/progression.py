"""Strength trend detection over recent session weights."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

from .utils import round_to_half

Trend = Literal["increasing", "stable", "decreasing"]

TREND_INCREASING: Trend = "increasing"
TREND_STABLE: Trend = "stable"
TREND_DECREASING: Trend = "decreasing"

STANDARD_INCREMENT = 2.5

# Half-to-half mean difference (kg) that counts as a trend.
_TREND_THRESHOLD_KG = 1.0
_MOMENTUM_FACTOR = 1.5


@dataclass(frozen=True)
class ProgressionResult:
    average_weight: float
    trend: Trend
    suggested_increase: float
    last_weight: float
    session_count: int


def detect_trend(recent_weights: Sequence[float]) -> Trend:
    """Compare the mean of the older half against the newer half.

    The older half takes the middle element when the count is odd.
    """
    if len(recent_weights) < 2:
        return TREND_STABLE

    split = math.ceil(len(recent_weights) / 2)
    first_half = recent_weights[:split]
    second_half = recent_weights[split:]
    first_avg = sum(first_half) / len(first_half)
    second_avg = sum(second_half) / len(second_half)

    if second_avg > first_avg + _TREND_THRESHOLD_KG:
        return TREND_INCREASING
    if second_avg < first_avg - _TREND_THRESHOLD_KG:
        return TREND_DECREASING
    return TREND_STABLE


def increment_for_trend(trend: Trend, standard_increment: float = STANDARD_INCREMENT) -> float:
    if trend == TREND_INCREASING:
        return round_to_half(standard_increment * _MOMENTUM_FACTOR)
    if trend == TREND_DECREASING:
        # No added load during a decline.
        return 0.0
    return round_to_half(standard_increment)


def analyze_progression(
    recent_weights: Sequence[float],
    standard_increment: float = STANDARD_INCREMENT,
) -> ProgressionResult | None:
    """Summarize one exercise's recent session weights, oldest first.

    Returns None for an empty history.
    """
    if not recent_weights:
        return None

    weights = list(recent_weights)
    trend = detect_trend(weights)
    return ProgressionResult(
        average_weight=round_to_half(sum(weights) / len(weights)),
        trend=trend,
        suggested_increase=increment_for_trend(trend, standard_increment),
        last_weight=weights[-1],
        session_count=len(weights),
    )
