"""Turn raw completed sets into the inputs the suggestion engine needs.

The data store hands back the last sets logged for an exercise. From those we
derive the last used weight, the heaviest set, a Brzycki estimate of the best
1RM, and one weight per recent workout (first set of the session) in
chronological order for the progression analyzer.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date

from pydantic import BaseModel, ConfigDict, field_validator

from .rm_estimator import estimate_one_rm
from .utils import round_to_half

DEFAULT_SESSION_LIMIT = 3


class CompletedSet(BaseModel):
    """One logged set as the data store returns it."""

    model_config = ConfigDict(allow_inf_nan=False)

    workout_date: date
    weight_kg: float | None = None
    reps: int | None = None
    completed: bool = True

    @field_validator("weight_kg")
    @classmethod
    def weight_not_negative(cls, v: float | None) -> float | None:
        if v is not None and v < 0:
            raise ValueError("weight_kg must not be negative")
        return v

    @field_validator("reps")
    @classmethod
    def reps_not_negative(cls, v: int | None) -> int | None:
        if v is not None and v < 0:
            raise ValueError("reps must not be negative")
        return v

    @property
    def is_usable(self) -> bool:
        return self.completed and self.weight_kg is not None and self.reps is not None


@dataclass(frozen=True)
class HistorySummary:
    last_used: float
    best_set: float
    estimated_one_rm: float | None
    recent_weights: list[float] = field(default_factory=list)
    set_count: int = 0


def _newest_first(sets: Iterable[CompletedSet]) -> list[CompletedSet]:
    # sorted() is stable, so sets within one workout keep their logged order.
    return sorted(
        (s for s in sets if s.is_usable),
        key=lambda s: s.workout_date,
        reverse=True,
    )


def recent_session_weights(
    sets: Iterable[CompletedSet],
    *,
    session_limit: int = DEFAULT_SESSION_LIMIT,
) -> list[float]:
    """First-set weight of the newest ``session_limit`` workouts, oldest first."""
    first_set_by_date: dict[date, CompletedSet] = {}
    for s in _newest_first(sets):
        if s.workout_date in first_set_by_date:
            continue
        if len(first_set_by_date) >= session_limit:
            break
        first_set_by_date[s.workout_date] = s

    weights = [s.weight_kg for s in first_set_by_date.values() if s.weight_kg]
    weights.reverse()
    return weights


def best_estimated_one_rm(sets: Iterable[CompletedSet]) -> float | None:
    best = 0.0
    for s in sets:
        if not s.is_usable:
            continue
        estimate = estimate_one_rm(s.weight_kg or 0.0, s.reps or 1)
        if estimate is not None and estimate > best:
            best = estimate
    return round_to_half(best) if best > 0 else None


def summarize_history(
    sets: Iterable[CompletedSet],
    *,
    session_limit: int = DEFAULT_SESSION_LIMIT,
) -> HistorySummary | None:
    """Summarize one exercise's completed sets. None if nothing is usable."""
    ordered = _newest_first(sets)
    if not ordered:
        return None

    weights = [s.weight_kg or 0.0 for s in ordered]
    return HistorySummary(
        last_used=weights[0],
        best_set=max(weights),
        estimated_one_rm=best_estimated_one_rm(ordered),
        recent_weights=recent_session_weights(ordered, session_limit=session_limit),
        set_count=len(ordered),
    )
