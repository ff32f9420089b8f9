"""Per-exercise suggestions for a workout, built from history and stored 1RMs."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .history import DEFAULT_SESSION_LIMIT, CompletedSet, summarize_history
from .percentages import suggested_weight_from_rm
from .progression import STANDARD_INCREMENT
from .suggestion import DEFAULT_TARGET_RPE, WeightSuggestion, get_smart_weight_suggestion

logger = logging.getLogger(__name__)

DEFAULT_TARGET_REPS = 5


@dataclass(frozen=True)
class ExerciseSuggestion:
    exercise_name: str
    last_used: float | None
    best_set: float | None
    estimated_one_rm: float | None
    suggestion: WeightSuggestion


@dataclass(frozen=True)
class ExercisePlanRequest:
    exercise_name: str
    one_rm: float | None = None
    sets: Sequence[CompletedSet] = field(default_factory=tuple)
    target_reps: int | None = None
    target_rpe: float = DEFAULT_TARGET_RPE


def suggest_set_weight(one_rm: float | None, reps: int | None) -> float | None:
    """Inline weight hint for a single planned set, when a 1RM is known."""
    if not reps or one_rm is None or one_rm <= 0:
        return None
    return suggested_weight_from_rm(one_rm, reps)


def plan_exercise(
    exercise_name: str,
    one_rm: float | None,
    sets: Iterable[CompletedSet],
    *,
    target_reps: int | None = None,
    target_rpe: float = DEFAULT_TARGET_RPE,
    session_limit: int = DEFAULT_SESSION_LIMIT,
    standard_increment: float = STANDARD_INCREMENT,
) -> ExerciseSuggestion | None:
    """Suggest the next working weight for one exercise.

    Returns None when there is neither usable history nor a positive 1RM.
    """
    reps = target_reps or DEFAULT_TARGET_REPS
    summary = summarize_history(sets, session_limit=session_limit)

    if summary is None:
        if one_rm is None or one_rm <= 0:
            logger.debug(
                "Nothing to suggest for %s",
                exercise_name,
                extra={"liftlog_exercise": exercise_name},
            )
            return None
        return ExerciseSuggestion(
            exercise_name=exercise_name,
            last_used=None,
            best_set=None,
            estimated_one_rm=None,
            suggestion=get_smart_weight_suggestion(
                one_rm, reps, [], target_rpe, standard_increment=standard_increment
            ),
        )

    logger.debug(
        "Planning %s from %d sets",
        exercise_name,
        summary.set_count,
        extra={"liftlog_exercise": exercise_name, "liftlog_set_count": summary.set_count},
    )
    return ExerciseSuggestion(
        exercise_name=exercise_name,
        last_used=summary.last_used,
        best_set=summary.best_set,
        estimated_one_rm=summary.estimated_one_rm,
        suggestion=get_smart_weight_suggestion(
            one_rm,
            reps,
            summary.recent_weights,
            target_rpe,
            standard_increment=standard_increment,
        ),
    )


def plan_workout(
    requests: Iterable[ExercisePlanRequest],
    *,
    session_limit: int = DEFAULT_SESSION_LIMIT,
    standard_increment: float = STANDARD_INCREMENT,
) -> list[ExerciseSuggestion]:
    """Plan each exercise independently, dropping those with nothing to suggest."""
    planned: list[ExerciseSuggestion] = []
    for request in requests:
        result = plan_exercise(
            request.exercise_name,
            request.one_rm,
            request.sets,
            target_reps=request.target_reps,
            target_rpe=request.target_rpe,
            session_limit=session_limit,
            standard_increment=standard_increment,
        )
        if result is not None:
            planned.append(result)
    return planned
