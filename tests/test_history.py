import json
from datetime import date

import pytest
from pydantic import ValidationError

from liftlog.history import (
    CompletedSet,
    best_estimated_one_rm,
    recent_session_weights,
    summarize_history,
)


def _set(day: int, weight_kg: float | None, reps: int | None, *, completed: bool = True) -> CompletedSet:
    return CompletedSet(
        workout_date=date(2026, 1, day),
        weight_kg=weight_kg,
        reps=reps,
        completed=completed,
    )


def _squat_history() -> list[CompletedSet]:
    # Deliberately not in date order.
    return [
        _set(8, 62.5, 5),
        _set(8, 65, 3),
        _set(5, 60, 5),
        _set(5, 62.5, 5),
        _set(15, 67.5, 5),
        _set(15, 70, 5, completed=False),
        _set(15, None, 5),
        _set(12, 65, 5),
    ]


def test_summarize_history() -> None:
    summary = summarize_history(_squat_history())
    assert summary is not None
    assert summary.last_used == 67.5
    assert summary.best_set == 67.5
    # 67.5 x 5 -> 75.9
    assert summary.estimated_one_rm == 76.0
    assert summary.recent_weights == [62.5, 65, 67.5]
    assert summary.set_count == 6


def test_recent_weights_are_oldest_first_and_use_first_set_of_each_workout() -> None:
    weights = recent_session_weights(_squat_history(), session_limit=5)
    assert weights == [60, 62.5, 65, 67.5]


def test_recent_weights_respect_session_limit() -> None:
    assert recent_session_weights(_squat_history(), session_limit=1) == [67.5]


def test_zero_weight_first_set_is_skipped() -> None:
    sets = [_set(3, 0, 10), _set(3, 20, 10), _set(6, 25, 10)]
    assert recent_session_weights(sets) == [25]


def test_no_usable_sets_is_none() -> None:
    sets = [_set(1, 60, 5, completed=False), _set(2, None, 5), _set(3, 60, None)]
    assert summarize_history(sets) is None
    assert summarize_history([]) is None


def test_high_rep_sets_are_not_estimable() -> None:
    summary = summarize_history([_set(1, 40, 15), _set(2, 42.5, 12)])
    assert summary is not None
    assert summary.estimated_one_rm is None
    assert summary.last_used == 42.5


def test_zero_reps_counts_as_a_single() -> None:
    assert best_estimated_one_rm([_set(1, 100, 0)]) == 100


class TestCompletedSetValidation:
    def test_negative_weight_rejected(self) -> None:
        with pytest.raises(ValidationError, match="weight_kg must not be negative"):
            _set(1, -5, 5)

    def test_negative_reps_rejected(self) -> None:
        with pytest.raises(ValidationError, match="reps must not be negative"):
            _set(1, 50, -1)

    @pytest.mark.parametrize("weight_kg", [float("nan"), float("inf")])
    def test_non_finite_weight_rejected(self, weight_kg: float) -> None:
        with pytest.raises(ValidationError, match="finite number"):
            _set(1, weight_kg, 5)

    def test_non_finite_weight_from_json_rejected(self) -> None:
        with pytest.raises(ValidationError, match="finite number"):
            CompletedSet.model_validate(json.loads('{"workout_date": "2026-01-05", "weight_kg": NaN, "reps": 5}'))

    def test_parses_iso_dates(self) -> None:
        parsed = CompletedSet.model_validate({"workout_date": "2026-01-05", "weight_kg": 60, "reps": 5})
        assert parsed.workout_date == date(2026, 1, 5)
        assert parsed.completed is True
