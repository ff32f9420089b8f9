"""Recorded one-rep maxes per exercise and how they changed."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from pydantic import BaseModel, ConfigDict, field_validator


class OneRepMaxRecord(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    exercise_name: str
    one_rm: float
    recorded_on: date

    @field_validator("exercise_name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("exercise_name must not be empty")
        return v

    @field_validator("one_rm")
    @classmethod
    def one_rm_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("one_rm must be positive")
        return v


@dataclass(frozen=True)
class OneRepMaxProgress:
    exercise_name: str
    latest: float
    previous: float | None
    change: float
    recorded_on: date
    record_count: int


def _newest_first(records: Iterable[OneRepMaxRecord]) -> list[OneRepMaxRecord]:
    return sorted(records, key=lambda r: r.recorded_on, reverse=True)


def latest_one_rm(records: Iterable[OneRepMaxRecord], exercise_name: str) -> float | None:
    """Most recently recorded 1RM for ``exercise_name``, if any."""
    name = exercise_name.strip()
    for record in _newest_first(records):
        if record.exercise_name == name:
            return record.one_rm
    return None


def one_rm_progress(records: Iterable[OneRepMaxRecord]) -> list[OneRepMaxProgress]:
    """Latest 1RM per exercise with the change from the record before it."""
    by_exercise: dict[str, list[OneRepMaxRecord]] = defaultdict(list)
    for record in _newest_first(records):
        by_exercise[record.exercise_name].append(record)

    progress: list[OneRepMaxProgress] = []
    for exercise_name, entries in sorted(by_exercise.items(), key=lambda item: item[0]):
        latest = entries[0]
        previous = entries[1] if len(entries) > 1 else None
        progress.append(
            OneRepMaxProgress(
                exercise_name=exercise_name,
                latest=latest.one_rm,
                previous=previous.one_rm if previous else None,
                change=round(latest.one_rm - previous.one_rm, 1) if previous else 0.0,
                recorded_on=latest.recorded_on,
                record_count=len(entries),
            )
        )
    return progress
