"""CLI interface for the liftlog load suggestion engine."""

from __future__ import annotations

import json
import logging
import math
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any

import click
from pydantic import TypeAdapter, ValidationError

from liftlog.config import Config
from liftlog.history import CompletedSet
from liftlog.logging import setup_logging
from liftlog.one_rm_records import OneRepMaxRecord, one_rm_progress
from liftlog.planner import plan_exercise
from liftlog.progression import analyze_progression
from liftlog.rm_estimator import estimate_one_rm
from liftlog.suggestion import get_smart_weight_suggestion

logger = logging.getLogger(__name__)

_SETS_ADAPTER = TypeAdapter(list[CompletedSet])
_RECORDS_ADAPTER = TypeAdapter(list[OneRepMaxRecord])


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _finite(ctx: click.Context, param: click.Parameter, value: float | None) -> float | None:
    if value is not None and not math.isfinite(value):
        raise click.BadParameter(f"must be a finite number, got {value}")
    return value


def _parse_history(raw: str | None) -> list[float]:
    if not raw:
        return []
    try:
        weights = [float(part) for part in raw.split(",") if part.strip()]
    except ValueError:
        raise click.BadParameter(f"expected comma-separated weights, got {raw!r}", param_hint="--history")
    if not all(math.isfinite(weight) for weight in weights):
        raise click.BadParameter(f"weights must be finite numbers, got {raw!r}", param_hint="--history")
    return weights


def _load_json(path: Path, adapter: TypeAdapter) -> Any:
    try:
        with path.open() as f:
            return adapter.validate_python(json.load(f))
    except json.JSONDecodeError as exc:
        _fail(f"{path} is not valid JSON: {exc}")
    except ValidationError as exc:
        _fail(f"{path} failed validation:\n{exc}")


def _emit(ctx: click.Context, payload: dict[str, Any], lines: list[str]) -> None:
    if ctx.obj["json"]:
        click.echo(json.dumps(payload, default=str))
        return
    for line in lines:
        click.echo(line)


@click.group()
@click.option("--json", "as_json", is_flag=True, help="Print machine-readable JSON.")
@click.option("--verbose", "-v", is_flag=True, help="Log engine decisions to stderr.")
@click.pass_context
def main(ctx: click.Context, as_json: bool, verbose: bool):
    """Progressive load suggestions for strength training."""
    try:
        config = Config.from_env()
    except RuntimeError as exc:
        _fail(str(exc))
    setup_logging(config.log_format, logging.DEBUG if verbose else logging.WARNING)
    ctx.obj = {"config": config, "json": as_json}


@main.command()
@click.option("--weight", type=float, callback=_finite, required=True, help="Weight lifted in kg.")
@click.option("--reps", type=int, required=True, help="Reps completed (1-10).")
@click.pass_context
def estimate(ctx: click.Context, weight: float, reps: int):
    """Estimate 1RM from one completed set."""
    one_rm = estimate_one_rm(weight, reps)
    if one_rm is None:
        _emit(
            ctx,
            {"one_rm": None},
            [f"Cannot estimate 1RM from {weight:g} kg x {reps} (needs weight > 0 and 1-10 reps)."],
        )
        return
    _emit(ctx, {"one_rm": one_rm}, [f"Estimated 1RM: {one_rm:g} kg"])


@main.command()
@click.option("--one-rm", type=float, callback=_finite, help="Known 1RM in kg.")
@click.option("--reps", type=int, help="Target reps.  [default: from config]")
@click.option("--rpe", type=float, callback=_finite, help="Target RPE.  [default: from config]")
@click.option("--history", type=str, help="Recent session weights, oldest first (e.g. 50,55,60).")
@click.pass_context
def suggest(
    ctx: click.Context,
    one_rm: float | None,
    reps: int | None,
    rpe: float | None,
    history: str | None,
):
    """Suggest the weight for the next set."""
    config: Config = ctx.obj["config"]
    result = get_smart_weight_suggestion(
        one_rm,
        reps if reps is not None else config.target_reps,
        _parse_history(history),
        rpe if rpe is not None else config.target_rpe,
        standard_increment=config.standard_increment,
    )
    _emit(
        ctx,
        asdict(result),
        [
            f"Suggested weight: {result.suggested_weight:g} kg ({result.increase:+g} kg)",
            f"Reason: {result.reason}",
        ],
    )


@main.command()
@click.option("--history", type=str, required=True, help="Recent session weights, oldest first.")
@click.option("--increment", type=float, callback=_finite, help="Standard increment in kg.  [default: from config]")
@click.pass_context
def analyze(ctx: click.Context, history: str, increment: float | None):
    """Detect the recent strength trend."""
    config: Config = ctx.obj["config"]
    result = analyze_progression(
        _parse_history(history),
        increment if increment is not None else config.standard_increment,
    )
    if result is None:
        _emit(ctx, {"progression": None}, ["No history to analyze."])
        return
    _emit(
        ctx,
        asdict(result),
        [
            f"Trend: {result.trend} over {result.session_count} sessions",
            f"Average: {result.average_weight:g} kg, last: {result.last_weight:g} kg",
            f"Suggested increase: {result.suggested_increase:g} kg",
        ],
    )


@main.command()
@click.option(
    "--sets-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="JSON list of completed sets for one exercise.",
)
@click.option("--exercise", "exercise_name", type=str, default="exercise", show_default=True)
@click.option("--one-rm", type=float, callback=_finite, help="Known 1RM in kg.")
@click.option("--reps", type=int, help="Target reps.  [default: from config]")
@click.option("--rpe", type=float, callback=_finite, help="Target RPE.  [default: from config]")
@click.pass_context
def plan(
    ctx: click.Context,
    sets_file: Path,
    exercise_name: str,
    one_rm: float | None,
    reps: int | None,
    rpe: float | None,
):
    """Plan the next working weight for one exercise from its set history."""
    config: Config = ctx.obj["config"]
    sets = _load_json(sets_file, _SETS_ADAPTER)
    result = plan_exercise(
        exercise_name,
        one_rm,
        sets,
        target_reps=reps if reps is not None else config.target_reps,
        target_rpe=rpe if rpe is not None else config.target_rpe,
        session_limit=config.session_limit,
        standard_increment=config.standard_increment,
    )
    if result is None:
        _emit(ctx, {"plan": None}, [f"{exercise_name}: no history and no 1RM, nothing to suggest."])
        return

    lines = [f"{result.exercise_name}:"]
    if result.last_used is not None:
        lines.append(f"  Last used: {result.last_used:g} kg")
        lines.append(f"  Best set: {result.best_set:g} kg")
    if result.estimated_one_rm is not None:
        lines.append(f"  Estimated 1RM: {result.estimated_one_rm:g} kg")
    lines.append(
        f"  Suggested: {result.suggestion.suggested_weight:g} kg ({result.suggestion.increase:+g} kg)"
    )
    lines.append(f"  Reason: {result.suggestion.reason}")
    _emit(ctx, asdict(result), lines)


@main.command("one-rm-progress")
@click.option(
    "--records-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="JSON list of recorded 1RMs.",
)
@click.pass_context
def one_rm_progress_command(ctx: click.Context, records_file: Path):
    """Show the latest 1RM per exercise and its change."""
    records = _load_json(records_file, _RECORDS_ADAPTER)
    progress = one_rm_progress(records)
    logger.debug("Loaded %d 1RM records", len(records), extra={"liftlog_exercises": len(progress)})

    lines = [] if progress else ["No 1RM records."]
    for entry in progress:
        line = f"{entry.exercise_name}: {entry.latest:g} kg ({entry.recorded_on.isoformat()})"
        if entry.change:
            line += f" {entry.change:+.1f} kg"
        lines.append(line)
    _emit(ctx, {"progress": [asdict(entry) for entry in progress]}, lines)
