import os
from dataclasses import dataclass

from .logging import LOG_FORMATS


def _env_number(name: str, default: str, cast: type) -> float:
    raw = os.environ.get(name, default)
    try:
        value = cast(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be a number, got {raw!r}") from None
    if value <= 0:
        raise RuntimeError(f"{name} must be positive, got {raw!r}")
    return value


@dataclass(frozen=True)
class Config:
    log_format: str = "json"
    standard_increment: float = 2.5
    target_rpe: float = 8.0
    target_reps: int = 5
    session_limit: int = 3

    @classmethod
    def from_env(cls) -> "Config":
        log_format = os.environ.get("LIFTLOG_LOG_FORMAT", "json").strip().lower()
        if log_format not in LOG_FORMATS:
            raise RuntimeError(f"LIFTLOG_LOG_FORMAT must be one of {LOG_FORMATS}, got {log_format!r}")

        return cls(
            log_format=log_format,
            standard_increment=_env_number("LIFTLOG_STANDARD_INCREMENT", "2.5", float),
            target_rpe=_env_number("LIFTLOG_TARGET_RPE", "8", float),
            target_reps=int(_env_number("LIFTLOG_TARGET_REPS", "5", int)),
            session_limit=int(_env_number("LIFTLOG_SESSION_LIMIT", "3", int)),
        )
