"""liftlog — progressive load suggestions for a strength-training logbook."""

from .percentages import percent_for_reps, percent_for_rpe, suggested_weight_from_rm
from .progression import ProgressionResult, Trend, analyze_progression
from .rm_estimator import estimate_one_rm
from .rpe_adjustment import adjust_for_target_rpe
from .suggestion import WeightSuggestion, get_smart_weight_suggestion
from .utils import round_to_half

__all__ = [
    "ProgressionResult",
    "Trend",
    "WeightSuggestion",
    "adjust_for_target_rpe",
    "analyze_progression",
    "estimate_one_rm",
    "get_smart_weight_suggestion",
    "percent_for_reps",
    "percent_for_rpe",
    "round_to_half",
    "suggested_weight_from_rm",
]
