"""
Domain services: pure functions over domain models.

- exercise_validator: the write-side gate for new exercise data
- workout_stats: per-workout totals, summaries and date-range filtering
"""

from domain.services.exercise_validator import (
    parse_category,
    validate_and_normalize,
    validate_exercise_payload,
    validate_exercises,
)
from domain.services.workout_stats import (
    RECENT_WORKOUT_COUNT,
    WorkoutTotals,
    as_utc,
    derive_workout_totals,
    exercise_volume,
    filter_by_date_range,
    recent_workouts,
    sort_newest_first,
    summarize,
)

__all__ = [
    # Validation
    "parse_category",
    "validate_and_normalize",
    "validate_exercise_payload",
    "validate_exercises",
    # Aggregation
    "RECENT_WORKOUT_COUNT",
    "WorkoutTotals",
    "as_utc",
    "derive_workout_totals",
    "exercise_volume",
    "filter_by_date_range",
    "recent_workouts",
    "sort_newest_first",
    "summarize",
]
