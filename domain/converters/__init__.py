"""
Domain converters between storage rows, API payloads and domain models.

- db_row_to_workout: Database row (from Supabase) -> Workout
- workout_to_response: Workout -> JSON API representation
- record_to_exercise: Stored exercise object -> Exercise (lenient)

All converters are pure functions with no side effects.

Examples:
    >>> from domain.converters import db_row_to_workout, workout_to_response
    >>> workout = db_row_to_workout(row)
    >>> payload = workout_to_response(workout)
"""

from domain.converters.db_converters import (
    db_row_to_workout,
    exercises_to_records,
    record_to_exercise,
    workout_to_response,
)

__all__ = [
    "db_row_to_workout",
    "exercises_to_records",
    "record_to_exercise",
    "workout_to_response",
]
