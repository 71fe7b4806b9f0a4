"""
Converters: Database row format <-> domain Workout.

Provides bidirectional conversion between Supabase database rows
and the Workout domain model.

Database schema (workouts table):
- id: 24-character hex text
- day: timestamptz
- exercises: JSONB array of exercise objects keyed by "type", "name",
  "duration", "distance", "weight", "reps", "sets"
- created_at, updated_at: Timestamps

Rows are read leniently: historical exercises may miss fields or carry
junk values. Unparsable numbers become None so the aggregator treats them
as zero instead of failing the whole read.
"""

import logging
import math
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from domain.models import Exercise, Workout

logger = logging.getLogger(__name__)

_NUMERIC_FIELDS = ("duration", "distance", "weight", "reps", "sets")


def _parse_datetime(value: Any) -> Optional[datetime]:
    """Parse datetime from various formats, always returning UTC-aware values."""
    if value is None:
        return None
    if isinstance(value, str):
        try:
            # Handle ISO format with Z suffix
            if value.endswith("Z"):
                value = value[:-1] + "+00:00"
            value = datetime.fromisoformat(value)
        except ValueError:
            return None
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
    return None


def _parse_number(value: Any) -> Optional[float]:
    """Best-effort numeric parse; None for anything unusable."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            return None
    else:
        return None
    if isinstance(number, float):
        if not math.isfinite(number):
            return None
        if number.is_integer():
            return int(number)
    return number


def record_to_exercise(record: Dict[str, Any]) -> Exercise:
    """
    Convert a stored exercise object to an Exercise without validating it.

    Args:
        record: Exercise dict as stored in the exercises JSONB column.

    Returns:
        Exercise carrying whatever usable values the record holds.
    """
    category = record.get("type", record.get("category"))
    name = record.get("name")
    return Exercise(
        category=str(category) if category is not None else "",
        name=str(name).strip() if name is not None else "",
        **{field: _parse_number(record.get(field)) for field in _NUMERIC_FIELDS},
    )


def db_row_to_workout(row: Dict[str, Any]) -> Workout:
    """
    Convert a database row to domain Workout.

    Args:
        row: Dictionary representing a database row from workouts table.

    Returns:
        Workout domain model.

    Examples:
        >>> row = {
        ...     "id": "65a1f0c2e4b0a1b2c3d4e5f6",
        ...     "day": "2024-01-05T08:00:00Z",
        ...     "exercises": [{"type": "cardio", "name": "Run", "duration": 30}],
        ... }
        >>> workout = db_row_to_workout(row)
        >>> workout.total_duration
        30
    """
    records = row.get("exercises") or []
    exercises: List[Exercise] = []
    for record in records:
        if not isinstance(record, dict):
            logger.warning(f"Skipping non-object exercise in workout {row.get('id')}: {record!r}")
            continue
        exercises.append(record_to_exercise(record))

    created_at = _parse_datetime(row.get("created_at"))
    day = _parse_datetime(row.get("day")) or created_at

    workout = Workout(
        id=row.get("id"),
        exercises=exercises,
        created_at=created_at,
        updated_at=_parse_datetime(row.get("updated_at")),
    )
    if day is not None:
        workout = workout.model_copy(update={"day": day})
    return workout


def exercises_to_records(exercises: List[Exercise]) -> List[Dict[str, Any]]:
    """Serialize exercises for the exercises JSONB column."""
    return [exercise.to_record() for exercise in exercises]


def workout_to_response(workout: Workout) -> Dict[str, Any]:
    """
    Convert domain Workout to its JSON API representation.

    Includes the derived total_duration, total_weight and exercise_count;
    exercises only carry the fields that are set.
    """
    return {
        "id": workout.id,
        "day": workout.day.isoformat(),
        "exercises": exercises_to_records(workout.exercises),
        "total_duration": workout.total_duration,
        "total_weight": workout.total_weight,
        "exercise_count": workout.exercise_count,
        "created_at": workout.created_at.isoformat() if workout.created_at else None,
        "updated_at": workout.updated_at.isoformat() if workout.updated_at else None,
    }
