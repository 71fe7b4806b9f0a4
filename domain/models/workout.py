"""
Workout aggregate root - the main domain entity.

A workout is a dated, ordered collection of exercises performed in one
session. Its totals are derived from the exercise list on every read and
never stored as a source of truth.
"""

from datetime import datetime, timezone
from typing import List, Optional, Union

from pydantic import BaseModel, Field, computed_field, field_validator

from domain.models.exercise import Exercise


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Workout(BaseModel):
    """
    Aggregate root representing a logged workout session.

    Unlike the Exercise value object, a Workout has identity (assigned by
    the store) and is mutated by appending, replacing or removing
    exercises through the repository.

    Examples:
        >>> from domain.models import Workout, Exercise

        >>> workout = Workout(
        ...     exercises=[
        ...         Exercise(type="cardio", name="Run", duration=30, distance=5),
        ...         Exercise(type="resistance", name="Bench", duration=20,
        ...                  weight=60, reps=8, sets=3),
        ...     ]
        ... )
        >>> workout.total_duration
        50
        >>> workout.total_weight
        1440
        >>> workout.exercise_count
        2
    """

    id: Optional[str] = Field(default=None, description="24-character hex identifier")
    day: datetime = Field(
        default_factory=_utcnow,
        description="When the workout took place (defaults to creation time)",
    )
    exercises: List[Exercise] = Field(
        default_factory=list,
        description="Exercises in the order they were added",
    )
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("day")
    @classmethod
    def validate_day(cls, v: datetime) -> datetime:
        """Treat naive timestamps as UTC so all days compare."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_duration(self) -> Union[int, float]:
        """Sum of exercise durations in minutes."""
        from domain.services.workout_stats import derive_workout_totals

        return derive_workout_totals(self).total_duration

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_weight(self) -> Union[int, float]:
        """Resistance volume: sum of weight x reps x sets."""
        from domain.services.workout_stats import derive_workout_totals

        return derive_workout_totals(self).total_weight

    @computed_field  # type: ignore[prop-decorator]
    @property
    def exercise_count(self) -> int:
        """Number of exercises in the workout."""
        return len(self.exercises)

    @property
    def is_empty(self) -> bool:
        return not self.exercises

    def __str__(self) -> str:
        return (
            f"Workout({self.id or 'new'}, {self.day.date().isoformat()}, "
            f"{self.exercise_count} exercises, {self.total_duration}min)"
        )
