"""
CreateWorkout Use Case.

Starts a workout session: validates any initial exercises as one unit,
then persists the workout. Nothing is written if a single exercise is
rejected.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, List, Mapping, Optional

from application.ports import WorkoutRepository
from domain.converters import db_row_to_workout, exercises_to_records
from domain.exceptions import ExerciseValidationError
from domain.models import Workout
from domain.services import validate_exercises

logger = logging.getLogger(__name__)


@dataclass
class CreateWorkoutResult:
    """Result of the CreateWorkout use case execution."""

    success: bool
    workout: Optional[Workout] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    validation_errors: List[str] = field(default_factory=list)
    error_fields: List[str] = field(default_factory=list)


class CreateWorkoutUseCase:
    """
    Use case for creating workouts.

    Usage:
        >>> use_case = CreateWorkoutUseCase(workout_repo=workout_repo)
        >>> result = use_case.execute(exercises=[{"type": "cardio", ...}])
        >>> if result.success:
        ...     print(f"Started workout: {result.workout.id}")
    """

    def __init__(self, workout_repo: WorkoutRepository) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            workout_repo: Repository for persisting workouts
        """
        self._workout_repo = workout_repo

    def execute(
        self,
        *,
        day: Optional[datetime] = None,
        exercises: Optional[List[Mapping[str, Any]]] = None,
    ) -> CreateWorkoutResult:
        """
        Validate and persist a new workout.

        Args:
            day: When the workout took place (defaults to now)
            exercises: Raw exercise payloads, each declaring its type

        Returns:
            CreateWorkoutResult with the stored workout or validation errors
        """
        try:
            validated = validate_exercises(list(exercises or []))
        except ExerciseValidationError as e:
            return CreateWorkoutResult(
                success=False,
                error=e.message,
                error_code=e.error_code,
                validation_errors=e.errors,
                error_fields=e.fields,
            )

        if day is None:
            day = datetime.now(timezone.utc)
        elif day.tzinfo is None:
            day = day.replace(tzinfo=timezone.utc)

        row = self._workout_repo.create(
            day=day,
            exercises=exercises_to_records(validated),
        )
        workout = db_row_to_workout(row)
        logger.info(f"Started workout {workout.id} with {workout.exercise_count} exercises")
        return CreateWorkoutResult(success=True, workout=workout)
