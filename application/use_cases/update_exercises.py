"""
Workout exercise mutations.

Appends one validated exercise, bulk-replaces the exercise list, or
removes one exercise by position. Identifiers are checked before the
store is queried and payloads are validated before anything is written.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from application.ports import WorkoutRepository
from domain.converters import db_row_to_workout, exercises_to_records
from domain.exceptions import (
    ExerciseNotFound,
    StorageError,
    WorkoutNotFound,
    WorkoutTrackerError,
)
from domain.identifiers import ensure_workout_id
from domain.models import Workout
from domain.services import validate_exercise_payload, validate_exercises

logger = logging.getLogger(__name__)


@dataclass
class UpdateExercisesResult:
    """Result of an exercise list mutation."""

    success: bool
    workout: Optional[Workout] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    validation_errors: List[str] = field(default_factory=list)
    error_fields: List[str] = field(default_factory=list)

    @classmethod
    def failed(cls, error: WorkoutTrackerError) -> "UpdateExercisesResult":
        return cls(
            success=False,
            error=error.message,
            error_code=error.error_code,
            validation_errors=error.errors,
            error_fields=error.fields,
        )


class UpdateExercisesUseCase:
    """
    Use case for changing the exercises of an existing workout.

    Usage:
        >>> use_case = UpdateExercisesUseCase(workout_repo=workout_repo)
        >>> result = use_case.add_exercise(
        ...     "65a1f0c2e4b0a1b2c3d4e5f6",
        ...     {"type": "cardio", "name": "Run", "duration": 30, "distance": 5},
        ... )
        >>> result.workout.total_duration
        30
    """

    def __init__(self, workout_repo: WorkoutRepository) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            workout_repo: Repository for persisting workouts
        """
        self._workout_repo = workout_repo

    def add_exercise(
        self,
        workout_id: str,
        payload: Mapping[str, Any],
    ) -> UpdateExercisesResult:
        """
        Validate one exercise and append it to a workout.

        Args:
            workout_id: Target workout ID
            payload: Raw exercise payload declaring its type

        Returns:
            UpdateExercisesResult with the updated workout or the error
        """
        try:
            ensure_workout_id(workout_id)
            exercise = validate_exercise_payload(payload)
            row = self._workout_repo.append_exercise(workout_id, exercise.to_record())
            if row is None:
                raise WorkoutNotFound(workout_id)
        except StorageError:
            raise
        except WorkoutTrackerError as e:
            logger.warning(f"Add exercise to workout {workout_id} rejected: {e.message}")
            return UpdateExercisesResult.failed(e)

        logger.info(f"Added {exercise.category} exercise '{exercise.name}' to workout {workout_id}")
        return UpdateExercisesResult(success=True, workout=db_row_to_workout(row))

    def replace_exercises(
        self,
        workout_id: str,
        payloads: List[Mapping[str, Any]],
    ) -> UpdateExercisesResult:
        """
        Validate every payload and replace the workout's exercise list.

        Nothing is written unless all payloads are valid.
        """
        try:
            ensure_workout_id(workout_id)
            exercises = validate_exercises(list(payloads))
            row = self._workout_repo.replace_exercises(
                workout_id, exercises_to_records(exercises)
            )
            if row is None:
                raise WorkoutNotFound(workout_id)
        except StorageError:
            raise
        except WorkoutTrackerError as e:
            logger.warning(f"Replace exercises of workout {workout_id} rejected: {e.message}")
            return UpdateExercisesResult.failed(e)

        return UpdateExercisesResult(success=True, workout=db_row_to_workout(row))

    def remove_exercise(self, workout_id: str, index: int) -> UpdateExercisesResult:
        """
        Remove the exercise at a zero-based position.

        Later exercises shift down and the workout totals are recomputed
        from what remains.
        """
        try:
            ensure_workout_id(workout_id)
            current = self._workout_repo.get(workout_id)
            if current is None:
                raise WorkoutNotFound(workout_id)
            if index < 0 or index >= len(current.get("exercises") or []):
                raise ExerciseNotFound(workout_id, index)

            row = self._workout_repo.remove_exercise(workout_id, index)
            if row is None:
                # The list changed since it was read
                if self._workout_repo.get(workout_id) is None:
                    raise WorkoutNotFound(workout_id)
                raise ExerciseNotFound(workout_id, index)
        except StorageError:
            raise
        except WorkoutTrackerError as e:
            logger.warning(f"Remove exercise {index} from workout {workout_id} rejected: {e.message}")
            return UpdateExercisesResult.failed(e)

        return UpdateExercisesResult(success=True, workout=db_row_to_workout(row))
