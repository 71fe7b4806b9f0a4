"""
DeleteWorkout Use Case.

Removes a whole workout record. The deleted workout is returned so
callers can show or undo what was removed.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from application.ports import WorkoutRepository
from domain.converters import db_row_to_workout
from domain.exceptions import MalformedIdentifier
from domain.identifiers import ensure_workout_id
from domain.models import Workout

logger = logging.getLogger(__name__)


@dataclass
class DeleteWorkoutResult:
    """Result of deleting a workout."""

    success: bool
    workout: Optional[Workout] = None
    error: Optional[str] = None
    error_code: Optional[str] = None


class DeleteWorkoutUseCase:
    """Use case for deleting workouts."""

    def __init__(self, workout_repo: WorkoutRepository) -> None:
        self._workout_repo = workout_repo

    def execute(self, workout_id: str) -> DeleteWorkoutResult:
        """
        Delete a workout by ID.

        Args:
            workout_id: ID of the workout to delete

        Returns:
            DeleteWorkoutResult with the deleted workout or error
        """
        try:
            ensure_workout_id(workout_id)
        except MalformedIdentifier as e:
            return DeleteWorkoutResult(success=False, error=e.message, error_code=e.error_code)

        row = self._workout_repo.delete(workout_id)
        if row is None:
            return DeleteWorkoutResult(
                success=False,
                error=f"Workout with ID {workout_id} not found",
                error_code="WorkoutNotFound",
            )

        logger.info(f"Deleted workout {workout_id}")
        return DeleteWorkoutResult(success=True, workout=db_row_to_workout(row))
