"""
Get Workout Use Case.

This use case handles retrieving workouts from the store: one by ID,
the full history, or a date-range subset, always newest first.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from application.ports import WorkoutRepository
from domain.converters import db_row_to_workout
from domain.exceptions import MalformedIdentifier
from domain.identifiers import ensure_workout_id
from domain.models import Workout
from domain.services import as_utc, filter_by_date_range, sort_newest_first


@dataclass
class GetWorkoutResult:
    """Result of getting a single workout."""
    success: bool
    workout: Optional[Workout] = None
    error: Optional[str] = None
    error_code: Optional[str] = None


@dataclass
class ListWorkoutsResult:
    """Result of listing workouts."""
    success: bool
    workouts: List[Workout] = field(default_factory=list)
    count: int = 0
    error: Optional[str] = None
    error_code: Optional[str] = None


class GetWorkoutUseCase:
    """
    Use case for retrieving workouts.

    Encapsulates all logic for getting individual workouts,
    listing the history and selecting a date range.
    """

    def __init__(self, workout_repo: WorkoutRepository):
        """
        Initialize with required dependencies.

        Args:
            workout_repo: Repository for workout persistence
        """
        self._workout_repo = workout_repo

    def get_workout(self, workout_id: str) -> GetWorkoutResult:
        """
        Get a single workout by ID.

        The ID shape is checked before the store is queried.

        Args:
            workout_id: ID of the workout to retrieve

        Returns:
            GetWorkoutResult with workout data or error
        """
        try:
            ensure_workout_id(workout_id)
        except MalformedIdentifier as e:
            return GetWorkoutResult(success=False, error=e.message, error_code=e.error_code)

        row = self._workout_repo.get(workout_id)
        if row is None:
            return GetWorkoutResult(
                success=False,
                error=f"Workout with ID {workout_id} not found",
                error_code="WorkoutNotFound",
            )
        return GetWorkoutResult(success=True, workout=db_row_to_workout(row))

    def list_workouts(self, limit: Optional[int] = None) -> ListWorkoutsResult:
        """
        List all workouts, newest day first.

        Args:
            limit: Maximum number of workouts to return

        Returns:
            ListWorkoutsResult with workout list
        """
        rows = self._workout_repo.list_all(limit=limit)
        workouts = sort_newest_first(db_row_to_workout(row) for row in rows)
        return ListWorkoutsResult(success=True, workouts=workouts, count=len(workouts))

    def list_by_date_range(self, start: datetime, end: datetime) -> ListWorkoutsResult:
        """
        List workouts with start <= day <= end, newest day first.

        An inverted range returns no workouts without querying the store.
        """
        start, end = as_utc(start), as_utc(end)
        if start > end:
            return ListWorkoutsResult(success=True)

        rows = self._workout_repo.list_by_date_range(start, end)
        # Ordering and bound inclusivity come from filter_by_date_range
        workouts = filter_by_date_range(
            (db_row_to_workout(row) for row in rows), start, end
        )
        return ListWorkoutsResult(success=True, workouts=workouts, count=len(workouts))
