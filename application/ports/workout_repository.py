"""
Workout Repository Interface (Port).

This module defines the abstract interface for workout persistence operations.
Implementations may use Supabase, in-memory storage, or other backends.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional, Protocol


class WorkoutRepository(Protocol):
    """
    Abstract interface for workout persistence operations.

    This protocol defines the contract for workout storage and retrieval.
    Implementations must provide all methods defined here.

    Rows are plain dicts with the keys id, day, exercises, created_at and
    updated_at. Exercises passed in have already been validated.

    Implementations raise domain.exceptions.StorageError when the backend
    fails, and return None (or an empty list) only for "not found".

    Appending and removing a single exercise must be atomic: two
    concurrent writers against the same workout must not lose updates.
    """

    def create(
        self,
        *,
        day: datetime,
        exercises: List[Dict[str, Any]],
    ) -> Dict[str, Any]:
        """
        Insert a new workout and assign its identifier.

        Args:
            day: When the workout took place
            exercises: Validated exercise records (may be empty)

        Returns:
            The stored workout row including id and timestamps
        """
        ...

    def get(self, workout_id: str) -> Optional[Dict[str, Any]]:
        """
        Get a single workout by ID.

        Args:
            workout_id: 24-character hex workout ID

        Returns:
            Workout row or None if not found
        """
        ...

    def list_all(self, *, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """
        Get all workouts.

        Args:
            limit: Maximum number of workouts to return (None for every
                row, however many the backend holds)

        Returns:
            Workout rows ordered by day desc
        """
        ...

    def list_by_date_range(
        self,
        start: datetime,
        end: datetime,
    ) -> List[Dict[str, Any]]:
        """
        Get workouts with start <= day <= end.

        Returns:
            Workout rows ordered by day desc
        """
        ...

    def append_exercise(
        self,
        workout_id: str,
        exercise: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """
        Atomically append one exercise to a workout.

        Returns:
            Updated workout row or None if the workout does not exist
        """
        ...

    def replace_exercises(
        self,
        workout_id: str,
        exercises: List[Dict[str, Any]],
    ) -> Optional[Dict[str, Any]]:
        """
        Replace a workout's whole exercise list.

        Returns:
            Updated workout row or None if the workout does not exist
        """
        ...

    def remove_exercise(
        self,
        workout_id: str,
        index: int,
    ) -> Optional[Dict[str, Any]]:
        """
        Atomically remove the exercise at a position.

        Later exercises shift down by one. The bounds check and the
        removal happen in one step.

        Returns:
            Updated workout row, or None if the workout does not exist
            or the index is out of range
        """
        ...

    def delete(self, workout_id: str) -> Optional[Dict[str, Any]]:
        """
        Delete a workout.

        Returns:
            The deleted workout row, or None if not found
        """
        ...
