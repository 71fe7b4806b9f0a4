"""
Supabase implementation of WorkoutRepository.

This module provides the concrete Supabase implementation for workout
persistence. The client is injected via constructor for testability.

Single-exercise appends and removals go through the Postgres functions
``append_workout_exercise`` and ``remove_workout_exercise`` (see
supabase/migrations), each one UPDATE statement, so concurrent writers
against the same workout cannot lose updates.

Listings are read page by page with ``range()``; PostgREST caps a single
response at its ``max-rows`` setting (1000 on Supabase).
"""
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from supabase import Client

from domain.exceptions import StorageError
from domain.identifiers import new_workout_id

logger = logging.getLogger(__name__)

PAGE_SIZE = 1000


class SupabaseWorkoutRepository:
    """
    Supabase implementation of WorkoutRepository protocol.

    All Supabase query logic for workouts is encapsulated here.
    """

    def __init__(self, client: Client, table: str = "workouts", page_size: int = PAGE_SIZE):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
            table: Name of the workouts table
            page_size: Rows requested per page; keep it at or below the
                server's max-rows
        """
        self._client = client
        self._table = table
        self._page_size = page_size

    def _first(self, result: Any) -> Optional[Dict[str, Any]]:
        if result.data and len(result.data) > 0:
            return result.data[0]
        return None

    def _storage_error(self, operation: str, error: Exception) -> StorageError:
        error_msg = str(error)
        logger.error(f"Failed to {operation}: {error}")
        if "PGRST" in error_msg or "permission" in error_msg.lower() or "row-level security" in error_msg.lower():
            logger.error("RLS/Permissions error: Consider using SUPABASE_SERVICE_ROLE_KEY instead of SUPABASE_ANON_KEY for backend API")
        return StorageError(f"Failed to {operation}")

    def _select_pages(
        self,
        build_query: Callable[[], Any],
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """
        Run a select page by page until a short page comes back.

        build_query must return a fresh, fully ordered query each call.
        """
        rows: List[Dict[str, Any]] = []
        while limit is None or len(rows) < limit:
            size = self._page_size if limit is None else min(self._page_size, limit - len(rows))
            offset = len(rows)
            result = build_query().range(offset, offset + size - 1).execute()
            page = result.data or []
            rows.extend(page)
            if len(page) < size:
                break
        return rows

    def create(
        self,
        *,
        day: datetime,
        exercises: List[Dict[str, Any]],
    ) -> Dict[str, Any]:
        """Insert a new workout with a freshly generated ID."""
        data = {
            "id": new_workout_id(),
            "day": day.isoformat(),
            "exercises": exercises,
        }
        try:
            result = self._client.table(self._table).insert(data).execute()
        except Exception as e:
            raise self._storage_error("create workout", e) from e

        row = self._first(result)
        if row is None:
            raise StorageError("Failed to create workout: no row returned")
        logger.info(f"Workout created: {row['id']} ({len(exercises)} exercises)")
        return row

    def get(self, workout_id: str) -> Optional[Dict[str, Any]]:
        """Get a single workout by ID."""
        try:
            result = self._client.table(self._table).select("*").eq("id", workout_id).limit(1).execute()
        except Exception as e:
            raise self._storage_error(f"get workout {workout_id}", e) from e
        return self._first(result)

    def list_all(self, *, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """Get all workouts, newest day first."""
        def build_query():
            return (
                self._client.table(self._table)
                .select("*")
                .order("day", desc=True)
                .order("id")
            )

        try:
            return self._select_pages(build_query, limit)
        except Exception as e:
            raise self._storage_error("list workouts", e) from e

    def list_by_date_range(
        self,
        start: datetime,
        end: datetime,
    ) -> List[Dict[str, Any]]:
        """Get workouts with start <= day <= end, newest day first."""
        def build_query():
            return (
                self._client.table(self._table)
                .select("*")
                .gte("day", start.isoformat())
                .lte("day", end.isoformat())
                .order("day", desc=True)
                .order("id")
            )

        try:
            return self._select_pages(build_query)
        except Exception as e:
            raise self._storage_error("list workouts by date range", e) from e

    def append_exercise(
        self,
        workout_id: str,
        exercise: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """Atomically append one exercise via the append_workout_exercise RPC."""
        try:
            result = self._client.rpc(
                "append_workout_exercise",
                {"p_workout_id": workout_id, "p_exercise": exercise},
            ).execute()
        except Exception as e:
            raise self._storage_error(f"append exercise to workout {workout_id}", e) from e

        row = self._first(result)
        if row is None:
            logger.warning(f"No workout found with id {workout_id} (append skipped)")
        return row

    def replace_exercises(
        self,
        workout_id: str,
        exercises: List[Dict[str, Any]],
    ) -> Optional[Dict[str, Any]]:
        """Replace the exercise list in a single UPDATE."""
        update_data = {
            "exercises": exercises,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }
        try:
            result = self._client.table(self._table).update(update_data).eq("id", workout_id).execute()
        except Exception as e:
            raise self._storage_error(f"replace exercises of workout {workout_id}", e) from e

        row = self._first(result)
        if row is not None:
            logger.info(f"Workout {workout_id} exercises replaced ({len(exercises)} exercises)")
        return row

    def remove_exercise(
        self,
        workout_id: str,
        index: int,
    ) -> Optional[Dict[str, Any]]:
        """
        Atomically remove one exercise via the remove_workout_exercise RPC.

        Returns None when the workout is missing or the index is out of
        range at the time of the update.
        """
        try:
            result = self._client.rpc(
                "remove_workout_exercise",
                {"p_workout_id": workout_id, "p_index": index},
            ).execute()
        except Exception as e:
            raise self._storage_error(f"remove exercise {index} from workout {workout_id}", e) from e
        return self._first(result)

    def delete(self, workout_id: str) -> Optional[Dict[str, Any]]:
        """Delete a workout, returning the deleted row."""
        try:
            logger.info(f"Attempting to delete workout {workout_id}")
            result = self._client.table(self._table).delete().eq("id", workout_id).execute()
        except Exception as e:
            raise self._storage_error(f"delete workout {workout_id}", e) from e

        row = self._first(result)
        if row is not None:
            logger.info(f"Workout {workout_id} deleted successfully")
        else:
            logger.warning(f"No workout found with id {workout_id} (0 rows deleted)")
        return row
