"""
HTTP client for the Workout Tracker API.

Used by scripts and front ends to start a workout session, log exercises
into it and read history and statistics. The "current workout" is an
explicit WorkoutSession value owned by the caller; the client itself
keeps no state between calls.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

import httpx

from domain.converters import db_row_to_workout
from domain.models import RecentWorkout, StatisticsSummary, Workout
from domain.services import RECENT_WORKOUT_COUNT, recent_workouts, summarize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkoutSession:
    """A workout that has been started and not yet completed."""

    workout_id: str
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class TrackerClientError(Exception):
    """Base exception for tracker client errors."""

    pass


class TrackerAPIUnavailable(TrackerClientError):
    """Raised when the tracker API cannot be reached."""

    pass


class TrackerAPIError(TrackerClientError):
    """Raised when the tracker API returns an error response."""

    def __init__(self, message: str, status_code: int, detail: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail

    @property
    def error_code(self) -> Optional[str]:
        if isinstance(self.detail, dict):
            return self.detail.get("error")
        return None


class WorkoutTrackerClient:
    """
    HTTP client for Workout Tracker API communication.

    Usage:
        >>> client = WorkoutTrackerClient("http://localhost:8001")
        >>> session = await client.start_workout()
        >>> await client.add_exercise(session, {"type": "cardio", ...})
        >>> await client.complete_workout(session)
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the tracker client.

        Args:
            base_url: Base URL of the API (e.g., "http://localhost:8001")
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def _request(
        self,
        method: str,
        path: str,
        *,
        expected: tuple = (200,),
        json: Optional[Any] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        url = f"{self._base_url}{path}"
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.request(method, url, json=json, params=params)
        except httpx.ConnectError as e:
            logger.error(f"Tracker API unavailable: {e}")
            raise TrackerAPIUnavailable(
                f"Tracker API is not available at {self._base_url}"
            ) from e
        except httpx.TimeoutException as e:
            logger.error(f"Tracker API timeout: {e}")
            raise TrackerAPIUnavailable("Tracker API request timed out") from e

        if response.status_code not in expected:
            try:
                detail = response.json().get("detail")
            except ValueError:
                detail = response.text
            message = detail.get("message") if isinstance(detail, dict) else detail
            logger.error(f"Tracker API error: {response.status_code} - {message}")
            raise TrackerAPIError(
                f"{method} {path} failed: {message}",
                response.status_code,
                detail,
            )
        return response.json()

    # -------------------------------------------------------------------------
    # Plain operations
    # -------------------------------------------------------------------------

    async def check_health(self) -> bool:
        """Return True when the API answers its liveness check."""
        data = await self._request("GET", "/health")
        return data.get("status") == "ok"

    async def list_workouts(self, limit: Optional[int] = None) -> List[Workout]:
        """
        List workouts, newest first.

        Without a limit the server's default list limit applies, if one
        is configured; use export_workouts() for the full history.
        """
        params = {"limit": limit} if limit is not None else None
        data = await self._request("GET", "/api/workouts", params=params)
        return [db_row_to_workout(row) for row in data]

    async def export_workouts(self) -> List[Workout]:
        """Every stored workout, newest first."""
        data = await self._request("GET", "/api/workouts/export")
        return [db_row_to_workout(row) for row in data]

    async def get_last_workout(self) -> Optional[Workout]:
        """The most recent workout, or None when nothing has been logged."""
        workouts = await self.list_workouts(limit=1)
        return workouts[0] if workouts else None

    async def list_workouts_in_range(self, start: datetime, end: datetime) -> List[Workout]:
        data = await self._request(
            "GET",
            "/api/workouts/range",
            params={"start": start.isoformat(), "end": end.isoformat()},
        )
        return [db_row_to_workout(row) for row in data]

    async def get_workout(self, workout_id: str) -> Workout:
        data = await self._request("GET", f"/api/workouts/{workout_id}")
        return db_row_to_workout(data)

    async def create_workout(
        self,
        exercises: Optional[List[Mapping[str, Any]]] = None,
        day: Optional[datetime] = None,
    ) -> Workout:
        payload: Dict[str, Any] = {"exercises": list(exercises or [])}
        if day is not None:
            payload["day"] = day.isoformat()
        data = await self._request("POST", "/api/workouts", expected=(201,), json=payload)
        return db_row_to_workout(data)

    async def delete_workout(self, workout_id: str) -> Workout:
        data = await self._request("DELETE", f"/api/workouts/{workout_id}")
        return db_row_to_workout(data)

    async def get_stats(self) -> StatisticsSummary:
        data = await self._request("GET", "/api/workouts/stats")
        return StatisticsSummary.model_validate(data)

    async def get_recent_workouts(self, count: int = RECENT_WORKOUT_COUNT) -> List[RecentWorkout]:
        data = await self._request("GET", "/api/workouts/recent", params={"count": count})
        return [RecentWorkout.model_validate(item) for item in data]

    async def compute_stats_locally(self) -> StatisticsSummary:
        """
        Fetch every workout and summarize on this side.

        Uses the same aggregator as the server, so the result equals
        get_stats() for the same data.
        """
        return summarize(await self.export_workouts())

    async def compute_recent_locally(self, count: int = RECENT_WORKOUT_COUNT) -> List[RecentWorkout]:
        """Build the recent-workouts series on this side from the newest workouts."""
        return recent_workouts(await self.list_workouts(limit=count), count)

    # -------------------------------------------------------------------------
    # Session operations
    # -------------------------------------------------------------------------

    async def start_workout(self) -> WorkoutSession:
        """Create an empty workout and return the session pointing at it."""
        workout = await self.create_workout()
        logger.info(f"Started workout session {workout.id}")
        return WorkoutSession(workout_id=workout.id)

    async def add_exercise(
        self,
        session: WorkoutSession,
        exercise: Mapping[str, Any],
    ) -> Workout:
        """Append one exercise to the session's workout."""
        data = await self._request(
            "POST",
            f"/api/workouts/{session.workout_id}/exercises",
            json=dict(exercise),
        )
        return db_row_to_workout(data)

    async def complete_workout(self, session: WorkoutSession) -> Workout:
        """
        Finish a session.

        Completion is not recorded server-side; the final state of the
        workout is returned and the caller drops the session.
        """
        workout = await self.get_workout(session.workout_id)
        logger.info(
            f"Completed workout session {session.workout_id}: "
            f"{workout.exercise_count} exercises, {workout.total_duration} min"
        )
        return workout
