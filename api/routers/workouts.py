"""
Workouts router for workout sessions, exercises and statistics.

This router contains endpoints for:
- /api/workouts - List all workouts, start a new workout
- /api/workouts/export - Every workout, unaffected by the default list limit
- /api/workouts/range - Workouts inside an inclusive date range
- /api/workouts/stats - Server-computed statistics summary
- /api/workouts/recent - Per-workout duration and volume of the newest workouts
- /api/workouts/{workout_id} - Get, append exercise, delete workout
- /api/workouts/{workout_id}/exercises - Append or bulk replace exercises
- /api/workouts/{workout_id}/exercises/{index} - Remove one exercise

Fixed paths (/export, /range, /stats, /recent) are declared before
/{workout_id} so they are matched first.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from pydantic import BaseModel, Field

from api.deps import (
    get_create_workout_use_case,
    get_delete_workout_use_case,
    get_get_workout_use_case,
    get_settings,
    get_statistics_use_case,
    get_update_exercises_use_case,
)
from application.use_cases import (
    CreateWorkoutUseCase,
    DeleteWorkoutUseCase,
    GetStatisticsUseCase,
    GetWorkoutUseCase,
    UpdateExercisesUseCase,
)
from backend.settings import Settings
from domain.converters import workout_to_response
from domain.services import RECENT_WORKOUT_COUNT

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["Workouts"],
)

NOT_FOUND_CODES = {"WorkoutNotFound", "ExerciseNotFound"}


# =============================================================================
# Request Models
# =============================================================================


class CreateWorkoutRequest(BaseModel):
    """Request for starting a workout."""
    day: Optional[datetime] = None
    exercises: List[Dict[str, Any]] = Field(default_factory=list)


class ReplaceExercisesRequest(BaseModel):
    """Request for replacing a workout's exercise list."""
    exercises: List[Dict[str, Any]]


# =============================================================================
# Helper Functions
# =============================================================================


def _raise_for_result(result) -> None:
    """Translate a failed use case result into an HTTPException."""
    code = result.error_code or "WorkoutTrackerError"
    status_code = 404 if code in NOT_FOUND_CODES else 400
    raise HTTPException(
        status_code=status_code,
        detail={
            "error": code,
            "message": result.error,
            "errors": list(getattr(result, "validation_errors", None) or [result.error]),
            "fields": list(getattr(result, "error_fields", None) or []),
        },
    )


# =============================================================================
# Collection Endpoints
# =============================================================================


@router.get("/workouts")
def list_workouts_endpoint(
    limit: Optional[int] = Query(None, ge=1, description="Maximum number of workouts"),
    settings: Settings = Depends(get_settings),
    use_case: GetWorkoutUseCase = Depends(get_get_workout_use_case),
):
    """List all workouts, newest first."""
    result = use_case.list_workouts(limit=limit or settings.default_list_limit)
    return [workout_to_response(w) for w in result.workouts]


@router.post("/workouts", status_code=201)
def create_workout_endpoint(
    request: Optional[CreateWorkoutRequest] = Body(None),
    use_case: CreateWorkoutUseCase = Depends(get_create_workout_use_case),
):
    """Start a workout, optionally with an initial list of exercises."""
    request = request or CreateWorkoutRequest()
    result = use_case.execute(day=request.day, exercises=request.exercises)
    if not result.success:
        _raise_for_result(result)
    return workout_to_response(result.workout)


@router.get("/workouts/export")
def export_workouts_endpoint(
    use_case: GetWorkoutUseCase = Depends(get_get_workout_use_case),
):
    """Every workout, newest first, ignoring the default list limit."""
    result = use_case.list_workouts()
    return [workout_to_response(w) for w in result.workouts]


@router.get("/workouts/range")
def get_workouts_in_range_endpoint(
    start: datetime = Query(..., description="Inclusive lower bound"),
    end: datetime = Query(..., description="Inclusive upper bound"),
    use_case: GetWorkoutUseCase = Depends(get_get_workout_use_case),
):
    """Workouts with start <= day <= end, newest first."""
    result = use_case.list_by_date_range(start, end)
    return [workout_to_response(w) for w in result.workouts]


@router.get("/workouts/stats")
def get_statistics_endpoint(
    start: Optional[datetime] = Query(None, description="Inclusive lower bound"),
    end: Optional[datetime] = Query(None, description="Inclusive upper bound"),
    use_case: GetStatisticsUseCase = Depends(get_statistics_use_case),
):
    """Statistics summary over all workouts (or a date range)."""
    if (start is None) != (end is None):
        missing = "end" if end is None else "start"
        message = "start and end must be given together"
        raise HTTPException(
            status_code=422,
            detail={
                "error": "InvalidDateRange",
                "message": message,
                "errors": [message],
                "fields": [missing],
            },
        )
    result = use_case.execute(start=start, end=end)
    return result.summary.model_dump(mode="json")


@router.get("/workouts/recent")
def get_recent_workouts_endpoint(
    count: int = Query(RECENT_WORKOUT_COUNT, ge=1, description="Number of newest workouts"),
    use_case: GetStatisticsUseCase = Depends(get_statistics_use_case),
):
    """Duration and resistance volume of the newest workouts, oldest first."""
    result = use_case.recent(count)
    return [w.model_dump(mode="json") for w in result.workouts]


# =============================================================================
# Single Workout Endpoints
# =============================================================================


@router.get("/workouts/{workout_id}")
def get_workout_endpoint(
    workout_id: str,
    use_case: GetWorkoutUseCase = Depends(get_get_workout_use_case),
):
    """Get one workout by ID."""
    result = use_case.get_workout(workout_id)
    if not result.success:
        _raise_for_result(result)
    return workout_to_response(result.workout)


@router.put("/workouts/{workout_id}")
@router.post("/workouts/{workout_id}/exercises")
def add_exercise_endpoint(
    workout_id: str,
    exercise: Dict[str, Any] = Body(...),
    use_case: UpdateExercisesUseCase = Depends(get_update_exercises_use_case),
):
    """Validate one exercise and append it to the workout."""
    result = use_case.add_exercise(workout_id, exercise)
    if not result.success:
        _raise_for_result(result)
    return workout_to_response(result.workout)


@router.put("/workouts/{workout_id}/exercises")
def replace_exercises_endpoint(
    workout_id: str,
    request: ReplaceExercisesRequest,
    use_case: UpdateExercisesUseCase = Depends(get_update_exercises_use_case),
):
    """Replace the whole exercise list; nothing is written unless all are valid."""
    result = use_case.replace_exercises(workout_id, request.exercises)
    if not result.success:
        _raise_for_result(result)
    return workout_to_response(result.workout)


@router.delete("/workouts/{workout_id}")
def delete_workout_endpoint(
    workout_id: str,
    use_case: DeleteWorkoutUseCase = Depends(get_delete_workout_use_case),
):
    """Delete a workout and return what was removed."""
    result = use_case.execute(workout_id)
    if not result.success:
        _raise_for_result(result)
    return workout_to_response(result.workout)


@router.delete("/workouts/{workout_id}/exercises/{index}")
def remove_exercise_endpoint(
    workout_id: str,
    index: int,
    use_case: UpdateExercisesUseCase = Depends(get_update_exercises_use_case),
):
    """Remove the exercise at a zero-based position."""
    result = use_case.remove_exercise(workout_id, index)
    if not result.success:
        _raise_for_result(result)
    return workout_to_response(result.workout)
