"""
FastAPI Dependency Providers for the Workout Tracker API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations, so tests
can swap in the in-memory repository.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- Repository and use case providers create new instances per-request

Usage in routers:
    from api.deps import get_create_workout_use_case
    from application.use_cases import CreateWorkoutUseCase

    @router.post("/workouts")
    def create_workout(
        use_case: CreateWorkoutUseCase = Depends(get_create_workout_use_case),
    ):
        ...

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_workout_repo] = lambda: FakeWorkoutRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException
from supabase import Client, create_client

from application.ports import WorkoutRepository
from application.use_cases import (
    CreateWorkoutUseCase,
    DeleteWorkoutUseCase,
    GetStatisticsUseCase,
    GetWorkoutUseCase,
    UpdateExercisesUseCase,
)
from backend.settings import Settings, get_settings as _get_settings
from infrastructure import SupabaseWorkoutRepository


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_workout_repo(
    client: Client = Depends(get_supabase_client_required),
    settings: Settings = Depends(get_settings),
) -> WorkoutRepository:
    """
    Get WorkoutRepository implementation.

    Returns a SupabaseWorkoutRepository bound to the configured table.
    The return type is the Protocol to enable easy mocking.
    """
    return SupabaseWorkoutRepository(client, table=settings.workouts_table)


# =============================================================================
# Use Case Providers
# =============================================================================


def get_create_workout_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
) -> CreateWorkoutUseCase:
    return CreateWorkoutUseCase(workout_repo=workout_repo)


def get_get_workout_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
) -> GetWorkoutUseCase:
    return GetWorkoutUseCase(workout_repo=workout_repo)


def get_update_exercises_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
) -> UpdateExercisesUseCase:
    return UpdateExercisesUseCase(workout_repo=workout_repo)


def get_delete_workout_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
) -> DeleteWorkoutUseCase:
    return DeleteWorkoutUseCase(workout_repo=workout_repo)


def get_statistics_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
) -> GetStatisticsUseCase:
    return GetStatisticsUseCase(workout_repo=workout_repo)


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_workout_repo",
    # Use cases
    "get_create_workout_use_case",
    "get_get_workout_use_case",
    "get_update_exercises_use_case",
    "get_delete_workout_use_case",
    "get_statistics_use_case",
]
