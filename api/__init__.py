"""
API package for the Workout Tracker API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_workout_repo,
    get_create_workout_use_case,
    get_get_workout_use_case,
    get_update_exercises_use_case,
    get_delete_workout_use_case,
    get_statistics_use_case,
)

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
