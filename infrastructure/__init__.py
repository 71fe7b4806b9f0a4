"""
Infrastructure Layer for the Workout Tracker API.

This package contains concrete implementations of repository interfaces
and outbound integrations:
- db/: Supabase database implementations
- tracker_client: Async HTTP client for the workout tracker API
"""

# Re-export database repositories for convenient access
from infrastructure.db import SupabaseWorkoutRepository

__all__ = [
    "SupabaseWorkoutRepository",
]
