"""
Domain layer for the Workout Tracker API.

This package contains pure domain models, services and errors that are
independent of infrastructure concerns (database, API, external services).
"""

from domain.models import (
    Exercise,
    ExerciseCategory,
    StatisticsSummary,
    Workout,
)

__all__ = [
    "Exercise",
    "ExerciseCategory",
    "StatisticsSummary",
    "Workout",
]
