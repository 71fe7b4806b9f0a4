"""
Domain models for the Workout Tracker API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core business concepts:
- Workout: The aggregate root holding an ordered list of exercises
- Exercise: A single cardio or resistance exercise
- StatisticsSummary: Derived metrics across many workouts
- RecentWorkout: One point of the recent-workouts series

Usage:
    >>> from domain.models import Workout, Exercise

    >>> workout = Workout(
    ...     exercises=[Exercise(type="cardio", name="Run", duration=30, distance=5)]
    ... )

    >>> # Serialize to JSON (includes total_duration and exercise_count)
    >>> json_str = workout.model_dump_json(by_alias=True)
"""

from domain.models.exercise import CATEGORY_FIELDS, Exercise, ExerciseCategory
from domain.models.statistics import RecentWorkout, StatisticsSummary
from domain.models.workout import Workout

__all__ = [
    # Main entities
    "Workout",
    "Exercise",
    "StatisticsSummary",
    "RecentWorkout",
    # Enums
    "ExerciseCategory",
    "CATEGORY_FIELDS",
]
