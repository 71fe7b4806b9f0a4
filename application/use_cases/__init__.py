"""
Application Use Cases for the Workout Tracker API.

This package contains application-level use cases that orchestrate domain logic
and coordinate between ports/adapters. Use cases are the entry points for
business operations and contain the application's workflow logic.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return result objects, not API responses

Usage:
    from application.use_cases import (
        CreateWorkoutUseCase,
        UpdateExercisesUseCase,
        GetStatisticsUseCase,
    )

    # Start a workout
    create = CreateWorkoutUseCase(workout_repo=workout_repo)
    result = create.execute(exercises=[{"type": "cardio", ...}])

    # Log another exercise
    update = UpdateExercisesUseCase(workout_repo=workout_repo)
    result = update.add_exercise(result.workout.id, {"type": "resistance", ...})

    # Statistics
    stats = GetStatisticsUseCase(workout_repo=workout_repo).execute()
"""

from application.use_cases.create_workout import (
    CreateWorkoutResult,
    CreateWorkoutUseCase,
)
from application.use_cases.delete_workout import (
    DeleteWorkoutResult,
    DeleteWorkoutUseCase,
)
from application.use_cases.get_statistics import (
    GetStatisticsResult,
    GetStatisticsUseCase,
    RecentWorkoutsResult,
)
from application.use_cases.get_workout import (
    GetWorkoutResult,
    GetWorkoutUseCase,
    ListWorkoutsResult,
)
from application.use_cases.update_exercises import (
    UpdateExercisesResult,
    UpdateExercisesUseCase,
)

__all__ = [
    # CreateWorkout
    "CreateWorkoutUseCase",
    "CreateWorkoutResult",
    # DeleteWorkout
    "DeleteWorkoutUseCase",
    "DeleteWorkoutResult",
    # GetStatistics
    "GetStatisticsUseCase",
    "GetStatisticsResult",
    "RecentWorkoutsResult",
    # GetWorkout
    "GetWorkoutUseCase",
    "GetWorkoutResult",
    "ListWorkoutsResult",
    # UpdateExercises
    "UpdateExercisesUseCase",
    "UpdateExercisesResult",
]
