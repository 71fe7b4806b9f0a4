"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- Fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeWorkoutRepository, create_workout_repo

    # Direct instantiation
    repo = FakeWorkoutRepository()
    repo.seed([{"id": "65a1f0c2e4b0a1b2c3d4e5f6", "day": "2024-01-05T08:00:00+00:00"}])

    # Factory function with pre-populated data
    repo = create_workout_repo(num_workouts=5)
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List

from tests.fakes.workout_repository import FakeWorkoutRepository

RUN = {"type": "cardio", "name": "Run", "duration": 30, "distance": 5}
BENCH = {"type": "resistance", "name": "Bench", "duration": 20, "weight": 60, "reps": 8, "sets": 3}


def workout_row(
    workout_id: str,
    day: str,
    exercises: List[Dict[str, Any]] = (),
) -> Dict[str, Any]:
    """Build a stored workout row."""
    return {"id": workout_id, "day": day, "exercises": [dict(e) for e in exercises]}


# =============================================================================
# Factory Functions
# =============================================================================


def create_workout_repo(*, num_workouts: int = 0) -> FakeWorkoutRepository:
    """
    Create a FakeWorkoutRepository with optional pre-populated workouts.

    Workout i is dated i days after 2024-01-01 and holds one run and one
    bench press.

    Args:
        num_workouts: Number of sample workouts to create

    Returns:
        Pre-populated FakeWorkoutRepository
    """
    repo = FakeWorkoutRepository()

    start = datetime(2024, 1, 1, 8, 0, tzinfo=timezone.utc)
    repo.seed([
        workout_row(
            f"{i + 1:024x}",
            (start + timedelta(days=i)).isoformat(),
            [RUN, BENCH],
        )
        for i in range(num_workouts)
    ])
    return repo


__all__ = [
    "FakeWorkoutRepository",
    "create_workout_repo",
    "workout_row",
    "RUN",
    "BENCH",
]
