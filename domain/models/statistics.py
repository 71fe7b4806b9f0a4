"""
Statistics summary - a derived, never-persisted view over workouts.
"""

from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, Field


class StatisticsSummary(BaseModel):
    """Aggregate metrics computed across a set of workouts."""

    total_workouts: int = 0
    total_exercises: int = 0
    total_duration: Union[int, float] = Field(default=0, description="Minutes")
    average_duration: int = Field(
        default=0, description="Minutes per workout, rounded half-up"
    )
    total_weight: Union[int, float] = Field(
        default=0, description="Resistance volume: sum of weight x reps x sets"
    )
    total_distance: Union[int, float] = Field(
        default=0, description="Sum of cardio distances"
    )
    cardio_count: int = 0
    resistance_count: int = 0
    average_exercises_per_workout: float = Field(
        default=0.0, description="Rounded half-up to one decimal"
    )
    last_workout_date: Optional[datetime] = None


class RecentWorkout(BaseModel):
    """One point of the recent-workouts series."""

    id: Optional[str] = None
    day: datetime
    total_duration: Union[int, float] = Field(default=0, description="Minutes")
    total_weight: Union[int, float] = Field(
        default=0, description="Resistance volume of this workout"
    )
