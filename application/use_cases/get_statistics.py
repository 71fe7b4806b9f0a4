"""
GetStatistics Use Case.

Computes the statistics summary server-side over all workouts, or over
the workouts in an inclusive date range, and the recent-workouts series
of per-workout duration and resistance volume.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from application.ports import WorkoutRepository
from application.use_cases.get_workout import GetWorkoutUseCase
from domain.models import RecentWorkout, StatisticsSummary
from domain.services import RECENT_WORKOUT_COUNT, recent_workouts, summarize


@dataclass
class GetStatisticsResult:
    """Result of computing workout statistics."""

    success: bool
    summary: StatisticsSummary
    start: Optional[datetime] = None
    end: Optional[datetime] = None


@dataclass
class RecentWorkoutsResult:
    """Result of building the recent-workouts series."""

    success: bool
    workouts: List[RecentWorkout] = field(default_factory=list)
    count: int = 0


class GetStatisticsUseCase:
    """
    Use case for workout statistics.

    Usage:
        >>> result = GetStatisticsUseCase(workout_repo).execute()
        >>> result.summary.total_workouts
        3
    """

    def __init__(self, workout_repo: WorkoutRepository) -> None:
        self._workouts = GetWorkoutUseCase(workout_repo)

    def execute(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> GetStatisticsResult:
        """
        Summarize workouts, optionally restricted to start <= day <= end.

        Both bounds must be given for the range to apply.
        """
        if start is not None and end is not None:
            listing = self._workouts.list_by_date_range(start, end)
        else:
            listing = self._workouts.list_workouts()

        return GetStatisticsResult(
            success=True,
            summary=summarize(listing.workouts),
            start=start,
            end=end,
        )

    def recent(self, count: int = RECENT_WORKOUT_COUNT) -> RecentWorkoutsResult:
        """
        Duration and resistance volume of the `count` newest workouts.

        The series is ordered oldest first.
        """
        listing = self._workouts.list_workouts(limit=count)
        series = recent_workouts(listing.workouts, count)
        return RecentWorkoutsResult(success=True, workouts=series, count=len(series))
