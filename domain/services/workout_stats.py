"""
Workout aggregation and statistics.

Pure functions deriving per-workout totals, cross-workout summaries and
date-range subsets from Workout models.

Aggregation tolerates bad history: records that predate validation, or that were
written by other tools, may lack fields or hold junk. Such values count
as zero and never raise.
"""

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable, List, Sequence, Union

from domain.models.exercise import Exercise
from domain.models.statistics import RecentWorkout, StatisticsSummary
from domain.models.workout import Workout

Number = Union[int, float]

RECENT_WORKOUT_COUNT = 7


@dataclass(frozen=True)
class WorkoutTotals:
    """Derived totals for a single workout."""

    total_duration: Number
    total_weight: Number
    exercise_count: int


def _as_number(value: Any) -> Number:
    """Return value if it is a finite number, else 0."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    return value


def _round_half_up(numerator: Number, denominator: int, places: int = 0) -> Number:
    """Divide and round half away from zero (JavaScript Math.round for positives)."""
    quantum = Decimal(1).scaleb(-places)
    value = (Decimal(str(numerator)) / Decimal(denominator)).quantize(
        quantum, rounding=ROUND_HALF_UP
    )
    return int(value) if places == 0 else float(value)


def _exact_sum(terms: Iterable[Number]) -> Number:
    """
    Sum numbers independently of their order.

    Integers are summed exactly; once a float is involved the sum is
    correctly rounded with math.fsum.
    """
    terms = list(terms)
    if all(isinstance(term, int) for term in terms):
        return sum(terms)
    return math.fsum(terms)


def as_utc(value: datetime) -> datetime:
    """Return value as a timezone-aware datetime, treating naive values as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def exercise_volume(exercise: Exercise) -> Number:
    """
    Resistance work: weight x reps x sets.

    Missing weight or reps count as 0 but a missing sets counts as 1, so
    legacy records without sets still contribute. Cardio exercises have
    no volume.
    """
    if not exercise.is_resistance:
        return 0
    weight = _as_number(exercise.weight) or 0
    reps = _as_number(exercise.reps) or 0
    sets = _as_number(exercise.sets) or 1
    return weight * reps * sets


def derive_workout_totals(workout: Workout) -> WorkoutTotals:
    """Compute total duration, resistance volume and exercise count for one workout."""
    return WorkoutTotals(
        total_duration=_exact_sum(_as_number(e.duration) for e in workout.exercises),
        total_weight=_exact_sum(exercise_volume(e) for e in workout.exercises),
        exercise_count=len(workout.exercises),
    )


def summarize(workouts: Sequence[Workout]) -> StatisticsSummary:
    """
    Compute a statistics summary across workouts.

    The result does not depend on input order. Empty input yields zeros
    and no last workout date.
    """
    total_workouts = len(workouts)
    if total_workouts == 0:
        return StatisticsSummary()

    total_exercises = 0
    durations: List[Number] = []
    volumes: List[Number] = []
    distances: List[Number] = []
    cardio_count = 0
    resistance_count = 0

    for workout in workouts:
        total_exercises += len(workout.exercises)
        for exercise in workout.exercises:
            durations.append(_as_number(exercise.duration))
            if exercise.is_resistance:
                resistance_count += 1
                volumes.append(exercise_volume(exercise))
            elif exercise.is_cardio:
                cardio_count += 1
                distances.append(_as_number(exercise.distance))

    total_duration = _exact_sum(durations)
    total_weight = _exact_sum(volumes)
    total_distance = _exact_sum(distances)

    return StatisticsSummary(
        total_workouts=total_workouts,
        total_exercises=total_exercises,
        total_duration=total_duration,
        average_duration=_round_half_up(total_duration, total_workouts),
        total_weight=total_weight,
        total_distance=total_distance,
        cardio_count=cardio_count,
        resistance_count=resistance_count,
        average_exercises_per_workout=_round_half_up(total_exercises, total_workouts, 1),
        last_workout_date=max(as_utc(w.day) for w in workouts),
    )


def sort_newest_first(workouts: Iterable[Workout]) -> List[Workout]:
    """Order workouts by day descending; equal days keep input order."""
    return sorted(workouts, key=lambda w: as_utc(w.day), reverse=True)


def recent_workouts(
    workouts: Iterable[Workout],
    count: int = RECENT_WORKOUT_COUNT,
) -> List[RecentWorkout]:
    """
    Per-workout duration and resistance volume for the latest workouts.

    Takes the `count` newest workouts and returns them oldest first,
    ready to plot as a series.
    """
    latest = sort_newest_first(workouts)[:max(count, 0)]
    series = []
    for workout in reversed(latest):
        totals = derive_workout_totals(workout)
        series.append(RecentWorkout(
            id=workout.id,
            day=as_utc(workout.day),
            total_duration=totals.total_duration,
            total_weight=totals.total_weight,
        ))
    return series


def filter_by_date_range(
    workouts: Iterable[Workout],
    start: datetime,
    end: datetime,
) -> List[Workout]:
    """
    Select workouts with start <= day <= end, newest first.

    Both bounds are inclusive. Naive datetimes are treated as UTC.
    An inverted range selects nothing.
    """
    start, end = as_utc(start), as_utc(end)
    return sort_newest_first(w for w in workouts if start <= as_utc(w.day) <= end)
