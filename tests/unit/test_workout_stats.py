"""
Unit tests for domain/services/workout_stats.py
"""

import itertools
from datetime import datetime, timezone

import pytest

from domain.models import Exercise, Workout
from domain.services import (
    derive_workout_totals,
    exercise_volume,
    filter_by_date_range,
    recent_workouts,
    sort_newest_first,
    summarize,
    validate_exercise_payload,
)


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


def run(duration=30, distance=5):
    return Exercise(type="cardio", name="Run", duration=duration, distance=distance)


def bench(duration=20, weight=60, reps=8, sets=3):
    return Exercise(type="resistance", name="Bench", duration=duration, weight=weight, reps=reps, sets=sets)


def workout(day, *exercises, workout_id=None):
    return Workout(id=workout_id, day=day, exercises=list(exercises))


@pytest.mark.unit
class TestWorkoutTotals:
    def test_empty_workout(self):
        totals = derive_workout_totals(Workout())
        assert totals.total_duration == 0
        assert totals.exercise_count == 0

    def test_sums_durations(self):
        totals = derive_workout_totals(workout(utc(2024, 1, 1), run(), bench()))
        assert totals.total_duration == 50
        assert totals.total_weight == 1440
        assert totals.exercise_count == 2

    def test_missing_duration_counts_as_zero(self):
        totals = derive_workout_totals(workout(utc(2024, 1, 1), run(duration=None), bench()))
        assert totals.total_duration == 20

    def test_model_exposes_totals(self):
        w = workout(utc(2024, 1, 1), run(), bench())
        assert w.total_duration == 50
        assert w.total_weight == 1440
        assert w.exercise_count == 2


@pytest.mark.unit
class TestVolume:
    def test_weight_reps_sets(self):
        assert exercise_volume(bench(weight=10, reps=5, sets=3)) == 150

    def test_missing_sets_counts_as_one(self):
        assert exercise_volume(bench(weight=10, reps=5, sets=None)) == 50

    def test_missing_weight_or_reps_counts_as_zero(self):
        assert exercise_volume(bench(weight=None)) == 0
        assert exercise_volume(bench(reps=None)) == 0

    def test_cardio_has_no_volume(self):
        assert exercise_volume(run()) == 0


@pytest.mark.unit
class TestSummarize:
    def test_empty_input(self):
        summary = summarize([])
        assert summary.total_workouts == 0
        assert summary.total_exercises == 0
        assert summary.total_duration == 0
        assert summary.average_duration == 0
        assert summary.total_weight == 0
        assert summary.average_exercises_per_workout == 0
        assert summary.last_workout_date is None

    def test_volume_example(self):
        summary = summarize([workout(utc(2024, 1, 1), bench(weight=10, reps=5, sets=3))])
        assert summary.total_weight == 150

    def test_volume_example_without_sets(self):
        summary = summarize([workout(utc(2024, 1, 1), bench(weight=10, reps=5, sets=None))])
        assert summary.total_weight == 50

    def test_end_to_end_session(self):
        """A run plus a bench press logged through the validator."""
        exercises = [
            validate_exercise_payload({"type": "cardio", "name": "Run", "duration": 30, "distance": 5}),
            validate_exercise_payload({
                "type": "resistance", "name": "Bench", "duration": 20,
                "weight": 60, "reps": 8, "sets": 3,
            }),
        ]
        w = workout(utc(2024, 1, 1), *exercises)
        assert w.total_duration == 50

        summary = summarize([w])
        assert summary.total_workouts == 1
        assert summary.total_duration == 50
        assert summary.total_exercises == 2
        assert summary.total_weight == 1440
        assert summary.average_duration == 50
        assert summary.total_distance == 5
        assert summary.cardio_count == 1
        assert summary.resistance_count == 1
        assert summary.average_exercises_per_workout == 2.0

    def test_average_duration_rounds_half_up(self):
        workouts = [
            workout(utc(2024, 1, 1), run(duration=30)),
            workout(utc(2024, 1, 2), run(duration=31)),
        ]
        assert summarize(workouts).average_duration == 31

    def test_average_exercises_one_decimal(self):
        workouts = [
            workout(utc(2024, 1, 1), run(), run()),
            workout(utc(2024, 1, 2), run()),
            workout(utc(2024, 1, 3), run()),
        ]
        # 4 / 3 = 1.333...
        assert summarize(workouts).average_exercises_per_workout == 1.3

    def test_average_exercises_half_rounds_up(self):
        workouts = [workout(utc(2024, 1, d), run()) for d in range(1, 21)]
        workouts[0] = workout(utc(2024, 1, 1), run(), run())
        # 21 / 20 = 1.05
        assert summarize(workouts).average_exercises_per_workout == 1.1

    def test_order_independent(self):
        workouts = [
            workout(utc(2024, 1, 3), bench()),
            workout(utc(2024, 1, 1), run()),
            workout(utc(2024, 1, 2), run(), bench(sets=None)),
        ]
        assert summarize(workouts) == summarize(list(reversed(workouts)))

    def test_every_permutation_gives_identical_totals(self):
        workouts = [
            workout(utc(2024, 1, day), bench(weight=weight, reps=1, sets=1), run(distance=weight))
            for day, weight in ((1, 0.1), (2, 0.2), (3, 0.3))
        ]
        summaries = [summarize(list(p)) for p in itertools.permutations(workouts)]
        assert {s.total_weight for s in summaries} == {0.6}
        assert {s.total_distance for s in summaries} == {0.6}

    def test_integer_totals_stay_integers(self):
        summary = summarize([workout(utc(2024, 1, 1), run(), bench())])
        assert isinstance(summary.total_weight, int)
        assert isinstance(summary.total_duration, int)

    def test_last_workout_date_is_max_day(self):
        workouts = [
            workout(utc(2024, 1, 3), run()),
            workout(utc(2024, 1, 10), run()),
            workout(utc(2024, 1, 5), run()),
        ]
        assert summarize(workouts).last_workout_date == utc(2024, 1, 10)

    def test_malformed_history_counts_as_zero(self):
        legacy = Exercise(type="resistance", name="Old", duration=None, weight=None, reps=5)
        summary = summarize([workout(utc(2024, 1, 1), legacy)])
        assert summary.total_duration == 0
        assert summary.total_weight == 0
        assert summary.total_exercises == 1

    def test_empty_workouts_count(self):
        summary = summarize([Workout(day=utc(2024, 1, 1))])
        assert summary.total_workouts == 1
        assert summary.average_duration == 0


@pytest.mark.unit
class TestDateRange:
    def setup_method(self):
        self.w1 = workout(utc(2024, 1, 1), run(), workout_id="a")
        self.w5 = workout(utc(2024, 1, 5), run(), workout_id="b")
        self.w10 = workout(utc(2024, 1, 10), run(), workout_id="c")

    def test_inclusive_bounds_newest_first(self):
        selected = filter_by_date_range([self.w1, self.w5, self.w10], utc(2024, 1, 1), utc(2024, 1, 5))
        assert [w.id for w in selected] == ["b", "a"]

    def test_inverted_range_is_empty(self):
        assert filter_by_date_range([self.w1, self.w5], utc(2024, 1, 5), utc(2024, 1, 1)) == []

    def test_naive_bounds_treated_as_utc(self):
        selected = filter_by_date_range([self.w1, self.w5, self.w10], datetime(2024, 1, 5), datetime(2024, 1, 10))
        assert [w.id for w in selected] == ["c", "b"]

    def test_result_is_subset(self):
        source = [self.w1, self.w5, self.w10]
        selected = filter_by_date_range(source, utc(2024, 1, 2), utc(2024, 1, 31))
        assert all(w in source for w in selected)

    def test_ties_keep_input_order(self):
        first = workout(utc(2024, 1, 5), run(), workout_id="first")
        second = workout(utc(2024, 1, 5), run(), workout_id="second")
        selected = filter_by_date_range([first, self.w1, second], utc(2024, 1, 1), utc(2024, 1, 5))
        assert [w.id for w in selected] == ["first", "second", "a"]

    def test_sort_newest_first(self):
        assert [w.id for w in sort_newest_first([self.w5, self.w1, self.w10])] == ["c", "b", "a"]


@pytest.mark.unit
class TestRecentWorkouts:
    def test_latest_seven_oldest_first(self):
        workouts = [workout(utc(2024, 1, day), run(duration=day), workout_id=f"w{day}") for day in range(1, 11)]
        series = recent_workouts(workouts)
        assert [point.id for point in series] == [f"w{day}" for day in range(4, 11)]
        assert [point.total_duration for point in series] == list(range(4, 11))

    def test_per_workout_volume(self):
        series = recent_workouts([
            workout(utc(2024, 1, 2), run(), bench(sets=None), workout_id="b"),
            workout(utc(2024, 1, 1), bench(), workout_id="a"),
        ])
        assert [(p.id, p.total_weight, p.total_duration) for p in series] == [
            ("a", 1440, 20),
            ("b", 480, 50),
        ]

    def test_count(self):
        workouts = [workout(utc(2024, 1, day), run()) for day in range(1, 4)]
        assert len(recent_workouts(workouts, count=2)) == 2
        assert recent_workouts(workouts, count=0) == []

    def test_empty(self):
        assert recent_workouts([]) == []
