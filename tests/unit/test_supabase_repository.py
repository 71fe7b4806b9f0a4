"""
Unit tests for infrastructure/db/workout_repository.py

The Supabase client is replaced by a MagicMock; tests check the queries
issued and how results and failures are translated.
"""
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from application.ports import WorkoutRepository
from domain.exceptions import StorageError
from domain.identifiers import is_valid_workout_id
from infrastructure import SupabaseWorkoutRepository

# All tests in this module are pure logic tests with mocks - mark as unit
pytestmark = pytest.mark.unit

WORKOUT_ID = "65a1f0c2e4b0a1b2c3d4e5f6"
ROW = {"id": WORKOUT_ID, "day": "2024-01-05T08:00:00+00:00", "exercises": []}


def result(data):
    response = MagicMock()
    response.data = data
    return response


@pytest.fixture
def client():
    return MagicMock()


@pytest.fixture
def repo(client):
    return SupabaseWorkoutRepository(client)


def table(client):
    return client.table.return_value


PROTOCOL_METHODS = [
    "create",
    "get",
    "list_all",
    "list_by_date_range",
    "append_exercise",
    "replace_exercises",
    "remove_exercise",
    "delete",
]


class TestProtocolConformance:
    @pytest.mark.parametrize("method_name", PROTOCOL_METHODS)
    def test_protocol_declares_method(self, method_name):
        assert hasattr(WorkoutRepository, method_name), \
            f"WorkoutRepository missing method: {method_name}"

    @pytest.mark.parametrize("method_name", PROTOCOL_METHODS)
    def test_supabase_implements_method(self, repo, method_name):
        assert callable(getattr(repo, method_name))

    @pytest.mark.parametrize("method_name", PROTOCOL_METHODS)
    def test_fake_implements_method(self, method_name):
        from tests.fakes import FakeWorkoutRepository

        assert callable(getattr(FakeWorkoutRepository(), method_name))


class TestCreate:
    def test_inserts_generated_id(self, client, repo):
        table(client).insert.return_value.execute.return_value = result([ROW])
        day = datetime(2024, 1, 5, 8, 0, tzinfo=timezone.utc)

        row = repo.create(day=day, exercises=[])

        assert row == ROW
        client.table.assert_called_with("workouts")
        inserted = table(client).insert.call_args[0][0]
        assert is_valid_workout_id(inserted["id"])
        assert inserted["day"] == day.isoformat()
        assert inserted["exercises"] == []

    def test_no_row_returned_is_storage_error(self, client, repo):
        table(client).insert.return_value.execute.return_value = result([])
        with pytest.raises(StorageError):
            repo.create(day=datetime.now(timezone.utc), exercises=[])

    def test_client_failure_is_storage_error(self, client, repo):
        table(client).insert.return_value.execute.side_effect = Exception("PGRST301 permission denied")
        with pytest.raises(StorageError) as exc_info:
            repo.create(day=datetime.now(timezone.utc), exercises=[])
        assert exc_info.value.message == "Failed to create workout"


class TestQueries:
    def test_get_found(self, client, repo):
        query = table(client).select.return_value.eq.return_value.limit.return_value
        query.execute.return_value = result([ROW])
        assert repo.get(WORKOUT_ID) == ROW
        table(client).select.return_value.eq.assert_called_with("id", WORKOUT_ID)

    def test_get_missing(self, client, repo):
        query = table(client).select.return_value.eq.return_value.limit.return_value
        query.execute.return_value = result([])
        assert repo.get(WORKOUT_ID) is None

    def test_list_all_orders_by_day(self, client, repo):
        ordered = table(client).select.return_value.order.return_value.order.return_value
        ordered.range.return_value.execute.return_value = result([ROW])
        assert repo.list_all() == [ROW]
        table(client).select.return_value.order.assert_called_with("day", desc=True)
        ordered.range.assert_called_once_with(0, 999)

    def test_list_all_with_limit(self, client, repo):
        ordered = table(client).select.return_value.order.return_value.order.return_value
        ordered.range.return_value.execute.return_value = result([ROW])
        assert repo.list_all(limit=10) == [ROW]
        ordered.range.assert_called_once_with(0, 9)

    def test_list_all_reads_every_page(self, client):
        repo = SupabaseWorkoutRepository(client, page_size=2)
        rows = [{**ROW, "id": f"{i:024x}"} for i in range(5)]
        ordered = table(client).select.return_value.order.return_value.order.return_value
        ordered.range.return_value.execute.side_effect = [
            result(rows[0:2]),
            result(rows[2:4]),
            result(rows[4:5]),
        ]

        assert repo.list_all() == rows
        assert [c.args for c in ordered.range.call_args_list] == [(0, 1), (2, 3), (4, 5)]

    def test_list_all_stops_on_empty_page(self, client):
        repo = SupabaseWorkoutRepository(client, page_size=2)
        ordered = table(client).select.return_value.order.return_value.order.return_value
        ordered.range.return_value.execute.side_effect = [result([ROW, ROW]), result([])]
        assert repo.list_all() == [ROW, ROW]
        assert ordered.range.call_count == 2

    def test_list_all_limit_spans_pages(self, client):
        repo = SupabaseWorkoutRepository(client, page_size=2)
        ordered = table(client).select.return_value.order.return_value.order.return_value
        ordered.range.return_value.execute.side_effect = [result([ROW, ROW]), result([ROW])]
        assert len(repo.list_all(limit=3)) == 3
        assert [c.args for c in ordered.range.call_args_list] == [(0, 1), (2, 2)]

    def test_list_all_failure_is_storage_error(self, client, repo):
        ordered = table(client).select.return_value.order.return_value.order.return_value
        ordered.range.return_value.execute.side_effect = Exception("timeout")
        with pytest.raises(StorageError):
            repo.list_all()

    def test_list_by_date_range(self, client, repo):
        start = datetime(2024, 1, 1, tzinfo=timezone.utc)
        end = datetime(2024, 1, 5, tzinfo=timezone.utc)
        gte = table(client).select.return_value.gte
        lte = gte.return_value.lte
        ordered = lte.return_value.order.return_value.order.return_value
        ordered.range.return_value.execute.return_value = result(None)

        assert repo.list_by_date_range(start, end) == []
        gte.assert_called_with("day", start.isoformat())
        lte.assert_called_with("day", end.isoformat())
        ordered.range.assert_called_once_with(0, 999)


class TestMutations:
    def test_append_uses_rpc(self, client, repo):
        client.rpc.return_value.execute.return_value = result([ROW])
        exercise = {"type": "cardio", "name": "Run", "duration": 30, "distance": 5.0}

        assert repo.append_exercise(WORKOUT_ID, exercise) == ROW
        client.rpc.assert_called_with(
            "append_workout_exercise",
            {"p_workout_id": WORKOUT_ID, "p_exercise": exercise},
        )

    def test_append_missing_workout(self, client, repo):
        client.rpc.return_value.execute.return_value = result([])
        assert repo.append_exercise(WORKOUT_ID, {}) is None

    def test_remove_uses_rpc(self, client, repo):
        client.rpc.return_value.execute.return_value = result([ROW])
        assert repo.remove_exercise(WORKOUT_ID, 2) == ROW
        client.rpc.assert_called_with(
            "remove_workout_exercise",
            {"p_workout_id": WORKOUT_ID, "p_index": 2},
        )

    def test_remove_out_of_range_returns_none(self, client, repo):
        client.rpc.return_value.execute.return_value = result([])
        assert repo.remove_exercise(WORKOUT_ID, 9) is None

    def test_replace_updates_exercises(self, client, repo):
        updated = table(client).update.return_value.eq.return_value
        updated.execute.return_value = result([ROW])
        assert repo.replace_exercises(WORKOUT_ID, []) == ROW
        payload = table(client).update.call_args[0][0]
        assert payload["exercises"] == []
        assert "updated_at" in payload

    def test_delete_returns_row(self, client, repo):
        table(client).delete.return_value.eq.return_value.execute.return_value = result([ROW])
        assert repo.delete(WORKOUT_ID) == ROW

    def test_delete_missing(self, client, repo):
        table(client).delete.return_value.eq.return_value.execute.return_value = result([])
        assert repo.delete(WORKOUT_ID) is None

    def test_rpc_failure_is_storage_error(self, client, repo):
        client.rpc.return_value.execute.side_effect = Exception("boom")
        with pytest.raises(StorageError):
            repo.remove_exercise(WORKOUT_ID, 0)


class TestCustomTable:
    def test_table_name_is_configurable(self, client):
        repo = SupabaseWorkoutRepository(client, table="workouts_v2")
        table(client).delete.return_value.eq.return_value.execute.return_value = result([])
        repo.delete(WORKOUT_ID)
        client.table.assert_called_with("workouts_v2")
