"""
Tests for api/deps.py dependency providers.
"""
from unittest.mock import MagicMock, patch

import pytest
from fastapi import HTTPException

from api import deps
from application.use_cases import (
    CreateWorkoutUseCase,
    DeleteWorkoutUseCase,
    GetStatisticsUseCase,
    GetWorkoutUseCase,
    UpdateExercisesUseCase,
)
from backend.settings import Settings
from infrastructure import SupabaseWorkoutRepository
from tests.fakes import FakeWorkoutRepository


@pytest.fixture(autouse=True)
def clear_client_cache():
    deps.get_supabase_client.cache_clear()
    yield
    deps.get_supabase_client.cache_clear()


@pytest.mark.unit
class TestSettingsProvider:
    def test_returns_cached_settings(self):
        assert deps.get_settings() is deps.get_settings()


@pytest.mark.unit
class TestSupabaseClientProvider:
    def test_none_without_credentials(self):
        settings = Settings(
            supabase_url=None,
            supabase_service_role_key=None,
            supabase_anon_key=None,
            _env_file=None,
        )
        with patch("api.deps._get_settings", return_value=settings):
            assert deps.get_supabase_client() is None

    def test_creates_client_once(self):
        settings = Settings(
            supabase_url="https://test.supabase.co",
            supabase_service_role_key=None,
            supabase_anon_key="anon",
            _env_file=None,
        )
        with patch("api.deps._get_settings", return_value=settings), \
                patch("api.deps.create_client") as mock_create:
            mock_create.return_value = MagicMock()
            first = deps.get_supabase_client()
            second = deps.get_supabase_client()

        assert first is second
        mock_create.assert_called_once_with("https://test.supabase.co", "anon")

    def test_required_raises_503(self):
        with patch("api.deps.get_supabase_client", return_value=None):
            with pytest.raises(HTTPException) as exc_info:
                deps.get_supabase_client_required()
        assert exc_info.value.status_code == 503


@pytest.mark.unit
class TestRepositoryProvider:
    def test_uses_configured_table(self):
        client = MagicMock()
        settings = Settings(workouts_table="workouts_v2", _env_file=None)
        repo = deps.get_workout_repo(client=client, settings=settings)
        assert isinstance(repo, SupabaseWorkoutRepository)
        repo.delete("65a1f0c2e4b0a1b2c3d4e5f6")
        client.table.assert_called_with("workouts_v2")


@pytest.mark.unit
class TestUseCaseProviders:
    @pytest.mark.parametrize(
        "provider, use_case_type",
        [
            (deps.get_create_workout_use_case, CreateWorkoutUseCase),
            (deps.get_get_workout_use_case, GetWorkoutUseCase),
            (deps.get_update_exercises_use_case, UpdateExercisesUseCase),
            (deps.get_delete_workout_use_case, DeleteWorkoutUseCase),
            (deps.get_statistics_use_case, GetStatisticsUseCase),
        ],
    )
    def test_builds_use_case(self, provider, use_case_type):
        assert isinstance(provider(workout_repo=FakeWorkoutRepository()), use_case_type)
