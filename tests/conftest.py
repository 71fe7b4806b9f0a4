"""
Shared pytest fixtures.

The API fixtures build a fresh app per test and route every repository
dependency to an in-memory FakeWorkoutRepository.
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from api.deps import get_settings, get_workout_repo
from backend.main import create_app
from backend.settings import Settings
from tests.fakes import FakeWorkoutRepository


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with minimal configuration."""
    return Settings(
        environment="test",
        supabase_url="https://test.supabase.co",
        supabase_service_role_key="test-key",
        _env_file=None,
    )


@pytest.fixture
def fake_workout_repo() -> FakeWorkoutRepository:
    """Fresh in-memory workout repository."""
    return FakeWorkoutRepository()


@pytest.fixture
def app(test_settings, fake_workout_repo):
    """Test application with repository and settings overridden."""
    app = create_app(settings=test_settings)
    app.dependency_overrides[get_workout_repo] = lambda: fake_workout_repo
    app.dependency_overrides[get_settings] = lambda: test_settings
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    """FastAPI TestClient bound to the test app."""
    yield TestClient(app)
