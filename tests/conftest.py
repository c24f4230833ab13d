"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import (
    get_auth_service,
    get_payment_gateway,
    get_profile_repository,
    get_task_repository,
    get_user_task_repository,
    get_vote_repository,
    reset_container,
)
from api.middleware.auth import SESSION_COOKIE_NAME
from shared.config import get_settings

from tests.fakes import (
    VALID_SESSION,
    FakeAuthService,
    FakePaymentGateway,
    InMemoryProfileRepository,
    InMemoryTaskRepository,
    InMemoryUserTaskRepository,
    InMemoryVoteRepository,
)


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the service container and cached settings around each test."""
    reset_container()
    get_settings.cache_clear()
    yield
    reset_container()
    get_settings.cache_clear()


@pytest.fixture
def auth_service() -> FakeAuthService:
    return FakeAuthService()


@pytest.fixture
def profiles() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def task_repository() -> InMemoryTaskRepository:
    return InMemoryTaskRepository()


@pytest.fixture
def user_task_repository() -> InMemoryUserTaskRepository:
    return InMemoryUserTaskRepository()


@pytest.fixture
def vote_repository() -> InMemoryVoteRepository:
    return InMemoryVoteRepository()


@pytest.fixture
def payment_gateway() -> FakePaymentGateway:
    return FakePaymentGateway()


@pytest.fixture
def app(
    auth_service,
    profiles,
    task_repository,
    user_task_repository,
    vote_repository,
    payment_gateway,
):
    """Create a fresh app wired to in-memory collaborators."""
    app = create_app()
    app.dependency_overrides[get_auth_service] = lambda: auth_service
    app.dependency_overrides[get_profile_repository] = lambda: profiles
    app.dependency_overrides[get_task_repository] = lambda: task_repository
    app.dependency_overrides[get_user_task_repository] = lambda: user_task_repository
    app.dependency_overrides[get_vote_repository] = lambda: vote_repository
    app.dependency_overrides[get_payment_gateway] = lambda: payment_gateway
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    """Anonymous test client."""
    return TestClient(app)


@pytest.fixture
def authed_client(app) -> TestClient:
    """Test client carrying a valid session cookie."""
    client = TestClient(app)
    client.cookies.set(SESSION_COOKIE_NAME, VALID_SESSION)
    return client
