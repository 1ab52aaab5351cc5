"""Pytest configuration and fixtures."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from user_api.config import Settings
from user_api.main import create_app
from user_common.services.user_store import UserStore


@pytest.fixture
def settings() -> Settings:
    """Settings for a test application with the startup users seeded."""
    return Settings(environment="test", seed_users=True, _env_file=None)


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """Create a fresh application with its own store."""
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def store(app: FastAPI) -> UserStore:
    """The store owned by the test application."""
    return app.state.user_store
