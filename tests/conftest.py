"""Pytest configuration and shared fixtures for all tests.

This module provides:
- Test configuration and markers
- A fresh in-memory task repository per test
- The FastAPI application and an HTTP client bound to it
"""

from typing import AsyncGenerator

import pytest
from _pytest.config import Config
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from application.settings import Settings
from integration.repositories import InMemoryTaskRepository
from main import create_app

# ============================================================================
# PYTEST CONFIGURATION
# ============================================================================


def pytest_configure(config: Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "repository: Repository layer tests")
    config.addinivalue_line("markers", "command: Command handler tests")
    config.addinivalue_line("markers", "query: Query handler tests")
    config.addinivalue_line("markers", "api: HTTP API tests")


# ============================================================================
# REPOSITORY FIXTURES
# ============================================================================


@pytest.fixture
def task_repository() -> InMemoryTaskRepository:
    """Provide an empty in-memory task repository."""
    return InMemoryTaskRepository()


# ============================================================================
# APPLICATION FIXTURES
# ============================================================================


@pytest.fixture
def test_settings() -> Settings:
    """Provide settings isolated from the environment's .env file."""
    return Settings(_env_file=None, log_level="WARNING", app_version="9.9.9", service_name="task-manager-test")


@pytest.fixture
def app(task_repository: InMemoryTaskRepository, test_settings: Settings) -> FastAPI:
    """Provide the application wired to the test repository."""
    return create_app(task_repository=task_repository, settings=test_settings)


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Provide an HTTP client talking to the application in-process."""
    async with AsyncClient(transport=ASGITransport(app=app, raise_app_exceptions=False), base_url="http://test") as ac:
        yield ac
