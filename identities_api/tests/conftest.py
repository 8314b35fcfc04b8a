"""Shared fixtures for the API tests."""

import pytest
from fastapi.testclient import TestClient

from app.entrypoints.api.setup import create_app
from app.settings import Settings


@pytest.fixture
def make_client():
    """Build a client for an app configured with the given settings."""

    def _make_client(health_checks=None, **overrides) -> TestClient:
        settings = Settings(**overrides)
        return TestClient(
            create_app(settings, health_checks=health_checks),
            base_url="https://testserver",
        )

    return _make_client


@pytest.fixture
def production_client(make_client) -> TestClient:
    return make_client(environment="Production")


@pytest.fixture
def development_client(make_client) -> TestClient:
    return make_client(environment="Development")
