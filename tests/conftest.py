"""Shared fixtures: an app built from explicit settings and its test client."""

import pytest
from fastapi.testclient import TestClient

from jackpot_wall.config import Settings
from jackpot_wall.application import create_app
from tests.factories import make_settings


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def store(app):
    return app.state.event_store


@pytest.fixture
def client(app):
    return TestClient(app)
