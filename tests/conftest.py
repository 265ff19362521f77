import random

import pytest
from fastapi.testclient import TestClient

from main import create_app
from settings import Settings


@pytest.fixture
def make_app():
    """Build an app with no delay and a fixed seed unless told otherwise."""

    def _make(**overrides):
        options = {"delay_min_ms": 0, "delay_max_ms": 0, "seed": 1234}
        options.update(overrides)
        settings = Settings(**options)
        return create_app(settings, random.Random(settings.seed))

    return _make


@pytest.fixture
def make_client(make_app):
    def _make(**overrides):
        return TestClient(make_app(**overrides))

    return _make
