"""
tests.web.conftest

Shared pytest fixtures for prototype web tests.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from prototype_kit.web.main import create_app
from prototype_kit.web.settings import Settings


@pytest.fixture()
def client_factory():
    """
    Factory fixture that creates a fresh TestClient.

    Takes explicit Settings so tests do not depend on PROTOTYPE_* env vars.
    """

    def _make(settings: Settings | None = None) -> TestClient:
        app = create_app(settings or Settings())
        return TestClient(app, raise_server_exceptions=True)

    return _make


@pytest.fixture()
def client(client_factory) -> TestClient:
    return client_factory()
