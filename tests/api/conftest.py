"""
tests.api.conftest

Shared pytest fixtures for example service tests.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from vary_middleware.main import create_asgi_app
from vary_middleware.settings import Settings


@pytest.fixture()
def client_factory():
    """
    Factory fixture that creates a fresh TestClient.

    IMPORTANT:
        Pass Settings to build the app with a different Vary configuration.
        Tests that need extra routes can pass `app=` built via create_app();
        it is wrapped in VaryMiddleware the same way the service is.
    """

    def _make(
        settings: Settings | None = None,
        *,
        app=None,
        raise_server_exceptions: bool = True,
    ) -> TestClient:
        asgi_app = create_asgi_app(settings, app=app)
        return TestClient(asgi_app, raise_server_exceptions=raise_server_exceptions)

    return _make


@pytest.fixture()
def client(client_factory) -> TestClient:
    """Default app: Vary: Accept."""
    return client_factory()
