"""
tests.api.conftest

Shared pytest fixtures for API tests.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from helloworld.api.lifecycle.liveness import LivenessFlag
from helloworld.api.main import create_app
from tests.fakes import StaticProbe
from helloworld.api.settings import Settings


@pytest.fixture()
def client_factory():
    """
    Factory fixture that creates a fresh app + TestClient.

    IMPORTANT:
        The Redis probe is always replaced by StaticProbe so tests never touch
        the network. The liveness flag starts live unless live=False.
    """

    def _make(
        *,
        reachable: bool = False,
        live: bool = True,
        static_dir: Path | None = None,
        raise_server_exceptions: bool = True,
    ) -> TestClient:
        settings = Settings() if static_dir is None else Settings(static_dir=static_dir)

        liveness = LivenessFlag()
        if live:
            liveness.mark_live()

        app = create_app(settings, cache_probe=StaticProbe(reachable), liveness=liveness)
        return TestClient(app, raise_server_exceptions=raise_server_exceptions)

    return _make


@pytest.fixture()
def client(client_factory) -> TestClient:
    """Plain client: Redis unreachable, server live."""
    return client_factory()
