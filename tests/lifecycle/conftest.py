"""
tests.lifecycle.conftest

Runs a real uvicorn server (via ServerLifecycle) on an ephemeral port in a
background thread. Shutdown is driven with request_shutdown(), which takes the
same path as SIGTERM.
"""

from __future__ import annotations

import asyncio
import threading
import time
from dataclasses import dataclass, field
from typing import Callable

import pytest
from fastapi import FastAPI

from helloworld.api.lifecycle.server import LifecycleState, ServerLifecycle
from helloworld.api.main import create_app
from tests.fakes import StaticProbe
from helloworld.api.settings import Settings


@dataclass
class RunningServer:
    lifecycle: ServerLifecycle
    app: FastAPI
    thread: threading.Thread
    errors: list[BaseException] = field(default_factory=list)

    @property
    def base_url(self) -> str:
        return f"http://{self.lifecycle.bound_address}"

    def stop(self, timeout: float = 10.0) -> None:
        self.lifecycle.request_shutdown()
        self.thread.join(timeout)


def wait_for(predicate: Callable[[], bool], timeout: float = 5.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


@pytest.fixture()
def server_factory():
    servers: list[RunningServer] = []

    def _start(
        *,
        shutdown_timeout_s: float = 5.0,
        setup: Callable[[FastAPI], None] | None = None,
    ) -> RunningServer:
        settings = Settings(binding="127.0.0.1:0", shutdown_timeout_s=shutdown_timeout_s)
        lifecycle = ServerLifecycle(settings)
        app = create_app(settings, cache_probe=StaticProbe(False), liveness=lifecycle.liveness)
        if setup is not None:
            setup(app)

        sock = lifecycle.bind()
        errors: list[BaseException] = []

        def _run() -> None:
            try:
                asyncio.run(lifecycle.serve(app, sock))
            except BaseException as exc:  # surfaced to the test via RunningServer.errors
                errors.append(exc)

        thread = threading.Thread(target=_run, name="uvicorn-test-server", daemon=True)
        thread.start()

        running = RunningServer(lifecycle=lifecycle, app=app, thread=thread, errors=errors)
        servers.append(running)

        assert wait_for(lambda: lifecycle.state is LifecycleState.SERVING), "server did not start"
        return running

    yield _start

    for running in servers:
        if running.thread.is_alive():
            running.stop()
