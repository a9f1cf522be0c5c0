"""
helloworld.api.lifecycle.server

Purpose:
    Owns listen/serve and the signal-driven graceful shutdown of the web service.

    STARTING -> SERVING   listener is accepting; liveness flag goes true
    SERVING  -> DRAINING  SIGINT/SIGTERM; liveness flag goes false first, the listener
                          closes and keep-alive is disabled on open connections
    DRAINING -> STOPPED   in-flight requests finished, or the deadline elapsed and
                          the remaining ones were cancelled

Notes:
    - Serving is delegated to uvicorn; _LifecycleServer hooks its startup/exit/shutdown.
    - The socket is bound here (not by uvicorn) so a bind failure surfaces as BindError
      instead of uvicorn's own sys.exit().
    - SIGINT/SIGTERM handling is only possible in the main thread;
      tests drive shutdown through request_shutdown().
    - Only the idle keep-alive timeout (idle_timeout_s) is enforced. uvicorn has no
      per-request read or write deadline, so slow request bodies and slow response
      writes are bounded only by the drain deadline during shutdown.

Created:
    2026-10-19
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import signal
import socket
import threading
from enum import Enum
from typing import Iterator

import uvicorn
from fastapi import FastAPI

from helloworld.api.errors import BindError, ShutdownError
from helloworld.api.lifecycle.liveness import LivenessFlag
from helloworld.api.settings import Settings, parse_address

logger = logging.getLogger(__name__)

HANDLED_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class LifecycleState(str, Enum):
    STARTING = "starting"
    SERVING = "serving"
    DRAINING = "draining"
    STOPPED = "stopped"


class _LifecycleServer(uvicorn.Server):
    def __init__(self, config: uvicorn.Config, lifecycle: "ServerLifecycle") -> None:
        super().__init__(config)
        self._lifecycle = lifecycle

    async def startup(self, sockets: list[socket.socket] | None = None) -> None:
        await super().startup(sockets=sockets)
        if not self.should_exit:
            self._lifecycle._mark_serving()

    def handle_exit(self, sig: int, frame) -> None:
        self._lifecycle._begin_draining(sig)
        super().handle_exit(sig, frame)

    async def shutdown(self, sockets: list[socket.socket] | None = None) -> None:
        # Covers exits that did not come through a signal (e.g. should_exit set directly).
        self._lifecycle._begin_draining(None)
        try:
            await super().shutdown(sockets=sockets)
        except Exception as exc:
            raise ShutdownError(exc) from exc


class ServerLifecycle:
    def __init__(self, settings: Settings, liveness: LivenessFlag | None = None) -> None:
        self.settings = settings
        self.liveness = liveness or LivenessFlag()

        self._state = LifecycleState.STARTING
        self._lock = threading.Lock()
        self._server: _LifecycleServer | None = None
        self._bound_address: str | None = None

    # ── Read-only accessors ───────────────────────────────────────────

    @property
    def state(self) -> LifecycleState:
        return self._state

    @property
    def is_live(self) -> bool:
        return self.liveness.is_live

    @property
    def bound_address(self) -> str | None:
        """host:port actually bound (resolves port 0 to the ephemeral port)."""
        return self._bound_address

    # ── Transitions ───────────────────────────────────────────────────

    def _mark_serving(self) -> None:
        with self._lock:
            if self._state is not LifecycleState.STARTING:
                return
            self._state = LifecycleState.SERVING
            self.liveness.mark_live()
        logger.info("Server is ready to handle requests at %s", self._bound_address or self.settings.binding)

    def _begin_draining(self, sig: int | None) -> None:
        with self._lock:
            if self._state in (LifecycleState.DRAINING, LifecycleState.STOPPED):
                return
            # Flag first: health checks fail before the listener closes.
            self.liveness.mark_not_live()
            self._state = LifecycleState.DRAINING

        if sig is None:
            logger.info("Server is shutting down...")
        else:
            logger.info("Server is shutting down (%s)...", signal.Signals(sig).name)

    def _mark_stopped(self) -> None:
        with self._lock:
            self.liveness.mark_not_live()
            self._state = LifecycleState.STOPPED
        logger.info("Server stopped")

    def request_shutdown(self, sig: int = signal.SIGTERM) -> None:
        """Same path as receiving `sig`; safe to call from any thread."""
        with self._lock:
            if self._state is LifecycleState.STOPPED:
                return
        server = self._server
        if server is None:
            self._begin_draining(sig)
            return
        server.handle_exit(sig, None)

    # ── Listen / serve ────────────────────────────────────────────────

    def bind(self) -> socket.socket:
        binding = self.settings.binding
        try:
            host, port = parse_address(binding, default_host="0.0.0.0")
            family = socket.AF_INET6 if ":" in host else socket.AF_INET
            sock = socket.create_server((host, port), family=family)
        except (OSError, ValueError) as exc:
            logger.critical("Could not listen on %s: %s", binding, exc)
            raise BindError(binding, exc) from exc

        bound_host, bound_port = sock.getsockname()[:2]
        self._bound_address = f"{bound_host}:{bound_port}"
        return sock

    def _config(self, app: FastAPI) -> uvicorn.Config:
        host, port = parse_address(self.settings.binding, default_host="0.0.0.0")
        return uvicorn.Config(
            app,
            host=host,
            port=port,
            log_config=None,
            access_log=False,
            timeout_keep_alive=self.settings.idle_timeout_s,
            timeout_graceful_shutdown=self.settings.shutdown_timeout_s,
        )

    @contextlib.contextmanager
    def _signal_handlers(self) -> Iterator[None]:
        # uvicorn swaps in its own handlers while serving and re-raises the captured
        # signal afterwards; these catch signals outside that window (and the re-raise).
        if threading.current_thread() is not threading.main_thread():
            yield
            return

        originals = {sig: signal.signal(sig, self._on_signal) for sig in HANDLED_SIGNALS}
        try:
            yield
        finally:
            for sig, handler in originals.items():
                signal.signal(sig, handler)

    def _on_signal(self, sig: int, frame) -> None:
        if self._state in (LifecycleState.DRAINING, LifecycleState.STOPPED):
            return
        self.request_shutdown(sig)

    async def serve(self, app: FastAPI, sock: socket.socket) -> None:
        self._server = _LifecycleServer(self._config(app), self)
        if self._state is not LifecycleState.STARTING:
            # Signalled before the listener came up.
            self._server.should_exit = True

        try:
            await self._server.serve(sockets=[sock])
        except ShutdownError as exc:
            logger.critical("%s", exc)
            raise
        finally:
            self._mark_stopped()

    def run(self, app: FastAPI) -> None:
        """
        Bind, serve until signalled, drain, return.

        Raises:
          BindError if the listener cannot start.
          ShutdownError if the stop sequence itself fails.
        """
        logger.info("Server is starting on %s...", self.settings.binding)
        logger.info("Checking Redis on %s...", self.settings.redis_address)

        with self._signal_handlers():
            sock = self.bind()
            asyncio.run(self.serve(app, sock))
