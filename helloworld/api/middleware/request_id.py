"""
helloworld.api.middleware.request_id

Purpose:
    Middleware that ensures each request has a request-id and propagates it to responses.
    Incoming X-Request-Id (or X-Correlation-Id) is reused verbatim; otherwise a
    nanosecond monotonic timestamp is generated.

Created:
    2026-10-19
"""

from __future__ import annotations

import threading
import time
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from helloworld.api.contracts.request_id_policy import RequestIdPolicy
from helloworld.api.logging.request_context import request_id_ctx_var


class MonotonicRequestIds:
    """
    Request-id generator backed by time.monotonic_ns().

    Ids are strictly increasing within a process: when two calls land on the
    same clock tick the second one is bumped by 1ns.
    """

    def __init__(self, clock: Callable[[], int] = time.monotonic_ns) -> None:
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self) -> str:
        with self._lock:
            now = self._clock()
            if now <= self._last:
                now = self._last + 1
            self._last = now
        return str(now)


class RequestIdMiddleware(BaseHTTPMiddleware):
    def __init__(
        self,
        app: ASGIApp,
        policy: RequestIdPolicy | None = None,
        next_request_id: Callable[[], str] | None = None,
    ) -> None:
        super().__init__(app)
        self._policy = policy or RequestIdPolicy()
        self._next_request_id = next_request_id or MonotonicRequestIds()

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        policy = self._policy

        incoming = (
            request.headers.get(policy.request_id_header)
            or request.headers.get(policy.correlation_id_header)
        )

        request_id = incoming if incoming else self._next_request_id()

        # Attach for handlers/logging
        request.state.request_id = request_id
        token = request_id_ctx_var.set(request_id)
        try:
            response: Response = await call_next(request)
        finally:
            request_id_ctx_var.reset(token)

        # Echo back for client correlation
        response.headers[policy.response_header] = request_id
        return response
