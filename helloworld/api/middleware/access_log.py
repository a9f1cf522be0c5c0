"""
helloworld.api.middleware.access_log

Purpose:
    One log line per completed request on the "helloworld.http" logger:
    request id, method, path, remote address, user agent.
    Runs in a finally block so failed handlers are logged too.

Created:
    2026-10-19
"""

from __future__ import annotations

import logging
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from helloworld.api.contracts.request_id_policy import RequestIdPolicy

HTTP_LOGGER_NAME = "helloworld.http"


def _remote_addr(request: Request) -> str:
    client = request.client
    if client is None:
        return "-"
    return f"{client.host}:{client.port}"


class AccessLogMiddleware(BaseHTTPMiddleware):
    def __init__(
        self,
        app: ASGIApp,
        policy: RequestIdPolicy | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__(app)
        self._policy = policy or RequestIdPolicy()
        self._logger = logger or logging.getLogger(HTTP_LOGGER_NAME)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        finally:
            request_id = getattr(request.state, "request_id", None)
            if not isinstance(request_id, str) or not request_id:
                request_id = self._policy.missing_id_sentinel

            self._logger.info(
                "%s %s %s %s %s",
                request_id,
                request.method,
                request.url.path,
                _remote_addr(request),
                request.headers.get("user-agent", ""),
            )
