"""
helloworld.api.main

Purpose:
    FastAPI application factory for the helloworld web service.

Notes:
    - Middleware order is explicit: RequestIdMiddleware (outermost) assigns the id
      before AccessLogMiddleware logs it.
    - The cache probe and liveness flag live on app.state so routes resolve them
      through dependencies (tests swap them via dependency_overrides or arguments).

Created:
    2026-10-19
"""

from __future__ import annotations

from fastapi import FastAPI
from starlette.middleware import Middleware

from helloworld.api.contracts.request_id_policy import RequestIdPolicy
from helloworld.api.error_handlers import register_error_handlers
from helloworld.api.lifecycle.liveness import LivenessFlag
from helloworld.api.middleware.access_log import AccessLogMiddleware
from helloworld.api.middleware.request_id import RequestIdMiddleware
from helloworld.api.probes.cache_probe import CacheProbe, RedisProbe
from helloworld.api.routes import api_router
from helloworld.api.settings import Settings, get_settings


def create_app(
    settings: Settings | None = None,
    *,
    cache_probe: CacheProbe | None = None,
    liveness: LivenessFlag | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    policy = RequestIdPolicy()

    app = FastAPI(
        title=settings.service_name,
        version=settings.service_version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        middleware=[
            Middleware(RequestIdMiddleware, policy=policy),
            Middleware(AccessLogMiddleware, policy=policy),
        ],
    )

    app.state.settings = settings
    app.state.cache_probe = cache_probe or RedisProbe(
        settings.redis_address, timeout_s=settings.probe_timeout_s
    )
    app.state.liveness = liveness or LivenessFlag()

    register_error_handlers(app)

    app.include_router(api_router)

    return app
