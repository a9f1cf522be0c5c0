"""
helloworld.api.routes.page

Purpose:
    GET / renders static/index.html with a greeting that depends on whether
    Redis answers PING.

Notes:
    - The template is read on every request (edits to static/ show up without a restart).
    - A missing/unreadable template is a 500 (TEMPLATE_UNAVAILABLE), not an empty page.

Created:
    2026-10-19
"""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse
from starlette.concurrency import run_in_threadpool

from helloworld.api.contracts.api_paths import ApiPaths
from helloworld.api.contracts.api_tags import ApiTags
from helloworld.api.contracts.error_contract import ApiErrorCode
from helloworld.api.contracts.greeting_policy import GreetingPolicy
from helloworld.api.errors import ApiError
from helloworld.api.probes.cache_probe import CacheProbe

logger = logging.getLogger(__name__)

_paths = ApiPaths()
_tags = ApiTags()
_greeting = GreetingPolicy()

router = APIRouter(tags=[_tags.page])


def get_cache_probe(request: Request) -> CacheProbe:
    return request.app.state.cache_probe


def get_static_dir(request: Request) -> Path:
    return request.app.state.settings.static_dir


@router.get(_paths.index, response_class=HTMLResponse)
async def index(
    probe: CacheProbe = Depends(get_cache_probe),
    static_dir: Path = Depends(get_static_dir),
) -> HTMLResponse:
    template_path = static_dir / _greeting.template_name
    try:
        template = await run_in_threadpool(template_path.read_text, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("template_read_failed path=%s error=%s", template_path, exc)
        raise ApiError(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error_code=ApiErrorCode.TEMPLATE_UNAVAILABLE,
            message="Page template could not be read",
            details={"template": _greeting.template_name},
        ) from exc

    reachable = await probe.ping()
    return HTMLResponse(_greeting.render(template, cache_reachable=reachable))
