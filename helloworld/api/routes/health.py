"""
helloworld.api.routes.health

Purpose:
    Liveness endpoint for container/orchestrator checks.
    204 while the server is serving, 503 before startup completes and from the
    moment shutdown begins. No body in either case.

Created:
    2026-10-19
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response, status

from helloworld.api.contracts.api_paths import ApiPaths
from helloworld.api.contracts.api_tags import ApiTags
from helloworld.api.lifecycle.liveness import LivenessFlag

_paths = ApiPaths()
_tags = ApiTags()

router = APIRouter(tags=[_tags.health])


def get_liveness(request: Request) -> LivenessFlag:
    return request.app.state.liveness


@router.api_route(_paths.healthz, methods=["GET", "HEAD"])
def healthz(liveness: LivenessFlag = Depends(get_liveness)) -> Response:
    if liveness.is_live:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return Response(status_code=status.HTTP_503_SERVICE_UNAVAILABLE)
