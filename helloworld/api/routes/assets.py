"""
helloworld.api.routes.assets

Purpose:
    Serves the two static assets referenced by index.html, byte-for-byte.
"""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import FileResponse

from helloworld.api.contracts.api_paths import ApiPaths
from helloworld.api.contracts.api_tags import ApiTags
from helloworld.api.routes.page import get_static_dir

_paths = ApiPaths()
_tags = ApiTags()

router = APIRouter(tags=[_tags.assets])


def _asset(static_dir: Path, name: str) -> FileResponse:
    path = static_dir / name
    if not path.is_file():
        # Mirrors what a file server answers for a missing file.
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    return FileResponse(path)


@router.get(_paths.style)
def style(static_dir: Path = Depends(get_static_dir)) -> FileResponse:
    return _asset(static_dir, "style.css")


@router.get(_paths.background)
def background(static_dir: Path = Depends(get_static_dir)) -> FileResponse:
    return _asset(static_dir, "background.jpg")
