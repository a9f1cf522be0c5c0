"""
helloworld.api.contracts.api_tags

Purpose:
    Central definition of FastAPI tags to avoid scattered string literals.

Created:
    2026-10-19
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ApiTags:
    health: str = "health"
    page: str = "page"
    assets: str = "assets"
