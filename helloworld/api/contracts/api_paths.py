# helloworld/api/contracts/api_paths.py
"""
helloworld.api.contracts.api_paths

Purpose:
    Central definition of the service's route paths.
    Keeps routing stable and prevents string duplication.

Created:
    2026-10-19
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ApiPaths:
    index: str = "/"
    style: str = "/style.css"
    background: str = "/background.jpg"
    healthz: str = "/healthz"
