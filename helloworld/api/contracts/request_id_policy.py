"""
helloworld.api.contracts.request_id_policy

Purpose:
    Central policy for request/correlation IDs (header names + response behavior).

Created:
    2026-10-19
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RequestIdPolicy:
    request_id_header: str = "X-Request-Id"
    correlation_id_header: str = "X-Correlation-Id"
    response_header: str = "X-Request-Id"

    # Logged when a request reaches the access log without an id attached.
    missing_id_sentinel: str = "unknown"
