"""
helloworld.api.logging.request_context

Purpose:
    Request-scoped context storage using contextvars.
    Enables request_id propagation into logs.

Created:
    2026-10-19
"""

from __future__ import annotations

import contextvars

request_id_ctx_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id",
    default=None,
)
