"""
helloworld.api.logging.request_id_filter

Purpose:
    Logging filter that injects request_id from contextvars into log records.
    An explicit extra={"request_id": ...} on the log call wins over the context var.
"""

from __future__ import annotations

import logging

from helloworld.api.logging.request_context import request_id_ctx_var


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "request_id", None):
            record.request_id = request_id_ctx_var.get() or "-"
        return True
