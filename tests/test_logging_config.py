"""
tests.test_logging_config

Purpose:
    request_id lands on every log record; uvicorn.access is silenced.
"""

from __future__ import annotations

import logging

import pytest

from helloworld.api.logging.logging_config import configure_logging
from helloworld.api.logging.request_context import request_id_ctx_var
from helloworld.api.logging.request_id_filter import RequestIdFilter


def _record() -> logging.LogRecord:
    return logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)


def test_filter_outside_request_uses_dash() -> None:
    record = _record()
    assert RequestIdFilter().filter(record) is True
    assert record.request_id == "-"


def test_filter_uses_context_request_id() -> None:
    token = request_id_ctx_var.set("ctx-1")
    try:
        record = _record()
        RequestIdFilter().filter(record)
    finally:
        request_id_ctx_var.reset(token)

    assert record.request_id == "ctx-1"


@pytest.fixture()
def restore_logging():
    names = ["", "uvicorn", "uvicorn.error", "uvicorn.access"]
    saved = {
        n: (list(logging.getLogger(n).handlers), logging.getLogger(n).level,
            logging.getLogger(n).propagate, logging.getLogger(n).disabled)
        for n in names
    }
    yield
    for n, (handlers, level, propagate, disabled) in saved.items():
        lg = logging.getLogger(n)
        lg.handlers[:] = handlers
        lg.setLevel(level)
        lg.propagate = propagate
        lg.disabled = disabled


def test_configure_logging_routes_uvicorn_through_filter(restore_logging) -> None:
    configure_logging("debug")

    err = logging.getLogger("uvicorn.error")
    assert err.level == logging.DEBUG
    assert err.propagate is False
    assert any(
        any(isinstance(f, RequestIdFilter) for f in h.filters) for h in err.handlers
    )
    assert logging.getLogger("uvicorn.access").disabled is True


def test_filter_keeps_explicit_request_id() -> None:
    token = request_id_ctx_var.set("ctx-2")
    try:
        record = _record()
        record.request_id = "explicit-9"
        RequestIdFilter().filter(record)
    finally:
        request_id_ctx_var.reset(token)

    assert record.request_id == "explicit-9"
