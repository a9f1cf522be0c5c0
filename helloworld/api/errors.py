"""
helloworld.api.errors

Purpose:
    Internal exception types.
    Routes raise ApiError; the global handler converts it to ErrorResponse.
    ServerFatalError subclasses end the process (the CLI maps them to exit code 1).

Created:
    2026-10-19
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from helloworld.api.contracts.error_contract import ApiErrorCode


@dataclass(frozen=True)
class ApiError(Exception):
    status_code: int
    error_code: ApiErrorCode
    message: str
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        return f"{self.error_code}: {self.message}"


class ServerFatalError(Exception):
    """Unrecoverable server lifecycle failure."""


class BindError(ServerFatalError):
    """The listener could not be started on the configured address."""

    def __init__(self, address: str, reason: BaseException) -> None:
        super().__init__(f"Could not listen on {address}: {reason}")
        self.address = address
        self.reason = reason


class ShutdownError(ServerFatalError):
    """The graceful stop sequence itself failed (distinct from a drain timeout)."""

    def __init__(self, reason: BaseException) -> None:
        super().__init__(f"Could not gracefully shutdown the server: {reason}")
        self.reason = reason
