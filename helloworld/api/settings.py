# helloworld/api/settings.py
"""
helloworld.api.settings

Purpose:
    Centralized configuration for the helloworld web service.
    Defaults match the container deployment (listen on :5000, Redis at redis:6379).
    Environment variables (HELLOWORLD_*) override defaults; CLI flags override both.

Created:
    2026-10-19
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

ENV_BINDING = "HELLOWORLD_BINDING"
ENV_REDIS = "HELLOWORLD_REDIS"
ENV_STATIC_DIR = "HELLOWORLD_STATIC_DIR"
ENV_LOG_LEVEL = "HELLOWORLD_LOG_LEVEL"

DEFAULT_STATIC_DIR = Path(__file__).resolve().parent / "static"


class Settings(BaseModel):
    service_name: str = Field(default="helloworld")
    service_version: str = Field(default="0.1.0")

    binding: str = Field(default="0.0.0.0:5000", description="Server listen address")
    redis_address: str = Field(default="redis:6379", description="Redis address (not required)")

    static_dir: Path = Field(default=DEFAULT_STATIC_DIR)
    log_level: str = Field(default="INFO")

    probe_timeout_s: float = Field(default=1.0, gt=0)
    idle_timeout_s: int = Field(default=15, gt=0)
    shutdown_timeout_s: float = Field(default=30.0, gt=0)


def parse_address(address: str, *, default_host: str = "") -> tuple[str, int]:
    """
    Split "host:port" into (host, port).

    Accepts ":5000" (empty host -> default_host) and bracketed IPv6 ("[::1]:6379").
    Raises:
      ValueError for a missing/invalid port.
    """
    s = (address or "").strip()
    host, sep, port_s = s.rpartition(":")
    if not sep:
        raise ValueError(f"Invalid address {address!r}: expected host:port")

    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]

    try:
        port = int(port_s)
    except ValueError:
        raise ValueError(f"Invalid port in address {address!r}") from None

    if not 0 <= port <= 65535:
        raise ValueError(f"Port out of range in address {address!r}")

    return host or default_host, port


def get_settings() -> Settings:
    overrides: dict[str, object] = {}

    if os.getenv(ENV_BINDING):
        overrides["binding"] = os.environ[ENV_BINDING]
    if os.getenv(ENV_REDIS):
        overrides["redis_address"] = os.environ[ENV_REDIS]
    if os.getenv(ENV_STATIC_DIR):
        overrides["static_dir"] = Path(os.environ[ENV_STATIC_DIR])
    if os.getenv(ENV_LOG_LEVEL):
        overrides["log_level"] = os.environ[ENV_LOG_LEVEL].upper()

    return Settings(**overrides)
