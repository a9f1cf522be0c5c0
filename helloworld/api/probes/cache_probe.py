"""
helloworld.api.probes.cache_probe

Purpose:
    Connectivity probe for the backing cache (Redis).
    ping() opens a fresh connection, sends PING and reports whether PONG came back.
    Never raises: every failure (refused, timeout, DNS, bad address, auth) is False.

Created:
    2026-10-19
"""

from __future__ import annotations

import logging
from typing import Protocol

import redis.asyncio as aioredis
from redis.asyncio.retry import Retry
from redis.backoff import NoBackoff

from helloworld.api.settings import parse_address

logger = logging.getLogger(__name__)

DEFAULT_REDIS_PORT = 6379


class CacheProbe(Protocol):
    async def ping(self) -> bool: ...


class RedisProbe:
    def __init__(self, address: str, *, timeout_s: float = 1.0) -> None:
        self.address = address
        self.timeout_s = timeout_s

    def _client(self) -> aioredis.Redis:
        host, port = parse_address(self.address)
        return aioredis.Redis(
            host=host or "localhost",
            port=port or DEFAULT_REDIS_PORT,
            db=0,
            socket_connect_timeout=self.timeout_s,
            socket_timeout=self.timeout_s,
            retry=Retry(NoBackoff(), 0),
        )

    async def ping(self) -> bool:
        try:
            client = self._client()
        except ValueError:
            logger.debug("redis_probe_bad_address address=%s", self.address, exc_info=True)
            return False

        try:
            # redis-py maps a PONG reply to True
            return await client.ping() is True
        except Exception:
            logger.debug("redis_probe_failed address=%s", self.address, exc_info=True)
            return False
        finally:
            try:
                await client.aclose()
            except Exception:
                logger.debug("redis_probe_close_failed address=%s", self.address, exc_info=True)

