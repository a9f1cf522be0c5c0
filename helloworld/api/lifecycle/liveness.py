"""
helloworld.api.lifecycle.liveness

Purpose:
    Process-wide liveness flag read by the health endpoint.
    Backed by threading.Event so reads/writes are race-free across the event loop,
    threadpool workers and signal handlers.
"""

from __future__ import annotations

import threading


class LivenessFlag:
    def __init__(self) -> None:
        self._event = threading.Event()

    @property
    def is_live(self) -> bool:
        return self._event.is_set()

    def mark_live(self) -> None:
        self._event.set()

    def mark_not_live(self) -> None:
        self._event.clear()
