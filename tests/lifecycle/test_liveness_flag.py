"""
tests.lifecycle.test_liveness_flag
"""

from __future__ import annotations

import threading

from helloworld.api.lifecycle.liveness import LivenessFlag


def test_flag_starts_not_live() -> None:
    assert LivenessFlag().is_live is False


def test_flag_transitions() -> None:
    flag = LivenessFlag()
    flag.mark_live()
    assert flag.is_live is True
    flag.mark_not_live()
    assert flag.is_live is False


def test_flag_is_visible_across_threads() -> None:
    flag = LivenessFlag()
    seen: list[bool] = []

    t = threading.Thread(target=flag.mark_live)
    t.start()
    t.join()

    reader = threading.Thread(target=lambda: seen.append(flag.is_live))
    reader.start()
    reader.join()

    assert seen == [True]
