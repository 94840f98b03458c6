"""Wall-clock helpers in whole milliseconds."""

from __future__ import annotations

import time


def now_ms() -> int:
    """Return the current wall-clock time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def wait_until(deadline_ms: int) -> None:
    """Block until the wall clock reaches *deadline_ms*."""
    while (remaining := deadline_ms - now_ms()) > 0:
        time.sleep(min(remaining / 1000, 0.0005))