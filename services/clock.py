from __future__ import annotations

import time
from typing import Callable

Clock = Callable[[], int]


def current_time_ms() -> int:
    """Wall-clock time in whole milliseconds since the epoch."""
    return time.time_ns() // 1_000_000
