from __future__ import annotations

import time
from collections.abc import Callable


def measure_time(func: Callable[[], object]) -> int:
    """Run ``func`` once and return the elapsed wall-clock time in microseconds."""
    start = time.perf_counter_ns()
    func()
    end = time.perf_counter_ns()
    return max(0, (end - start) // 1000)
