"""Per-operation profilers.

Each profiler mutates (or reads) exactly one container and returns the duration of
the bulk loop in microseconds. Containers are duck-typed: anything with ``append``
works for back insertion, anything with ``appendleft`` for front insertion.
"""

from __future__ import annotations

import random
from typing import Any

from .config import RANDOM_ACCESS_TYPES
from .timing import measure_time


def _check_count(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")


def profile_back_insert(container: Any, num_elements: int) -> int:
    _check_count("num_elements", num_elements)

    def _op() -> None:
        append = container.append
        for i in range(num_elements):
            append(i)

    return measure_time(_op)


def profile_front_insert(container: Any, num_elements: int) -> int:
    """Prepend ``0..num_elements-1``; the last value inserted ends up at the front.

    Callers must only pass shapes with ``appendleft`` (linked list, deque).
    """
    _check_count("num_elements", num_elements)

    def _op() -> None:
        appendleft = container.appendleft
        for i in range(num_elements):
            appendleft(i)

    return measure_time(_op)


def profile_random_access(container: Any, num_accesses: int, *, rng: random.Random | None = None) -> int:
    """Read ``num_accesses`` uniformly random indices; 0 for empty or non-indexable shapes."""
    _check_count("num_accesses", num_accesses)
    if num_accesses == 0 or len(container) == 0:
        return 0
    if not isinstance(container, RANDOM_ACCESS_TYPES):
        return 0

    gen = random.Random() if rng is None else rng
    last = len(container) - 1

    def _op() -> None:
        randint = gen.randint
        for _ in range(num_accesses):
            container[randint(0, last)]

    return measure_time(_op)
