from __future__ import annotations

import random
from collections.abc import Callable, Iterable
from typing import Literal

SortOrder = Literal["ascending", "descending"]
SORT_ORDERS: tuple[SortOrder, ...] = ("ascending", "descending")


def _out_of_order(order: SortOrder) -> Callable[[int, int], bool]:
    if order == "ascending":
        return lambda a, b: a > b
    if order == "descending":
        return lambda a, b: a < b
    raise ValueError(f"Unknown sort order: {order!r}. Known: {list(SORT_ORDERS)}")


def bubble_sort(values: list[int], order: SortOrder = "ascending") -> int:
    """Sort ``values`` in place and return the number of passes performed.

    After pass ``i`` the last ``i + 1`` slots hold their final values, so each pass
    scans one element fewer. Sorting stops after the first pass without a swap.
    Equal neighbours are never swapped, so the sort is stable.
    """
    out_of_order = _out_of_order(order)
    n = len(values)
    passes = 0
    for i in range(n - 1):
        passes += 1
        swapped = False
        for j in range(n - i - 1):
            if out_of_order(values[j], values[j + 1]):
                values[j], values[j + 1] = values[j + 1], values[j]
                swapped = True
        if not swapped:
            break
    return passes


def random_values(count: int = 10, *, low: int = 1, high: int = 100, rng: random.Random | None = None) -> list[int]:
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if low > high:
        raise ValueError(f"low must be <= high, got low={low} high={high}")
    gen = random.Random() if rng is None else rng
    return [gen.randint(low, high) for _ in range(count)]


def format_values(values: Iterable[int]) -> str:
    return ", ".join(str(v) for v in values)
