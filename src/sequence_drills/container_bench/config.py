from __future__ import annotations

from collections import deque
from collections.abc import Callable
from typing import Any, Literal

import attrs

from .containers import LinkedList

ShapeKey = Literal["array", "linked_list", "deque"]
Phase = Literal["insert_back", "insert_front", "random_access"]


@attrs.define(frozen=True, slots=True)
class BenchSettings:
    num_elements: int
    num_accesses: int

    def __attrs_post_init__(self) -> None:
        if self.num_elements < 0:
            raise ValueError(f"num_elements must be >= 0, got {self.num_elements}")
        if self.num_accesses < 0:
            raise ValueError(f"num_accesses must be >= 0, got {self.num_accesses}")

    def to_dict(self) -> dict[str, int]:
        return {"num_elements": self.num_elements, "num_accesses": self.num_accesses}


@attrs.define(frozen=True, slots=True)
class ContainerShape:
    key: ShapeKey
    label: str
    factory: Callable[[], Any]
    supports_front_insert: bool
    supports_random_access: bool
    front_insert_note: str | None = None
    random_access_note: str | None = None

    def new(self) -> Any:
        return self.factory()


DEFAULT_SETTINGS = BenchSettings(num_elements=100000, num_accesses=10000)

SHAPES: dict[str, ContainerShape] = {
    "array": ContainerShape(
        key="array",
        label="array",
        factory=list,
        supports_front_insert=False,
        supports_random_access=True,
        front_insert_note="insertion at front is inefficient for array!",
    ),
    "linked_list": ContainerShape(
        key="linked_list",
        label="linked_list",
        factory=LinkedList,
        supports_front_insert=True,
        supports_random_access=False,
        random_access_note="no random access, so not applicable!",
    ),
    "deque": ContainerShape(
        key="deque",
        label="deque",
        factory=deque,
        supports_front_insert=True,
        supports_random_access=True,
    ),
}

# Types the random-access profiler may index, taken from the shapes flagged as indexable.
RANDOM_ACCESS_TYPES: tuple[type, ...] = tuple(s.factory for s in SHAPES.values() if s.supports_random_access)

PHASES: tuple[Phase, ...] = ("insert_back", "insert_front", "random_access")

PHASE_TITLES: dict[str, str] = {
    "insert_back": "insert at back",
    "insert_front": "insert at front",
    "random_access": "random access",
}

# Report order per phase: measured shapes first, then the informational line.
PHASE_SHAPE_ORDER: dict[str, tuple[ShapeKey, ...]] = {
    "insert_back": ("array", "linked_list", "deque"),
    "insert_front": ("deque", "linked_list", "array"),
    "random_access": ("array", "deque", "linked_list"),
}

# Hand-authored expectations; never derived from measured durations.
SUMMARY_LINES: tuple[str, ...] = (
    "1. array is the fastest for random access due to contiguous memory.",
    "2. linked_list is the slowest for front insertion because elements need to be shifted.",
    "3. deque is fast for both front and back insertions, but not as fast as array for random access.",
)


def get_shape(key: str) -> ContainerShape:
    if key not in SHAPES:
        raise KeyError(f"Unknown shape={key!r}. Known: {sorted(SHAPES)}")
    return SHAPES[key]


def shape_supports(shape: ContainerShape, phase: str) -> bool:
    if phase == "insert_back":
        return True
    if phase == "insert_front":
        return shape.supports_front_insert
    if phase == "random_access":
        return shape.supports_random_access
    raise ValueError(f"Unknown phase: {phase!r}")


def inapplicable_note(shape: ContainerShape, phase: str) -> str:
    if phase == "insert_front" and shape.front_insert_note:
        return shape.front_insert_note
    if phase == "random_access" and shape.random_access_note:
        return shape.random_access_note
    return "not applicable!"
