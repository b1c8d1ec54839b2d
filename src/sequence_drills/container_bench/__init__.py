"""Sequence container benchmark.

Times back insertion, front insertion and random access on three container shapes
(contiguous array, doubly linked list, deque) and prints a plain-text report followed
by a fixed summary of the expected asymptotic behavior.
"""

from __future__ import annotations
