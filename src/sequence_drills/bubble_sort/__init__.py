"""Bubble sort with ascending/descending order and early exit on a swap-free pass."""

from __future__ import annotations
