"""Reverse the order of words in a sentence, keeping each word intact."""

from __future__ import annotations
