from __future__ import annotations

import sys
from typing import TextIO

DEFAULT_PROMPT = "Enter a string: "


def reverse_words(text: str) -> str:
    """Return the words of ``text`` in reverse order joined by single spaces.

    Any run of whitespace separates words, so leading, trailing and repeated
    whitespace is not preserved. Whitespace-only input yields ``""``.
    """
    return " ".join(reversed(text.split()))


def read_sentence(stream: TextIO | None = None, prompt: str = DEFAULT_PROMPT) -> str:
    stream = sys.stdin if stream is None else stream
    print(prompt, end="", flush=True)
    line = stream.readline()
    return line.rstrip("\r\n")
