from __future__ import annotations

import argparse

from .reversal import read_sentence, reverse_words


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sequence_drills.word_reversal",
        description="Print a sentence with its word order reversed.",
    )
    parser.add_argument("text", nargs="*", help="Sentence to reverse (default: read one line from stdin).")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)

    sentence = " ".join(ns.text) if ns.text else read_sentence()
    print(reverse_words(sentence))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
