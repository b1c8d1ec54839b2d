from __future__ import annotations

import argparse
import sys

from .sorting import bubble_sort, format_values, random_values


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sequence_drills.bubble_sort",
        description="Bubble-sort random integers (1-100) ascending, then descending.",
    )
    parser.add_argument("--count", type=int, default=10, help="Number of values to generate (default: 10).")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)

    try:
        values = random_values(ns.count)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 2

    print("Initial Vector:")
    print(format_values(values))

    bubble_sort(values, "ascending")
    print("Sorted Vector (ascending):")
    print(format_values(values))

    bubble_sort(values, "descending")
    print("Sorted Vector (descending):")
    print(format_values(values))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
