from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .report import report_run
from .runner import timing_run


def _abs_path(p: str) -> Path:
    return Path(p).expanduser().resolve()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sequence_drills.container_bench",
        description="Compare insertion and random-access costs of array, linked list and deque.",
    )
    parser.add_argument(
        "--out-dir",
        type=_abs_path,
        default=None,
        help="Also write results.json and report.md into this directory.",
    )
    sub = parser.add_subparsers(dest="cmd")

    report = sub.add_parser("report", help="Regenerate report.md from results.json (no benchmark run).")
    report.add_argument("--out-dir", dest="report_dir", type=_abs_path, required=True)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)

    if ns.cmd is None:
        return timing_run(out_dir=ns.out_dir)
    if ns.cmd == "report":
        try:
            return report_run(out_dir=ns.report_dir)
        except FileNotFoundError as e:
            print(str(e), file=sys.stderr)
            return 2

    raise AssertionError(f"Unhandled cmd: {ns.cmd}")


if __name__ == "__main__":
    raise SystemExit(main())
