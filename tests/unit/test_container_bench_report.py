from __future__ import annotations

import json
from pathlib import Path

import pytest

from sequence_drills.container_bench.config import SUMMARY_LINES
from sequence_drills.container_bench.report import format_console_report, report_run


def _records() -> list[dict]:
    return [
        {"phase": "insert_back", "shape": "array", "status": "measured", "duration_us": 12, "note": None},
        {"phase": "insert_back", "shape": "linked_list", "status": "measured", "duration_us": 34, "note": None},
        {"phase": "insert_back", "shape": "deque", "status": "measured", "duration_us": 15, "note": None},
        {"phase": "insert_front", "shape": "deque", "status": "measured", "duration_us": 16, "note": None},
        {"phase": "insert_front", "shape": "linked_list", "status": "measured", "duration_us": 40, "note": None},
        {
            "phase": "insert_front",
            "shape": "array",
            "status": "not_applicable",
            "duration_us": None,
            "note": "insertion at front is inefficient for array!",
        },
        {"phase": "random_access", "shape": "array", "status": "measured", "duration_us": 0, "note": None},
        {"phase": "random_access", "shape": "deque", "status": "measured", "duration_us": 7, "note": None},
        {
            "phase": "random_access",
            "shape": "linked_list",
            "status": "not_applicable",
            "duration_us": None,
            "note": "no random access, so not applicable!",
        },
    ]


def test_format_console_report_layout() -> None:
    text = format_console_report(_records())
    blocks = text.split("\n\n")
    assert blocks[0].splitlines() == [
        "insert at back:",
        "array: 12 microseconds",
        "linked_list: 34 microseconds",
        "deque: 15 microseconds",
    ]
    assert blocks[1].splitlines() == [
        "insert at front:",
        "deque: 16 microseconds",
        "linked_list: 40 microseconds",
        "array: insertion at front is inefficient for array!",
    ]
    assert blocks[2].splitlines() == [
        "random access:",
        "array: 0 microseconds",
        "deque: 7 microseconds",
        "linked_list: no random access, so not applicable!",
    ]
    assert blocks[3].splitlines() == ["summary:", *SUMMARY_LINES]


def test_summary_is_static() -> None:
    fast = format_console_report(_records())
    slow = [dict(r, duration_us=(r["duration_us"] * 100 if r["duration_us"] else r["duration_us"])) for r in _records()]
    assert fast.split("summary:")[1] == format_console_report(slow).split("summary:")[1]


def _results() -> dict:
    return {
        "schema_version": "0.1.0",
        "run": {
            "started_at": "2026-01-01T00:00:00Z",
            "finished_at": "2026-01-01T00:00:01Z",
            "environment": {"platform": {"os": "linux", "arch": "x86_64", "python": "3.12.0"}},
            "settings": {"num_elements": 100000, "num_accesses": 10000},
        },
        "records": _records(),
    }


def test_report_run_writes_markdown_from_results(tmp_path: Path) -> None:
    (tmp_path / "results.json").write_text(json.dumps(_results()))

    rc = report_run(out_dir=tmp_path)
    assert rc == 0

    report_md = (tmp_path / "report.md").read_text()
    assert "Container Benchmark Report" in report_md
    assert "Run Metadata" in report_md
    assert "| linked_list | 34 |" in report_md
    assert "| array | NA | insertion at front is inefficient for array! |" in report_md
    assert SUMMARY_LINES[0] in report_md


def test_report_run_missing_results(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        report_run(out_dir=tmp_path)


def test_summary_keeps_the_three_fixed_statements() -> None:
    assert SUMMARY_LINES == (
        "1. array is the fastest for random access due to contiguous memory.",
        "2. linked_list is the slowest for front insertion because elements need to be shifted.",
        "3. deque is fast for both front and back insertions, but not as fast as array for random access.",
    )
