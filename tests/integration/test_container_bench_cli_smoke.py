from __future__ import annotations

import json
import re
from pathlib import Path

import pytest

from sequence_drills.container_bench.__main__ import main
from sequence_drills.container_bench.config import SUMMARY_LINES
from sequence_drills.container_bench.export import validate_results_schema

_MEASURED = re.compile(r"^(array|linked_list|deque): \d+ microseconds$")


@pytest.mark.integration
def test_default_run_prints_full_report(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 0
    out = capsys.readouterr().out

    lines = out.splitlines()
    assert lines[0] == "insert at back:"
    assert "insert at front:" in lines
    assert "random access:" in lines
    assert "array: insertion at front is inefficient for array!" in lines
    assert "linked_list: no random access, so not applicable!" in lines
    assert sum(1 for ln in lines if _MEASURED.match(ln)) == 7
    assert lines[-len(SUMMARY_LINES) :] == list(SUMMARY_LINES)


@pytest.mark.integration
def test_out_dir_writes_results_and_report(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    out_dir = tmp_path / "bench_out"
    assert main(["--out-dir", str(out_dir)]) == 0
    capsys.readouterr()

    results = json.loads((out_dir / "results.json").read_text())
    validate_results_schema(results)
    assert results["run"]["settings"] == {"num_elements": 100000, "num_accesses": 10000}
    assert len(results["records"]) == 9
    assert (out_dir / "report.md").exists()

    (out_dir / "report.md").unlink()
    assert main(["report", "--out-dir", str(out_dir)]) == 0
    assert "Container Benchmark Report" in (out_dir / "report.md").read_text()


def test_report_subcommand_missing_results(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["report", "--out-dir", str(tmp_path)]) == 2
    assert "Missing results.json" in capsys.readouterr().err
