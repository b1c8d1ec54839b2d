from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

from mdutils.mdutils import MdUtils  # type: ignore[import-untyped]

from .config import PHASE_TITLES, PHASES, SHAPES, SUMMARY_LINES
from .export import load_results


def _shape_label(key: str) -> str:
    shape = SHAPES.get(key)
    return key if shape is None else shape.label


def _group_by_phase(records: Iterable[dict[str, Any]]) -> dict[str, list[dict[str, Any]]]:
    by_phase: dict[str, list[dict[str, Any]]] = {p: [] for p in PHASES}
    for r in records:
        by_phase.setdefault(r["phase"], []).append(r)
    return by_phase


def format_record_line(rec: dict[str, Any]) -> str:
    label = _shape_label(rec["shape"])
    if rec["status"] == "not_applicable":
        return f"{label}: {rec.get('note') or 'not applicable!'}"
    return f"{label}: {int(rec['duration_us'])} microseconds"


def format_console_report(records: Iterable[dict[str, Any]]) -> str:
    """Render records as the plain-text report, one block per phase, then the summary."""
    blocks: list[str] = []
    for phase, recs in _group_by_phase(records).items():
        if not recs:
            continue
        lines = [f"{PHASE_TITLES.get(phase, phase)}:"]
        lines += [format_record_line(r) for r in recs]
        blocks.append("\n".join(lines))

    blocks.append("\n".join(["summary:", *SUMMARY_LINES]))
    return "\n\n".join(blocks)


def _format_duration(v: int | None) -> str:
    if v is None:
        return "NA"
    return str(v)


def write_markdown_report(results: dict[str, Any], *, out_dir: Path) -> Path:
    md = MdUtils(file_name=str(out_dir / "report"), title="Container Benchmark Report")
    run = results.get("run", {})
    settings = run.get("settings", {})
    plat = run.get("environment", {}).get("platform", {})

    md.new_header(level=1, title="Run Metadata")
    md.new_list(
        [
            f"Started: `{run.get('started_at', '')}`",
            f"Finished: `{run.get('finished_at', '')}`",
            f"Platform: `{plat.get('os', 'unknown')}/{plat.get('arch', 'unknown')}` (python `{plat.get('python', 'unknown')}`)",
            f"Elements inserted: `{settings.get('num_elements', 'NA')}`",
            f"Random accesses: `{settings.get('num_accesses', 'NA')}`",
        ]
    )

    for phase, recs in _group_by_phase(results.get("records", [])).items():
        if not recs:
            continue
        md.new_header(level=1, title=PHASE_TITLES.get(phase, phase).capitalize())
        table_lines = [
            "| shape | time (us) | note |",
            "|-------|----------:|------|",
        ]
        for r in recs:
            table_lines.append(
                "| "
                + " | ".join(
                    [
                        _shape_label(r["shape"]),
                        _format_duration(r.get("duration_us")),
                        r.get("note") or "",
                    ]
                )
                + " |"
            )
        md.new_paragraph("\n".join(table_lines))

    md.new_header(level=1, title="Summary")
    md.new_paragraph("Expected behavior, independent of the measurements above:")
    md.new_paragraph("\n".join(SUMMARY_LINES))

    md.create_md_file()
    return out_dir / "report.md"


def report_run(*, out_dir: Path) -> int:
    results_path = out_dir / "results.json"
    if not results_path.exists():
        raise FileNotFoundError(f"Missing results.json at {results_path}")

    results = load_results(results_path)
    write_markdown_report(results, out_dir=out_dir)
    return 0
