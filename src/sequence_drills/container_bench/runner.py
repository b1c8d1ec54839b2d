from __future__ import annotations

import random
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Literal

import attrs

from .config import (
    DEFAULT_SETTINGS,
    PHASE_SHAPE_ORDER,
    PHASES,
    SHAPES,
    BenchSettings,
    get_shape,
    inapplicable_note,
    shape_supports,
)
from .export import build_results, write_results
from .profiling import profile_back_insert, profile_front_insert, profile_random_access
from .report import format_console_report, write_markdown_report

RecordStatus = Literal["measured", "not_applicable"]


@attrs.define(frozen=True, slots=True)
class BenchRecord:
    phase: str
    shape: str
    status: RecordStatus
    duration_us: int | None = None
    note: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "phase": self.phase,
            "shape": self.shape,
            "status": self.status,
            "duration_us": self.duration_us,
            "note": self.note,
        }


def _now_rfc3339() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")


def _profile(phase: str, container: Any, settings: BenchSettings, rng: random.Random | None) -> int:
    if phase == "insert_back":
        return profile_back_insert(container, settings.num_elements)
    if phase == "insert_front":
        return profile_front_insert(container, settings.num_elements)
    if phase == "random_access":
        return profile_random_access(container, settings.num_accesses, rng=rng)
    raise AssertionError(f"Unhandled phase: {phase}")


def run_phases(
    containers: dict[str, Any],
    *,
    settings: BenchSettings = DEFAULT_SETTINGS,
    rng: random.Random | None = None,
) -> list[BenchRecord]:
    """Run every phase in order against ``containers`` (keyed by shape key).

    Containers are cleared once, after the back-insertion phase. Front insertion and
    random access are only invoked on shapes that support them; the rest get a
    ``not_applicable`` record with a fixed note.
    """
    records: list[BenchRecord] = []
    for phase in PHASES:
        for key in PHASE_SHAPE_ORDER[phase]:
            shape = get_shape(key)
            if not shape_supports(shape, phase):
                records.append(BenchRecord(phase=phase, shape=key, status="not_applicable", note=inapplicable_note(shape, phase)))
                continue
            duration = _profile(phase, containers[key], settings, rng)
            records.append(BenchRecord(phase=phase, shape=key, status="measured", duration_us=duration))

        if phase == "insert_back":
            for c in containers.values():
                c.clear()
    return records


def new_containers() -> dict[str, Any]:
    return {key: shape.new() for key, shape in SHAPES.items()}


def timing_run(*, out_dir: Path | None = None, settings: BenchSettings = DEFAULT_SETTINGS) -> int:
    started_at = _now_rfc3339()
    records = run_phases(new_containers(), settings=settings)
    finished_at = _now_rfc3339()

    record_dicts = [r.to_dict() for r in records]
    print(format_console_report(record_dicts))

    if out_dir is not None:
        out_dir.mkdir(parents=True, exist_ok=True)
        results = build_results(
            record_dicts,
            settings=settings,
            started_at=started_at,
            finished_at=finished_at,
            artifacts_dir=out_dir,
        )
        write_results(out_dir / "results.json", results)
        write_markdown_report(results, out_dir=out_dir)
        print(f"\nresults written to {out_dir}", file=sys.stderr)

    return 0
