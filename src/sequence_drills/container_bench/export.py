from __future__ import annotations

import json
import platform
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from .config import BenchSettings

SCHEMA_VERSION = "0.1.0"


def _default_results_schema_path() -> Path:
    return Path(__file__).resolve().parent / "schema" / "results.schema.json"


def validate_results_schema(results: dict[str, Any], *, schema_path: Path | None = None) -> None:
    schema_path = _default_results_schema_path() if schema_path is None else schema_path
    schema = json.loads(schema_path.read_text())
    Draft202012Validator(schema).validate(results)


def _environment() -> dict[str, Any]:
    return {
        "platform": {
            "os": platform.system().lower(),
            "arch": platform.machine().lower(),
            "python": platform.python_version(),
        }
    }


def build_results(
    records: list[dict[str, Any]],
    *,
    settings: BenchSettings,
    started_at: str,
    finished_at: str,
    artifacts_dir: Path,
) -> dict[str, Any]:
    run_obj = {
        "started_at": started_at,
        "finished_at": finished_at,
        "environment": _environment(),
        "settings": settings.to_dict(),
        "artifacts_dir": str(artifacts_dir),
    }
    out = {"schema_version": SCHEMA_VERSION, "run": run_obj, "records": list(records)}
    validate_results_schema(out)
    return out


def load_results(path: Path) -> dict[str, Any]:
    return json.loads(path.read_text())


def write_results(path: Path, results: dict[str, Any]) -> None:
    path.write_text(json.dumps(results, indent=2, sort_keys=True) + "\n")
