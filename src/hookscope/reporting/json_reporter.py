"""JSON reporter writing the aggregate report to a file."""
from __future__ import annotations

import datetime as dt
import json
import pathlib
from typing import Any, Dict

import click
from jsonschema import validate

from hookscope.core.models import Report

from .base import Reporter
from .schema import JSON_REPORT_SCHEMA_V1, SCHEMA_VERSION


class JsonReporter(Reporter):
    """Writes the final report to ``path`` once validated against the schema."""

    def __init__(self, path: str) -> None:
        self._path = pathlib.Path(path)

    def on_line(self, result, index: int, total: int) -> None:
        pass

    def on_final(self, report: Report) -> None:
        payload = build_payload(report)
        validate(instance=payload, schema=JSON_REPORT_SCHEMA_V1)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as exc:  # pragma: no cover - filesystem protection
            raise RuntimeError(f"Failed to write JSON report to {self._path}: {exc}") from exc
        click.echo(f"JSON report written to {self._path}")


def build_payload(report: Report) -> Dict[str, Any]:
    total = len(report.results)
    return {
        "schema_version": SCHEMA_VERSION,
        "generated_at": dt.datetime.now(dt.timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z"),
        "summary": {
            "total": total,
            "passed": total - report.error_count,
            "failed": report.error_count,
            "duration_s": report.duration,
        },
        "results": [
            {
                "message": result.message,
                "passed": result.passed,
                "kind": result.kind.value if result.kind else None,
            }
            for result in report.results
        ],
    }
