"""JSON reporter emitting structured probe results."""
from __future__ import annotations

import datetime as dt
import json
import pathlib
import time
from typing import Any, Dict, Sequence

import click
from jsonschema import validate

from objadapt.probe.models import ProbePlan, ProbeResult, ProbeTarget

from .base import Reporter, count_statuses
from .schema import JSON_SCHEMA_V1, SCHEMA_VERSION


class JsonReporter(Reporter):
    """Writes results to a JSON file validated against the schema."""

    def __init__(self, path: str) -> None:
        self._path = pathlib.Path(path)
        self._records: list[Dict[str, Any]] = []
        self._plan: ProbePlan | None = None
        self._start_time = 0.0

    def on_start(self, plan: ProbePlan, targets: Sequence[ProbeTarget]) -> None:
        self._plan = plan
        self._records.clear()
        self._start_time = time.perf_counter()

    def on_result(self, result: ProbeResult, index: int, total: int) -> None:
        self._records.append(_result_to_dict(result))

    def on_complete(self, results: Sequence[ProbeResult]) -> None:
        if self._plan is None:
            return
        duration = time.perf_counter() - self._start_time
        generated_at = dt.datetime.now(dt.timezone.utc).replace(tzinfo=None)
        payload = {
            "schema_version": SCHEMA_VERSION,
            "generated_at": generated_at.isoformat(timespec="seconds") + "Z",
            "plan": str(self._plan.plan_path) if self._plan.plan_path else None,
            "summary": _build_summary(results, duration),
            "results": self._records,
        }
        validate(instance=payload, schema=JSON_SCHEMA_V1)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as exc:  # pragma: no cover - filesystem protection
            raise RuntimeError(f"Failed to write JSON report to {self._path}: {exc}") from exc
        click.echo(f"JSON report written to {self._path}")


def _build_summary(results: Sequence[ProbeResult], duration: float) -> Dict[str, Any]:
    counts = count_statuses(results)
    return {
        "total": len(results),
        "resolved": counts["resolved"],
        "mismatch": counts["mismatch"],
        "missing": counts["missing"],
        "failed": counts["failed"],
        "errors": counts["error"],
        "duration_s": duration,
    }


def _result_to_dict(result: ProbeResult) -> Dict[str, Any]:
    record: Dict[str, Any] = {
        "id": result.identifier(),
        "target": result.target,
        "property": result.property_name,
        "status": result.status,
        "duration_ms": result.duration_s * 1000,
        "accessor": result.accessor,
        "value": _jsonify(result.value),
    }
    if result.expected is not None:
        record["expected"] = _jsonify(result.expected)
    if result.error:
        record["error"] = result.error
    return record


def _jsonify(value: Any) -> Any:
    if isinstance(value, dict):
        return {str(key): _jsonify(val) for key, val in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonify(item) for item in value]
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)
