"""YAML loader and validation for probe plans."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml
from jsonschema import Draft7Validator

from .models import ProbePlan, ProbeTarget
from .schema import PLAN_SCHEMA

_validator = Draft7Validator(PLAN_SCHEMA)


def load_plan(path: str) -> ProbePlan:
    """Load and validate a probe plan file."""
    plan_path = Path(path).expanduser().resolve()
    raw = yaml.safe_load(plan_path.read_text(encoding="utf-8")) or {}
    plan = parse_plan(raw)
    return ProbePlan(targets=plan.targets, description=plan.description, plan_path=plan_path)


def parse_plan(raw: Any) -> ProbePlan:
    if not isinstance(raw, Mapping):
        raise ValueError("Plan file must contain a mapping at the top level")
    errors = sorted(_validator.iter_errors(raw), key=lambda e: list(e.path))
    if errors:
        messages = "; ".join(f"{'/'.join(map(str, err.path)) or 'root'}: {err.message}" for err in errors)
        raise ValueError(f"Plan schema validation failed: {messages}")
    targets = []
    seen: set[str] = set()
    for entry in raw["targets"]:
        target = _parse_target(entry)
        if target.name in seen:
            raise ValueError(f"Duplicate target '{target.name}'")
        seen.add(target.name)
        targets.append(target)
    return ProbePlan(targets=tuple(targets), description=str(raw.get("description", "")))


def _parse_target(entry: Mapping[str, Any]) -> ProbeTarget:
    name = entry["name"].strip()
    if not name:
        raise ValueError("Target name cannot be blank")
    properties = tuple(str(prop) for prop in entry["properties"])
    expect = dict(entry.get("expect") or {})
    unknown = sorted(set(expect) - set(properties))
    if unknown:
        raise ValueError(f"Target '{name}' expects values for unlisted properties: {', '.join(unknown)}")
    return ProbeTarget(
        name=name,
        factory=entry["factory"].strip(),
        properties=properties,
        args=tuple(entry.get("args") or ()),
        kwargs=dict(entry.get("kwargs") or {}),
        expect=expect,
        tags=tuple(str(tag) for tag in entry.get("tags") or ()),
    )
