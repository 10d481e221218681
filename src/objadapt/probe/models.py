"""Data models for probe plans."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence


@dataclass(frozen=True)
class ProbeTarget:
    name: str
    factory: str
    properties: Sequence[str]
    args: Sequence[Any] = field(default_factory=tuple)
    kwargs: Mapping[str, Any] = field(default_factory=dict)
    expect: Mapping[str, Any] = field(default_factory=dict)
    tags: Sequence[str] = field(default_factory=tuple)


@dataclass(frozen=True)
class ProbePlan:
    targets: Sequence[ProbeTarget]
    description: str = ""
    plan_path: Optional[Path] = None


@dataclass(frozen=True)
class ProbeOptions:
    targets: Sequence[str] = field(default_factory=tuple)
    tags: Sequence[str] = field(default_factory=tuple)
    skip_tags: Sequence[str] = field(default_factory=tuple)
    fail_fast: bool = False


@dataclass
class ProbeResult:
    """Outcome of reading one property off one target."""

    target: str
    property_name: str
    status: str
    duration_s: float = 0.0
    accessor: Optional[str] = None
    value: Any = None
    expected: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "resolved"

    def identifier(self) -> str:
        return f"{self.target}.{self.property_name}"
