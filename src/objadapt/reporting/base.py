"""Reporter interface definitions."""
from __future__ import annotations

from typing import List, Sequence

from objadapt.probe.models import ProbePlan, ProbeResult, ProbeTarget


class Reporter:
    """Interface for output renderers."""

    def on_start(self, plan: ProbePlan, targets: Sequence[ProbeTarget]) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def on_result(self, result: ProbeResult, index: int, total: int) -> None:  # pragma: no cover
        raise NotImplementedError

    def on_complete(self, results: Sequence[ProbeResult]) -> None:  # pragma: no cover
        raise NotImplementedError


class ReportManager:
    """Dispatches lifecycle callbacks to multiple reporters."""

    def __init__(self, reporters: Sequence[Reporter]) -> None:
        self._reporters = list(reporters)

    def start(self, plan: ProbePlan, targets: Sequence[ProbeTarget]) -> None:
        for reporter in self._reporters:
            reporter.on_start(plan, targets)

    def handle_result(self, result: ProbeResult, index: int, total: int) -> None:
        for reporter in self._reporters:
            reporter.on_result(result, index, total)

    def complete(self, results: Sequence[ProbeResult]) -> None:
        for reporter in self._reporters:
            reporter.on_complete(results)

    def reporters(self) -> List[Reporter]:
        return list(self._reporters)


def count_statuses(results: Sequence[ProbeResult]) -> dict[str, int]:
    counts = {status: 0 for status in ("resolved", "mismatch", "missing", "failed", "error")}
    for result in results:
        counts[result.status] = counts.get(result.status, 0) + 1
    return counts
