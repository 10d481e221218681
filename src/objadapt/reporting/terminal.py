"""Terminal reporter rendering progress and summaries."""
from __future__ import annotations

import time
from typing import Sequence

import click

from objadapt.probe.models import ProbePlan, ProbeResult, ProbeTarget

from .base import Reporter, count_statuses


STATUS_COLORS = {
    "resolved": "green",
    "mismatch": "red",
    "missing": "red",
    "failed": "red",
    "error": "yellow",
}


class TerminalReporter(Reporter):
    """Human-readable reporter that streams to stdout."""

    def __init__(self, *, use_color: bool = True) -> None:
        self._use_color = use_color
        self._start_time = 0.0
        self._failures: list[tuple[int, ProbeResult]] = []

    def on_start(self, plan: ProbePlan, targets: Sequence[ProbeTarget]) -> None:
        self._start_time = time.perf_counter()
        self._failures.clear()
        properties = sum(len(target.properties) for target in targets)
        header = f"Probing {properties} propert(ies) on {len(targets)} target(s)"
        if plan.description:
            header += f": {plan.description}"
        click.echo(self._styled(header, force_color="cyan"))

    def on_result(self, result: ProbeResult, index: int, total: int) -> None:
        ms = result.duration_s * 1000
        status_text = self._styled(result.status.upper())
        via = f" via {result.accessor}" if result.accessor and result.status != "error" else ""
        click.echo(f"[{index}/{total}] {result.identifier()} -> {status_text}{via} ({ms:.2f} ms)")
        if not result.ok:
            self._failures.append((index, result))

    def on_complete(self, results: Sequence[ProbeResult]) -> None:
        duration = time.perf_counter() - self._start_time
        counts = count_statuses(results)
        summary = " ".join(f"{status}={count}" for status, count in counts.items())
        click.echo(
            self._styled(
                f"Summary: total={len(results)} {summary} duration={duration:.2f}s",
                force_color="cyan",
            )
        )
        if self._failures:
            click.echo(self._styled("Failure details:", force_color="red"))
            for index, result in self._failures:
                click.echo(f"  [{index}] {result.identifier()} -> {result.status}")
                self._print_failure_details(result, indent="    ")

    def _styled(self, text: str, *, force_color: str | None = None) -> str:
        if not self._use_color:
            return text
        color = force_color or STATUS_COLORS.get(text.lower(), None)
        if color:
            return click.style(text, fg=color)
        return text

    def _print_failure_details(self, result: ProbeResult, *, indent: str = "    ") -> None:
        if result.status == "mismatch":
            click.echo(f"{indent}actual={result.value!r} expected={result.expected!r}")
            return
        if result.accessor and result.status != "error":
            click.echo(f"{indent}accessor: {result.accessor}")
        if result.error:
            click.echo(f"{indent}error: {result.error}")
