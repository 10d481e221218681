"""Probe runner reading plan properties through a model adaptor."""
from __future__ import annotations

import fnmatch
import logging
import time
from typing import Any, Callable, List, Optional, Sequence

from objadapt.adaptors import ObjectModelAdaptor
from objadapt.core import NoSuchPropertyError, ObjAdaptError
from objadapt.utils import import_string

from .models import ProbeOptions, ProbePlan, ProbeResult, ProbeTarget

logger = logging.getLogger(__name__)

# Non-null property token handed to the adaptor; plans only carry names.
PROPERTY_TOKEN = object()


class ProbeRunner:
    """Builds each target model once and reads its properties in order."""

    def __init__(self, adaptor: Optional[ObjectModelAdaptor] = None, *, fail_fast: bool = False) -> None:
        self._adaptor = adaptor if adaptor is not None else ObjectModelAdaptor()
        self._fail_fast = fail_fast

    def run(
        self,
        targets: Sequence[ProbeTarget],
        *,
        on_result: Optional[Callable[[ProbeResult, int, int], None]] = None,
    ) -> List[ProbeResult]:
        results: List[ProbeResult] = []
        total = sum(len(target.properties) for target in targets)
        index = 0
        for target in targets:
            for result in self._probe_target(target):
                index += 1
                results.append(result)
                if on_result:
                    on_result(result, index, total)
                if self._fail_fast and not result.ok:
                    return results
        return results

    def _probe_target(self, target: ProbeTarget) -> List[ProbeResult]:
        start = time.perf_counter()
        try:
            model = build_model(target)
        except Exception as exc:
            logger.info("Target %s could not be built: %s", target.name, exc)
            duration = time.perf_counter() - start
            return [
                ProbeResult(
                    target=target.name,
                    property_name=prop,
                    status="error",
                    duration_s=duration,
                    error=f"{type(exc).__name__}: {exc}",
                )
                for prop in target.properties
            ]
        return [self._probe_property(target, model, prop) for prop in target.properties]

    def _probe_property(self, target: ProbeTarget, model: Any, prop: str) -> ProbeResult:
        start = time.perf_counter()
        result = ProbeResult(
            target=target.name,
            property_name=prop,
            status="resolved",
            expected=target.expect.get(prop),
        )
        try:
            result.accessor = self._adaptor.describe(model, prop)
            result.value = self._adaptor.get_property(model, PROPERTY_TOKEN, prop)
        except NoSuchPropertyError as exc:
            result.status = "failed" if exc.cause is not None else "missing"
            result.error = str(exc) if exc.cause is None else f"{exc} ({type(exc.cause).__name__}: {exc.cause})"
        except ObjAdaptError as exc:
            result.status = "error"
            result.error = f"{type(exc).__name__}: {exc}"
        else:
            if prop in target.expect and result.value != target.expect[prop]:
                result.status = "mismatch"
        result.duration_s = time.perf_counter() - start
        logger.debug("Probe %s -> %s", result.identifier(), result.status)
        return result


def build_model(target: ProbeTarget) -> Any:
    factory = import_string(target.factory)
    if not callable(factory):
        raise TypeError(f"Factory '{target.factory}' is not callable")
    model = factory(*target.args, **dict(target.kwargs))
    if model is None:
        raise TypeError(f"Factory '{target.factory}' returned None")
    return model


def select_targets(plan: ProbePlan, options: ProbeOptions) -> List[ProbeTarget]:
    selected: List[ProbeTarget] = []
    for target in plan.targets:
        if options.targets and not any(fnmatch.fnmatchcase(target.name, pattern) for pattern in options.targets):
            continue
        if options.tags and not set(options.tags) & set(target.tags):
            continue
        if options.skip_tags and set(options.skip_tags) & set(target.tags):
            continue
        selected.append(target)
    return selected


def run_probes(
    plan: ProbePlan,
    options: ProbeOptions,
    *,
    reporters: Sequence[Any] = (),
    adaptor: Optional[ObjectModelAdaptor] = None,
) -> int:
    """Execute the plan; returns process exit code (0 all resolved, 1 otherwise)."""

    from objadapt.reporting import ReportManager

    targets = select_targets(plan, options)
    if not targets:
        logger.info("No targets matched the provided filters")
        return 1
    manager = ReportManager(reporters)
    manager.start(plan, targets)
    runner = ProbeRunner(adaptor, fail_fast=options.fail_fast)
    results = runner.run(targets, on_result=manager.handle_result)
    manager.complete(results)
    logger.info("Probed %d propert(ies) across %d target(s)", len(results), len(targets))
    return 0 if all(result.ok for result in results) else 1
