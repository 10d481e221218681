"""Probe plans: check that models answer the properties templates use."""

from .loader import load_plan, parse_plan
from .models import ProbeOptions, ProbePlan, ProbeResult, ProbeTarget
from .runner import ProbeRunner, build_model, run_probes, select_targets

__all__ = [
    "ProbeOptions",
    "ProbePlan",
    "ProbeResult",
    "ProbeRunner",
    "ProbeTarget",
    "build_model",
    "load_plan",
    "parse_plan",
    "run_probes",
    "select_targets",
]
