"""Detect circular dependencies in bundler module graphs."""

from __future__ import annotations

from depcycle.analysis import (
    detect,
    find_cycles,
    format_trace,
    is_excluded_module,
    strongly_connected_components,
)
from depcycle.builder import build
from depcycle.errors import ConfigError, DepCycleError, InvalidRecord, StatsError
from depcycle.model import CheckResult, CycleReport, DetectOptions, ModuleRecord, Reference
from depcycle.pipeline import check_records, check_stats, run

__all__ = [
    "CheckResult",
    "ConfigError",
    "CycleReport",
    "DepCycleError",
    "DetectOptions",
    "InvalidRecord",
    "ModuleRecord",
    "Reference",
    "StatsError",
    "build",
    "check_records",
    "check_stats",
    "detect",
    "find_cycles",
    "format_trace",
    "is_excluded_module",
    "run",
    "strongly_connected_components",
]
