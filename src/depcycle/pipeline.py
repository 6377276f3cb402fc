"""Orchestrator: load stats → extract → build → detect → route."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from depcycle.analysis import detect, display_name
from depcycle.builder import build
from depcycle.detect import detect_extractor
from depcycle.errors import StatsError
from depcycle.model import CheckResult, CycleReport, DetectOptions, ModuleRecord, NameIndex

logger = logging.getLogger(__name__)


def load_stats(stats_path: Path) -> dict[str, Any]:
    """Read and parse a JSON stats document."""
    try:
        with open(stats_path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise StatsError(f"cannot read {stats_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise StatsError(f"{stats_path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise StatsError(f"{stats_path}: expected a JSON object at top level")
    return data


def cycle_message(report: CycleReport, name_index: NameIndex) -> str:
    """Render *report* as a multi-line diagnostic, one module per line.

    Raises :class:`ValueError` when the report has no members.
    """
    if not report.member_ids:
        raise ValueError("cannot render a cycle with no members")
    ids = [*report.member_ids, report.member_ids[0]]
    lines = "\n  -> ".join(display_name(i, name_index) for i in ids)
    return f"Found a cycle:\n  {lines}"


def check_records(
    records: Iterable[ModuleRecord | Mapping[str, Any]],
    *,
    options: DetectOptions | None = None,
    fail_on_error: bool = True,
    name: str = "main",
) -> CheckResult:
    """Check one batch of module records.

    Each cycle becomes an error message when *fail_on_error* is set,
    otherwise a warning.
    """
    graph, name_index = build(records)
    reports = detect(graph, name_index, options)

    result = CheckResult(name=name, reports=reports, name_index=dict(name_index))
    sink = result.errors if fail_on_error else result.warnings
    for report in reports:
        sink.append(cycle_message(report, name_index))

    logger.debug("%s: %d modules, %d cycles", name, len(graph), len(reports))
    return result


def check_stats(
    stats: Mapping[str, Any],
    *,
    options: DetectOptions | None = None,
    fail_on_error: bool = True,
) -> list[CheckResult]:
    """Check every compilation found in a parsed stats document."""
    extractor = detect_extractor(stats)
    if extractor is None:
        raise StatsError(
            "unrecognised stats format: expected 'modules' with 'reasons' "
            "(webpack --json) or 'incomingReferences'"
        )

    logger.debug("Extractor: %s", type(extractor).__name__)
    return [
        check_records(
            comp.records,
            options=options,
            fail_on_error=fail_on_error,
            name=comp.name,
        )
        for comp in extractor.extract(stats)
    ]


def run(
    stats_path: Path,
    *,
    options: DetectOptions | None = None,
    fail_on_error: bool = True,
) -> list[CheckResult]:
    """Run the full depcycle pipeline on the stats file at *stats_path*."""
    stats = load_stats(stats_path)
    results = check_stats(stats, options=options, fail_on_error=fail_on_error)
    logger.info(
        "Checked %d compilation(s), %d cycle(s)",
        len(results),
        sum(len(r.reports) for r in results),
    )
    return results
