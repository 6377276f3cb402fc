"""Render check results as JSON for other tools to consume."""

from __future__ import annotations

import json
from collections.abc import Sequence

from depcycle.analysis import display_name
from depcycle.model import CheckResult


def _result_to_dict(result: CheckResult) -> dict:
    cycles = [
        {
            "members": list(report.member_ids),
            "names": [display_name(i, result.name_index) for i in report.member_ids],
            "trace": report.formatted_trace,
        }
        for report in result.reports
    ]
    return {
        "name": result.name,
        "cycles": cycles,
        "errors": result.errors,
        "warnings": result.warnings,
    }


def render_json(results: Sequence[CheckResult]) -> str:
    """Serialize *results* into a JSON array, one object per compilation."""
    return json.dumps([_result_to_dict(r) for r in results], indent=2) + "\n"
