"""Render check results as plain text."""

from __future__ import annotations

from collections.abc import Sequence

from depcycle.model import CheckResult


def render_text(results: Sequence[CheckResult]) -> str:
    blocks: list[str] = []
    for result in results:
        blocks.extend(f"ERROR in {result.name}:\n{msg}" for msg in result.errors)
        blocks.extend(f"WARNING in {result.name}:\n{msg}" for msg in result.warnings)

    total = sum(len(r.reports) for r in results)
    blocks.append(f"{total} cycle(s) found" if total else "No cycles found")
    return "\n\n".join(blocks) + "\n"
