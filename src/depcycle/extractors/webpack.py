"""Extract module records from ``webpack --json`` stats output."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from depcycle.model import Compilation

logger = logging.getLogger(__name__)


class WebpackStatsExtractor:
    """Handle webpack stats: ``modules[].reasons[].moduleId``.

    Multi-compiler stats nest further compilations under ``children``;
    each one becomes its own batch, named ``parent/child``.
    """

    def can_handle(self, stats: Mapping[str, Any]) -> bool:
        modules = stats.get("modules")
        if isinstance(modules, list):
            if not modules or any(
                isinstance(m, Mapping) and "reasons" in m for m in modules
            ):
                return True
        children = stats.get("children")
        if isinstance(children, list):
            return any(isinstance(c, Mapping) and self.can_handle(c) for c in children)
        return False

    def extract(self, stats: Mapping[str, Any]) -> list[Compilation]:
        compilations: list[Compilation] = []
        _walk(stats, stats.get("name") or "main", compilations)
        logger.debug("Webpack compilations: %s", [c.name for c in compilations])
        return compilations


def _walk(stats: Mapping[str, Any], label: str, out: list[Compilation]) -> None:
    modules = stats.get("modules")
    if isinstance(modules, list):
        out.append(Compilation(label, list(modules)))

    children = stats.get("children")
    if not isinstance(children, list):
        return
    for i, child in enumerate(children):
        if not isinstance(child, Mapping):
            continue
        child_name = child.get("name") or str(i)
        _walk(child, f"{label}/{child_name}", out)
