"""Extract module records already in the native ``incomingReferences`` shape."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from depcycle.model import Compilation


class RecordListExtractor:
    """Handle ``{"modules": [{"id", "name", "incomingReferences": [...]}]}``."""

    def can_handle(self, stats: Mapping[str, Any]) -> bool:
        modules = stats.get("modules")
        if not isinstance(modules, list):
            return False
        return any(
            isinstance(m, Mapping) and "incomingReferences" in m for m in modules
        )

    def extract(self, stats: Mapping[str, Any]) -> list[Compilation]:
        return [Compilation(stats.get("name") or "main", list(stats["modules"]))]
