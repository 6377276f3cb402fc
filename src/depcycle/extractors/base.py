"""Extractor protocol — all extractors conform to this interface."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from depcycle.model import Compilation


class Extractor(Protocol):
    """Protocol for stats-document extractors."""

    def can_handle(self, stats: Mapping[str, Any]) -> bool:
        """Return True if this extractor understands *stats*."""
        ...

    def extract(self, stats: Mapping[str, Any]) -> list[Compilation]:
        """Return the module-record batches found in *stats*."""
        ...
