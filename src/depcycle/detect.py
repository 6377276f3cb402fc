"""Auto-detect the stats document format and return the matching extractor."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from depcycle.extractors import RecordListExtractor, WebpackStatsExtractor
from depcycle.extractors.base import Extractor


def detect_extractor(stats: Mapping[str, Any]) -> Extractor | None:
    """Return the first extractor able to read *stats*, or None."""
    extractors: list[Extractor] = [RecordListExtractor(), WebpackStatsExtractor()]
    for ext in extractors:
        if ext.can_handle(stats):
            return ext
    return None
