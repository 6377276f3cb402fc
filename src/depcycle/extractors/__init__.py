"""Extractors turning stats documents into module-record batches."""

from __future__ import annotations

from depcycle.extractors.records import RecordListExtractor
from depcycle.extractors.webpack import WebpackStatsExtractor

__all__ = [
    "RecordListExtractor",
    "WebpackStatsExtractor",
]
