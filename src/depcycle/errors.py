"""Exception types raised by depcycle."""

from __future__ import annotations


class DepCycleError(Exception):
    """Base class for all depcycle errors."""


class InvalidRecord(DepCycleError):
    """A module record is missing a required field or is malformed.

    ``record_id`` is the module id when the record has one, otherwise a
    ``"#<position>"`` marker locating the record in its batch.
    """

    def __init__(self, record_id: str, reason: str) -> None:
        super().__init__(f"invalid module record {record_id}: {reason}")
        self.record_id = record_id
        self.reason = reason


class StatsError(DepCycleError):
    """A stats document cannot be read or is not in a recognised shape."""


class ConfigError(DepCycleError):
    """A configuration value has the wrong type."""
