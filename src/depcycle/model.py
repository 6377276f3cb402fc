"""Data model for module records, graphs and cycle reports."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

# Module id -> ids of the modules that reference it.
Graph = Mapping[str, tuple[str, ...]]
# Module id -> display name.
NameIndex = Mapping[str, str]

DEFAULT_VENDOR_DIRS: tuple[str, ...] = ("node_modules", "bower_components")


@dataclass(frozen=True)
class Reference:
    """An incoming reference: *referencing_module_id* depends on the module."""

    referencing_module_id: str


@dataclass(frozen=True)
class ModuleRecord:
    """A module as reported by the bundler."""

    id: str
    name: str
    incoming_references: tuple[Reference, ...] = ()


@dataclass(frozen=True)
class DetectOptions:
    """Options controlling which components are reported."""

    include_vendored_modules: bool = False
    vendor_dirs: tuple[str, ...] = DEFAULT_VENDOR_DIRS
    # Called with (module_id, display_name); replaces the vendor_dirs test.
    is_excluded: Callable[[str, str], bool] | None = None


@dataclass(frozen=True)
class CycleReport:
    """One circular dependency."""

    member_ids: tuple[str, ...]
    formatted_trace: str


@dataclass
class Compilation:
    """A named batch of module records taken from a stats document."""

    name: str
    records: list[Mapping] = field(default_factory=list)


@dataclass
class CheckResult:
    """Outcome of checking one compilation."""

    name: str
    reports: list[CycleReport] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    name_index: dict[str, str] = field(default_factory=dict)
