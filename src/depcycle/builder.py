"""Build an adjacency-list graph from bundler module records."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from depcycle.errors import InvalidRecord
from depcycle.model import Graph, ModuleRecord, NameIndex, Reference

logger = logging.getLogger(__name__)

# (reference list key, referencing id key) pairs, native shape first.
_REFERENCE_KEYS = (
    ("incomingReferences", "referencingModuleId"),
    ("reasons", "moduleId"),
)

# Reasons webpack records when a module reads its own exports; not an import.
_SELF_REASON_TYPES = frozenset({"cjs self exports reference"})


def build(records: Iterable[ModuleRecord | Mapping[str, Any]]) -> tuple[Graph, NameIndex]:
    """Return the ``(graph, name_index)`` pair for *records*.

    ``graph[id]`` lists the ids of the modules referencing ``id``, each once,
    in first-seen order.  Records sharing an id keep the first record's
    position and have their references merged; the last name wins.

    Raises :class:`InvalidRecord` for the first malformed record.  Nothing
    is returned in that case.
    """
    edges: dict[str, list[str]] = {}
    seen: dict[str, set[str]] = {}
    names: dict[str, str] = {}

    for position, raw in enumerate(records):
        record = coerce_record(raw, position)
        if record.id in names:
            logger.debug("Duplicate module id %s, merging references", record.id)
        names[record.id] = record.name

        targets = edges.setdefault(record.id, [])
        known = seen.setdefault(record.id, set())
        for ref in record.incoming_references:
            parent = ref.referencing_module_id
            if parent in known:
                continue
            known.add(parent)
            targets.append(parent)

    logger.debug(
        "Built graph: %d modules, %d edges",
        len(edges),
        sum(len(v) for v in edges.values()),
    )
    graph = MappingProxyType({k: tuple(v) for k, v in edges.items()})
    return graph, MappingProxyType(names)


def coerce_record(raw: ModuleRecord | Mapping[str, Any], position: int) -> ModuleRecord:
    """Turn *raw* into a :class:`ModuleRecord`, validating required fields.

    Mappings may use the native keys (``incomingReferences`` /
    ``referencingModuleId``) or webpack's (``reasons`` / ``moduleId``).
    Ids are stringified, for mappings and :class:`ModuleRecord` alike.  A
    reference whose id is explicitly null (webpack entry points) carries no
    edge and is dropped, as is webpack's CommonJS self-exports reason.
    """
    if isinstance(raw, ModuleRecord):
        if raw.id is None:
            raise InvalidRecord(f"#{position}", "missing 'id'")
        record_id = str(raw.id)
        if raw.name is None:
            raise InvalidRecord(record_id, "missing 'name'")
        for ref in raw.incoming_references:
            if not isinstance(ref, Reference) or ref.referencing_module_id is None:
                raise InvalidRecord(record_id, f"malformed reference {ref!r}")
        return ModuleRecord(
            id=record_id,
            name=str(raw.name),
            incoming_references=tuple(
                Reference(str(ref.referencing_module_id)) for ref in raw.incoming_references
            ),
        )

    if not isinstance(raw, Mapping):
        raise InvalidRecord(f"#{position}", f"expected a mapping, got {type(raw).__name__}")

    raw_id = raw.get("id")
    if raw_id is None:
        raise InvalidRecord(f"#{position}", "missing 'id'")
    record_id = str(raw_id)

    name = raw.get("name")
    if name is None:
        raise InvalidRecord(record_id, "missing 'name'")

    for list_key, id_key in _REFERENCE_KEYS:
        if list_key in raw:
            break
    else:
        raise InvalidRecord(record_id, "missing 'incomingReferences' or 'reasons'")

    entries = raw[list_key]
    if not isinstance(entries, (list, tuple)):
        raise InvalidRecord(record_id, f"'{list_key}' must be a list")

    refs: list[Reference] = []
    for entry in entries:
        if not isinstance(entry, Mapping) or id_key not in entry:
            raise InvalidRecord(record_id, f"reference without '{id_key}': {entry!r}")
        parent = entry[id_key]
        if parent is None:
            continue
        parent = str(parent)
        if (
            list_key == "reasons"
            and parent == record_id
            and entry.get("type") in _SELF_REASON_TYPES
        ):
            continue
        refs.append(Reference(parent))

    return ModuleRecord(id=record_id, name=str(name), incoming_references=tuple(refs))
