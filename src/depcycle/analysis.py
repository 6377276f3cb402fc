"""Cycle detection over a module graph (strongly connected components)."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from depcycle.model import CycleReport, DetectOptions, Graph, NameIndex

logger = logging.getLogger(__name__)

TRACE_SEPARATOR = " -> "

_PATH_SEPARATORS = re.compile(r"[\\/]")


def strongly_connected_components(graph: Graph) -> list[list[str]]:
    """Return every strongly connected component of *graph*, singletons included.

    Iterative Tarjan: roots are taken in key order and edges in stored
    order, so the result is deterministic for a given graph.  Components
    come out in completion order; members are listed in DFS discovery
    order.  Edge targets that are not keys of *graph* are skipped.
    """
    index: dict[str, int] = {}
    lowlink: dict[str, int] = {}
    on_stack: set[str] = set()
    stack: list[str] = []
    sccs: list[list[str]] = []
    counter = 0

    for root in graph:
        if root in index:
            continue

        index[root] = lowlink[root] = counter
        counter += 1
        stack.append(root)
        on_stack.add(root)
        work = [(root, iter(graph[root]))]

        while work:
            v, edges = work[-1]
            for w in edges:
                if w not in graph:
                    continue
                if w not in index:
                    index[w] = lowlink[w] = counter
                    counter += 1
                    stack.append(w)
                    on_stack.add(w)
                    work.append((w, iter(graph[w])))
                    break
                if w in on_stack:
                    lowlink[v] = min(lowlink[v], index[w])
            else:
                work.pop()
                if work:
                    parent = work[-1][0]
                    lowlink[parent] = min(lowlink[parent], lowlink[v])

                if lowlink[v] == index[v]:
                    scc: list[str] = []
                    while True:
                        w = stack.pop()
                        on_stack.discard(w)
                        scc.append(w)
                        if w == v:
                            break
                    scc.reverse()
                    sccs.append(scc)

    return sccs


def find_cycles(graph: Graph) -> list[list[str]]:
    """Return the components of *graph* that contain a cycle.

    That is every component with two or more members, plus single nodes
    with a self-edge.
    """
    return [
        scc
        for scc in strongly_connected_components(graph)
        if len(scc) > 1 or scc[0] in graph[scc[0]]
    ]


def display_name(module_id: str, name_index: NameIndex) -> str:
    return name_index.get(module_id, module_id)


def is_vendored_name(name: str, vendor_dirs: Sequence[str]) -> bool:
    """Return True if any path segment of *name* is one of *vendor_dirs*.

    Matching is case-insensitive.  Only the resource part of a webpack
    request is inspected (``loader!loader!resource``), so a project file
    processed by a loader from node_modules is not treated as vendored.
    """
    resource = name.rsplit("!", 1)[-1]
    wanted = {d.lower() for d in vendor_dirs}
    return any(seg.lower() in wanted for seg in _PATH_SEPARATORS.split(resource))


def is_excluded_module(
    module_id: str,
    name_index: NameIndex,
    options: DetectOptions,
) -> bool:
    """Return True if *module_id* alone should not trigger a cycle report."""
    if options.include_vendored_modules:
        return False
    name = display_name(module_id, name_index)
    if options.is_excluded is not None:
        return options.is_excluded(module_id, name)
    return is_vendored_name(name, options.vendor_dirs)


def format_trace(member_ids: Sequence[str], name_index: NameIndex) -> str:
    """Render ``A -> B -> C -> A`` for *member_ids*.

    Raises :class:`ValueError` when *member_ids* is empty.
    """
    if not member_ids:
        raise ValueError("cannot format a trace for an empty cycle")
    closed = [*member_ids, member_ids[0]]
    return TRACE_SEPARATOR.join(display_name(i, name_index) for i in closed)


def detect(
    graph: Graph,
    name_index: NameIndex,
    options: DetectOptions | None = None,
) -> list[CycleReport]:
    """Return one :class:`CycleReport` per cycle in *graph*.

    A cycle is dropped only when every member is excluded by the vendored
    policy; otherwise it is reported with all its members.
    """
    options = options or DetectOptions()
    reports: list[CycleReport] = []

    for scc in find_cycles(graph):
        if all(is_excluded_module(m, name_index, options) for m in scc):
            logger.debug("Skipping vendored cycle of %d modules", len(scc))
            continue
        reports.append(
            CycleReport(member_ids=tuple(scc), formatted_trace=format_trace(scc, name_index))
        )

    logger.debug("Cycles reported: %d", len(reports))
    return reports
