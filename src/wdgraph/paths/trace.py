"""Text rendering of shortest-path state for the verbose trace.

Handles are translated back to labels using a snapshot of the source
graph's vertices, so the trace reads like the graph it came from.
Unknown weights print as -1, matching ``Graph.edge_weight``.
"""
from __future__ import annotations

from typing import Mapping, Sequence

from wdgraph.graph.weighted import NO_EDGE
from wdgraph.paths.frontier import Frontier, PathRecord


def _weight(w: int | None) -> str:
    return str(NO_EDGE if w is None else w)


def format_record(record: PathRecord, labels: Sequence[object]) -> str:
    """``(vertex, predecessor, weight)`` using labels."""
    return (
        f"({labels[record.vertex]}, {labels[record.predecessor]}, "
        f"{_weight(record.weight)})"
    )


def format_frontier(frontier: Frontier, labels: Sequence[object]) -> str:
    return "[" + ", ".join(format_record(r, labels) for r in frontier) + "]"


def weight_table(
    size: int, settled: Mapping[int, int], frontier: Frontier
) -> list[int | None]:
    """Best known path weight per handle: settled, candidate, or None."""
    table: list[int | None] = [None] * size
    for handle, w in settled.items():
        table[handle] = w
    for r in frontier:
        table[r.vertex] = r.weight
    return table


def format_weights(table: Sequence[int | None]) -> str:
    return ", ".join(_weight(w) for w in table)


def format_iteration(
    iteration: int,
    chosen: PathRecord,
    result: object,
    frontier: Frontier,
    table: Sequence[int | None],
    labels: Sequence[object],
) -> list[str]:
    """Trace lines for one settle-and-relax step."""
    return [
        f"Iteration: {iteration}",
        f"Settled: {format_record(chosen, labels)}",
        f"Result graph: {result}",
        f"Frontier: {format_frontier(frontier, labels)}",
        f"Weights: {format_weights(table)}",
    ]
