"""Single-source shortest-path trees by frontier labeling.

Both variants share one loop:

  1.  Settle the source with weight 0.  Every other vertex enters the
      frontier (in handle order) with the source as predecessor and the
      direct edge weight from the source, or no path.
  2.  Select the FIRST frontier record, in insertion order, that has a
      known weight.  If none has one, stop: the rest is unreachable.
  3.  Settle it: copy the vertex into the result graph together with the
      edge predecessor -> vertex, weighted as in the source graph (the
      edge weight, not the accumulated path weight).
  4.  Relax every frontier record whose vertex is a direct successor of
      the settled vertex.
  5.  Repeat until the frontier is empty.

Selection in step 2 is by arrival order, not minimum weight, so this is
not textbook Dijkstra even for the "optimal" variant.  The variants only
differ in step 4:

  basic    -- overwrite the record with (settled, settled + edge),
              even when that makes the path heavier
  optimal  -- overwrite only when the record has no path yet or the
              new weight is strictly smaller

There is no heap; selection and lookup are linear scans over the
frontier.  The source graph is only read, never modified.
"""
from __future__ import annotations

import logging
from typing import Callable, Generic, TypeVar

from wdgraph.graph.weighted import Graph, VertexNotFoundError
from wdgraph.paths.frontier import Frontier, PathRecord
from wdgraph.paths.trace import (
    format_frontier,
    format_iteration,
    format_weights,
    weight_table,
)

T = TypeVar("T")

log = logging.getLogger(__name__)

# (candidate record, just-settled record, edge weight) -> updated?
Relaxation = Callable[[PathRecord, PathRecord, int], bool]


def relax_overwrite(record: PathRecord, settled: PathRecord, weight: int) -> bool:
    """Basic rule: the latest settled vertex always wins."""
    record.predecessor = settled.vertex
    record.weight = settled.weight + weight  # type: ignore[operator]
    return True


def relax_if_shorter(record: PathRecord, settled: PathRecord, weight: int) -> bool:
    """Edge relaxation: keep the lighter of the two paths."""
    candidate = settled.weight + weight  # type: ignore[operator]
    if record.weight is None or candidate < record.weight:
        record.predecessor = settled.vertex
        record.weight = candidate
        return True
    return False


class ShortestPathEngine(Generic[T]):
    """Builds shortest-path trees over a fixed source graph.

    Usage:
        engine = ShortestPathEngine(graph)
        tree = engine.optimal_shortest_path("Stockholm")
        print(tree)
    """

    __slots__ = ("_graph",)

    def __init__(self, graph: Graph[T]) -> None:
        self._graph = graph

    @property
    def graph(self) -> Graph[T]:
        return self._graph

    def shortest_path(self, source: T, verbose: bool = False) -> Graph[T]:
        """Tree built with the basic (overwrite) relaxation rule.

        Raises VertexNotFoundError if *source* is not in the graph.
        """
        return self._run(source, relax_overwrite, "basic", verbose)

    def optimal_shortest_path(self, source: T, verbose: bool = False) -> Graph[T]:
        """Tree built with strict edge relaxation.

        Raises VertexNotFoundError if *source* is not in the graph.
        """
        return self._run(source, relax_if_shorter, "optimal", verbose)

    def _run(
        self, source: T, relax: Relaxation, variant: str, verbose: bool
    ) -> Graph[T]:
        graph = self._graph
        src = graph.index_of(source)
        if src is None:
            raise VertexNotFoundError(source)

        labels = graph.vertices_view()
        level = logging.INFO if verbose else logging.DEBUG
        tracing = log.isEnabledFor(level)

        result: Graph[T] = Graph()
        result.add_vertex(labels[src])
        settled: dict[int, int] = {src: 0}

        frontier = Frontier()
        for handle, label in enumerate(labels):
            if handle != src:
                frontier.add(
                    PathRecord(handle, src, graph.find_edge(labels[src], label))
                )

        if tracing:
            table = weight_table(len(labels), settled, frontier)
            log.log(level, "Initial phase (%s, source %s)", variant, labels[src])
            log.log(level, "Result graph: %s", result)
            log.log(level, "Weights: %s", format_weights(table))
            log.log(level, "Frontier: %s", format_frontier(frontier, labels))

        iteration = 0
        updates = 0
        while frontier:
            chosen = frontier.first_reachable()
            if chosen is None:
                break
            iteration += 1

            vertex = labels[chosen.vertex]
            pred = labels[chosen.predecessor]
            result.add_vertex(vertex)
            edge = graph.find_edge(pred, vertex)
            result.add_edge(pred, vertex, edge)  # type: ignore[arg-type]
            settled[chosen.vertex] = chosen.weight  # type: ignore[assignment]
            frontier.remove(chosen)

            for target, weight in graph.out_edges(vertex):
                record = frontier.get(graph.index_of(target))  # type: ignore[arg-type]
                if record is not None and relax(record, chosen, weight):
                    updates += 1

            if tracing:
                table = weight_table(len(labels), settled, frontier)
                for line in format_iteration(
                    iteration, chosen, result, frontier, table, labels
                ):
                    log.log(level, line)

        log.debug(
            "%s shortest path from %r: settled %d of %d vertices "
            "in %d iterations, %d relaxations",
            variant, labels[src], len(settled), len(labels), iteration, updates,
        )
        return result


def shortest_path(graph: Graph[T], source: T, verbose: bool = False) -> Graph[T]:
    """Basic-variant tree from *source*.  See ShortestPathEngine."""
    return ShortestPathEngine(graph).shortest_path(source, verbose)


def optimal_shortest_path(
    graph: Graph[T], source: T, verbose: bool = False
) -> Graph[T]:
    """Optimal-variant tree from *source*.  See ShortestPathEngine."""
    return ShortestPathEngine(graph).optimal_shortest_path(source, verbose)
