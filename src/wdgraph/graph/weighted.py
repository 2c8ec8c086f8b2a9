"""Weighted directed graph addressed by vertex label.

The graph composes a VertexTable (labels -> dense integer handles) and
an AdjacencyIndex (per-handle sorted edge sequences).  Callers only
ever see labels; handles are an internal detail that shifts whenever a
vertex is removed.

Every operation that names a vertex looks all of its labels up before
touching anything, so a VertexNotFoundError leaves the graph exactly as
it was.
"""
from __future__ import annotations

from typing import Generic, Iterable, Iterator, TypeVar

from wdgraph.graph.adjacency import AdjacencyIndex
from wdgraph.graph.vertex_table import DEFAULT_CAPACITY, VertexTable

T = TypeVar("T")

# public "no edge" value of edge_weight(); find_edge() returns None instead
NO_EDGE = -1


class VertexNotFoundError(ValueError):
    """Raised when an operation names a vertex the graph does not hold."""

    def __init__(self, vertex: object) -> None:
        self.vertex = vertex
        super().__init__(f"{vertex!r} was not found")


class Graph(Generic[T]):
    """Directed graph with integer edge weights and value-equal labels.

    At most one edge exists per ordered pair of vertices.  Outgoing
    edges of a vertex are kept sorted ascending by weight, so
    ``neighbours`` and ``out_edges`` list the cheapest edge first.
    """

    __slots__ = ("_table", "_adj")

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._table: VertexTable[T] = VertexTable(capacity)
        self._adj = AdjacencyIndex()

    @classmethod
    def from_vertices(cls, vertices: Iterable[T]) -> Graph[T]:
        """Build an edgeless graph sized exactly for *vertices*."""
        labels = list(vertices)
        g: Graph[T] = cls(capacity=len(labels))
        for v in labels:
            g.add_vertex(v)
        return g

    def _require(self, vertex: T) -> int:
        handle = self._table.index_of(vertex)
        if handle is None:
            raise VertexNotFoundError(vertex)
        return handle

    # ---- vertices --------------------------------------------------------

    def add_vertex(self, vertex: T) -> None:
        """Add *vertex* unless an equal label is already present."""
        if vertex not in self._table:
            self._table.add(vertex)
            self._adj.add_sequence()

    def remove_vertex(self, vertex: T) -> None:
        """Remove *vertex* and every edge into or out of it.

        No-op if the vertex is absent.  Handles above the removed one
        shift down by one, in the table and in every edge target.
        """
        handle = self._table.index_of(vertex)
        if handle is None:
            return
        self._adj.drop(handle)
        self._table.remove_at(handle)

    def contains_vertex(self, vertex: T) -> bool:
        return vertex in self._table

    def index_of(self, vertex: T) -> int | None:
        """Current handle of *vertex*, or None.  Invalidated by removals."""
        return self._table.index_of(vertex)

    def vertices_view(self) -> list[T]:
        """Copy of the labels in handle order."""
        return self._table.view()

    def clear(self) -> None:
        """Drop every vertex and edge."""
        self._table.clear()
        self._adj.clear()

    # ---- edges -----------------------------------------------------------

    def add_edge(self, v1: T, v2: T, weight: int) -> None:
        """Add edge v1 -> v2, replacing any existing one.

        A self-loop is ignored, but only when *v1* and *v2* are the same
        object; two distinct but equal labels are looked up like any
        other pair.
        """
        if v1 is v2:
            return
        h1 = self._require(v1)
        h2 = self._require(v2)
        self._adj.remove(h1, h2)
        self._adj.insert(h1, h2, weight)

    def remove_edge(self, v1: T, v2: T) -> None:
        """Remove edge v1 -> v2 if it exists."""
        h1 = self._require(v1)
        h2 = self._require(v2)
        self._adj.remove(h1, h2)

    def remove_edges(self, vertex: T) -> None:
        """Remove every outgoing edge of *vertex*."""
        self._adj.clear_sequence(self._require(vertex))

    def has_edge(self, v1: T, v2: T) -> bool:
        return self.find_edge(v1, v2) is not None

    def find_edge(self, v1: T, v2: T) -> int | None:
        """Weight of edge v1 -> v2, or None if there is no such edge."""
        h1 = self._require(v1)
        h2 = self._require(v2)
        return self._adj.find(h1, h2)

    def edge_weight(self, v1: T, v2: T) -> int:
        """Weight of edge v1 -> v2, or NO_EDGE (-1).

        -1 is also a legal weight; use find_edge when that matters.
        """
        weight = self.find_edge(v1, v2)
        return NO_EDGE if weight is None else weight

    def neighbours(self, vertex: T) -> list[T]:
        """Successors of *vertex*, cheapest edge first."""
        return [target for target, _ in self.out_edges(vertex)]

    def out_edges(self, vertex: T) -> list[tuple[T, int]]:
        """(successor, weight) pairs of *vertex*, cheapest edge first."""
        handle = self._require(vertex)
        return [
            (self._table.label(target), weight)
            for target, weight in self._adj.iter_sequence(handle)
        ]

    def edges(self) -> Iterator[tuple[T, T, int]]:
        """Every edge as (source, target, weight), grouped by source."""
        for source, label in enumerate(self._table.view()):
            for target, weight in self._adj.iter_sequence(source):
                yield label, self._table.label(target), weight

    # ---- size ------------------------------------------------------------

    def size(self) -> int:
        return len(self._table)

    def is_empty(self) -> bool:
        return self._table.is_empty()

    @property
    def edge_count(self) -> int:
        return self._adj.edge_count

    @property
    def capacity(self) -> int:
        return self._table.capacity

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, vertex: object) -> bool:
        return self.contains_vertex(vertex)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self.size()

    def __str__(self) -> str:
        vertices = ", ".join(str(v) for v in self._table.view())
        edges = ", ".join(f"{{{s}, {t}, {w}}}" for s, t, w in self.edges())
        return f"Vertices: {{{vertices}}}, Edges: {{{edges}}}"

    def __repr__(self) -> str:
        return f"Graph(vertices={self.size()}, edges={self.edge_count})"
