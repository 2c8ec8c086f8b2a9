"""Label-addressed weighted directed graph storage."""

from wdgraph.graph.adjacency import AdjacencyIndex
from wdgraph.graph.vertex_table import (
    DEFAULT_CAPACITY,
    GROWTH_PERCENT,
    VertexTable,
    grown_capacity,
)
from wdgraph.graph.weighted import NO_EDGE, Graph, VertexNotFoundError

__all__ = [
    "AdjacencyIndex",
    "DEFAULT_CAPACITY",
    "GROWTH_PERCENT",
    "Graph",
    "NO_EDGE",
    "VertexNotFoundError",
    "VertexTable",
    "grown_capacity",
]
