"""Shared fixtures for graph storage tests."""
from __future__ import annotations

import pytest

from wdgraph.graph.weighted import Graph


@pytest.fixture
def empty_graph() -> Graph[str]:
    return Graph()


@pytest.fixture
def abc_graph() -> Graph[str]:
    """
    A -> B (5)   A -> C (2)   B -> C (1)   C -> A (7)
    """
    g: Graph[str] = Graph()
    for v in "ABC":
        g.add_vertex(v)
    for src, dst, w in [("A", "B", 5), ("A", "C", 2), ("B", "C", 1), ("C", "A", 7)]:
        g.add_edge(src, dst, w)
    return g


@pytest.fixture
def chain_graph() -> Graph[str]:
    """V0 -> V1 -> ... -> V5, edge i -> i+1 weighted i, plus V5 -> V0 (9)."""
    g: Graph[str] = Graph()
    names = [f"V{i}" for i in range(6)]
    for n in names:
        g.add_vertex(n)
    for i in range(5):
        g.add_edge(names[i], names[i + 1], i)
    g.add_edge("V5", "V0", 9)
    return g
