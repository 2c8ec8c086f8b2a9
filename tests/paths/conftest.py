"""Shared fixtures for shortest-path tests."""
from __future__ import annotations

import pytest

from wdgraph.demo import city_graph, letter_graph
from wdgraph.graph.weighted import Graph


def build(vertices: str, edges: list[tuple[str, str, int]]) -> Graph[str]:
    """Graph over single-letter vertices, added in the order given."""
    g = Graph.from_vertices(list(vertices))
    for src, dst, w in edges:
        g.add_edge(src, dst, w)
    return g


@pytest.fixture
def make_graph():
    return build


@pytest.fixture
def cities() -> Graph[str]:
    return city_graph()


@pytest.fixture
def letters() -> Graph[str]:
    return letter_graph()


@pytest.fixture
def detour_graph() -> Graph[str]:
    """S -> A (10) direct, or S -> B (1) -> A (1).  B is added before A."""
    return build("SBA", [("S", "A", 10), ("S", "B", 1), ("B", "A", 1)])


@pytest.fixture
def early_arrival_graph() -> Graph[str]:
    """S -> A (5), S -> B (1), B -> A (1).  A is added before B."""
    return build("SAB", [("S", "A", 5), ("S", "B", 1), ("B", "A", 1)])


@pytest.fixture
def divergent_graph() -> Graph[str]:
    """
    S -> A (1) -> C (1)
    S -> B (1) -> C (10)

    A settles before B, so B offers C a heavier path after A already
    offered a light one.
    """
    return build(
        "SABC",
        [("S", "A", 1), ("S", "B", 1), ("A", "C", 1), ("B", "C", 10)],
    )


@pytest.fixture
def partly_unreachable_graph() -> Graph[str]:
    """S -> A (3); B -> S (1); C isolated."""
    return build("SABC", [("S", "A", 3), ("B", "S", 1)])
