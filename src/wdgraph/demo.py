"""Small example graphs used by the CLI demo and the tests."""
from __future__ import annotations

from typing import Callable

from wdgraph.graph.weighted import Graph


def city_graph() -> Graph[str]:
    """Road distances (km) between five Swedish cities."""
    g: Graph[str] = Graph()
    for city in ["Stockholm", "Göteborg", "Malmö", "Uppsala", "Västerås"]:
        g.add_vertex(city)
    for src, dst, km in [
        ("Stockholm", "Uppsala", 70),
        ("Stockholm", "Malmö", 613),
        ("Göteborg", "Uppsala", 453),
        ("Göteborg", "Stockholm", 471),
        ("Göteborg", "Västerås", 376),
        ("Uppsala", "Göteborg", 452),
        ("Uppsala", "Malmö", 679),
        ("Västerås", "Malmö", 599),
    ]:
        g.add_edge(src, dst, km)
    return g


def letter_graph() -> Graph[str]:
    """Five lettered vertices A..E with eight edges."""
    g: Graph[str] = Graph()
    for v in "ABCDE":
        g.add_vertex(v)
    for src, dst, w in [
        ("A", "C", 20),
        ("A", "D", 40),
        ("B", "D", 20),
        ("B", "A", 30),
        ("B", "E", 50),
        ("D", "C", 10),
        ("D", "B", 70),
        ("E", "C", 90),
    ]:
        g.add_edge(src, dst, w)
    return g


# name -> (builder, default source)
DEMO_GRAPHS: dict[str, tuple[Callable[[], Graph[str]], str]] = {
    "cities": (city_graph, "Stockholm"),
    "letters": (letter_graph, "A"),
}
