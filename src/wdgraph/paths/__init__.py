"""Single-source shortest-path trees over a weighted Graph."""

from wdgraph.paths.engine import (
    ShortestPathEngine,
    optimal_shortest_path,
    relax_if_shorter,
    relax_overwrite,
    shortest_path,
)
from wdgraph.paths.frontier import Frontier, PathRecord

__all__ = [
    "Frontier",
    "PathRecord",
    "ShortestPathEngine",
    "optimal_shortest_path",
    "relax_if_shorter",
    "relax_overwrite",
    "shortest_path",
]
