"""graphsearch: graph traversal and shortest-path search over ordered monoids.

Primary API:
    breadth_first_search(), depth_first_search() - visitor-driven traversal
    dijkstra(), astar(), find_shortest_path() - shortest paths
    prim_spanning_tree(), spanning_forest() - spanning trees
    StrictMultiGraph, StrictMultiDiGraph - NetworkX-backed graphs
    NumericMonoid, MaxMonoid, LexicographicMonoid - weight algebras

Example:
    from graphsearch import FLOAT_WEIGHTS, StrictMultiGraph, find_shortest_path

    g = StrictMultiGraph()
    for v in "ABC":
        g.add_node(v)
    g.add_edge("A", "B", weight=1.0)
    g.add_edge("B", "C", weight=2.0)

    path = find_shortest_path(g, "A", "C", FLOAT_WEIGHTS)
    assert path.vertices == ("A", "B", "C") and path.weight == 3.0
"""

from __future__ import annotations

from graphsearch import logging
from graphsearch.algorithms.astar import astar, zero_heuristic
from graphsearch.algorithms.dijkstra import ShortestPaths, dijkstra
from graphsearch.algorithms.prim import prim_spanning_tree, spanning_forest
from graphsearch.algorithms.shortest_path import find_shortest_path
from graphsearch.algorithms.visit import (
    GraphVisitHandler,
    VertexSequenceVisitor,
    VisitGraphBuilder,
    VisitState,
    breadth_first_search,
    depth_first_search,
)
from graphsearch.config import SEARCH_CONFIG, SearchConfig
from graphsearch.exceptions import PathNotFoundError
from graphsearch.graph.base import DirectedGraph, Edge, Graph, WeightedEdge
from graphsearch.graph.convert import from_networkx, to_networkx
from graphsearch.graph.spanning_tree import SpanningTree
from graphsearch.graph.strict_multigraph import StrictMultiDiGraph, StrictMultiGraph
from graphsearch.paths.path import Path, WeightedPath
from graphsearch.paths.predecessors import PredecessorsList, ShortestDistances
from graphsearch.weights import (
    DECIMAL_WEIGHTS,
    FLOAT_WEIGHTS,
    INTEGER_WEIGHTS,
    LexicographicMonoid,
    MaxMonoid,
    NumericMonoid,
    OrderedMonoid,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Graph model
    "Graph",
    "DirectedGraph",
    "Edge",
    "WeightedEdge",
    "StrictMultiGraph",
    "StrictMultiDiGraph",
    "SpanningTree",
    "from_networkx",
    "to_networkx",
    # Weights
    "OrderedMonoid",
    "NumericMonoid",
    "MaxMonoid",
    "LexicographicMonoid",
    "INTEGER_WEIGHTS",
    "FLOAT_WEIGHTS",
    "DECIMAL_WEIGHTS",
    # Paths
    "Path",
    "WeightedPath",
    "PredecessorsList",
    "ShortestDistances",
    # Traversal
    "VisitState",
    "GraphVisitHandler",
    "VertexSequenceVisitor",
    "VisitGraphBuilder",
    "breadth_first_search",
    "depth_first_search",
    # Search
    "ShortestPaths",
    "dijkstra",
    "astar",
    "zero_heuristic",
    "find_shortest_path",
    "prim_spanning_tree",
    "spanning_forest",
    # Errors / config
    "PathNotFoundError",
    "SearchConfig",
    "SEARCH_CONFIG",
    "logging",
]
