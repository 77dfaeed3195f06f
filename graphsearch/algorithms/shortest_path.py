"""Single entry point choosing between Dijkstra and A*."""

from __future__ import annotations

from typing import Optional

from graphsearch.algorithms.astar import Heuristic, astar
from graphsearch.algorithms.base import require_arguments
from graphsearch.algorithms.dijkstra import dijkstra
from graphsearch.graph.base import Graph, VertexID
from graphsearch.paths.path import WeightedPath
from graphsearch.weights import OrderedMonoid


def find_shortest_path(
    graph: Graph,
    source: VertexID,
    target: VertexID,
    monoid: OrderedMonoid,
    heuristic: Optional[Heuristic] = None,
) -> WeightedPath:
    """Return the shortest path from ``source`` to ``target``.

    Uses A* when a ``heuristic`` is supplied and Dijkstra (stopping once the
    target is settled) otherwise.

    Raises:
        ValueError: If a required argument is None.
        KeyError: If ``source`` or ``target`` is not in ``graph``.
        PathNotFoundError: If ``target`` is unreachable from ``source``.
    """
    require_arguments(graph=graph, source=source, target=target, monoid=monoid)
    if heuristic is not None:
        return astar(graph, source, target, heuristic, monoid)
    return dijkstra(graph, source, monoid, target=target).path_to(target)
