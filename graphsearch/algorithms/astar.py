"""A* shortest path between two vertices over an ordered-monoid weight domain.

The open set is a binary heap keyed by ``f = combine(g, h)`` with the same lazy
deletion as :mod:`graphsearch.algorithms.dijkstra`: entries for closed vertices,
or whose ``g`` has since improved, are skipped when popped. Closed vertices are
never reopened.

The first path popped for the target is optimal only if the heuristic is
admissible and consistent. That precondition is not verified.
"""

from __future__ import annotations

from heapq import heappop, heappush
from typing import Any, Callable, List, Set, Tuple

from graphsearch.algorithms.base import neighbor_edges, require_arguments, require_vertex
from graphsearch.exceptions import PathNotFoundError
from graphsearch.graph.base import Graph, VertexID
from graphsearch.logging import get_logger, relaxation_trace_enabled
from graphsearch.paths.path import WeightedPath
from graphsearch.paths.predecessors import PredecessorsList, ShortestDistances, edge_weight
from graphsearch.weights import OrderedMonoid

LOGGER = get_logger(__name__)

#: ``heuristic(vertex, target)`` estimates the remaining cost to ``target``.
Heuristic = Callable[[VertexID, VertexID], Any]


def zero_heuristic(monoid: OrderedMonoid) -> Heuristic:
    """Heuristic that always estimates ``monoid.zero()``; A* then behaves like
    Dijkstra with an early exit at the target."""

    def heuristic(vertex: VertexID, target: VertexID) -> Any:
        return monoid.zero()

    return heuristic


def astar(
    graph: Graph,
    source: VertexID,
    target: VertexID,
    heuristic: Heuristic,
    monoid: OrderedMonoid,
) -> WeightedPath:
    """Find the shortest path from ``source`` to ``target`` with A*.

    Args:
        graph: The graph to search. Directed graphs are followed along
            outbound edges only.
        source: Start vertex.
        target: Goal vertex.
        heuristic: ``h(vertex, target)``, an estimate of the remaining cost in
            the monoid's weight domain.
        monoid: Weight algebra used for every addition and comparison.

    Returns:
        The path found, with its total weight.

    Raises:
        ValueError: If any argument is None, or an explored edge carries no
            weight.
        KeyError: If ``source`` or ``target`` is not in ``graph``.
        PathNotFoundError: If ``target`` is unreachable from ``source``.
    """
    require_arguments(
        graph=graph, source=source, target=target, heuristic=heuristic, monoid=monoid
    )
    require_vertex(graph, source)
    require_vertex(graph, target, role="Target")

    edges_of = neighbor_edges(graph)
    sort_key = monoid.sort_key
    trace = relaxation_trace_enabled(LOGGER)

    # Cost from source along the best known path.
    g_scores = ShortestDistances(monoid)
    g_scores.set_weight(source, monoid.zero())
    # Estimated remaining cost to target.
    h_scores = ShortestDistances(monoid)
    h_scores.set_weight(source, heuristic(source, target))
    # Estimated total cost from source to target through the vertex.
    f_scores = ShortestDistances(monoid)
    f_scores.set_weight(
        source, monoid.combine(g_scores.get_weight(source), h_scores.get_weight(source))
    )

    closed_set: Set[VertexID] = set()
    predecessors = PredecessorsList(graph)

    counter = 0
    open_set: List[Tuple[Any, int, VertexID, Any]] = [
        (sort_key(f_scores.get_weight(source)), counter, source, monoid.zero())
    ]

    while open_set:
        _, _, current, current_g = heappop(open_set)
        if current in closed_set:
            continue
        if monoid.compare(current_g, g_scores.get_weight(current)) != 0:
            continue

        if current == target:
            LOGGER.debug(
                "A* from %s reached %s after closing %d vertices",
                source,
                target,
                len(closed_set),
            )
            return predecessors.build_path(source, target, monoid)

        closed_set.add(current)

        for edge in edges_of(current):
            neighbor = edge.connected_vertex(current)
            if neighbor in closed_set:
                continue

            tentative_g = monoid.combine(current_g, edge_weight(edge))
            if neighbor not in g_scores or monoid.less(
                tentative_g, g_scores.get_weight(neighbor)
            ):
                predecessors.add_predecessor(neighbor, edge)
                g_scores.set_weight(neighbor, tentative_g)
                h_scores.set_weight(neighbor, heuristic(neighbor, target))
                f_scores.set_weight(
                    neighbor, monoid.combine(tentative_g, h_scores.get_weight(neighbor))
                )
                counter += 1
                heappush(
                    open_set,
                    (sort_key(f_scores.get_weight(neighbor)), counter, neighbor, tentative_g),
                )
                if trace:
                    LOGGER.debug(
                        "Relaxed %s -> %s via edge %s: g=%r f=%r",
                        current,
                        neighbor,
                        edge.key,
                        tentative_g,
                        f_scores.get_weight(neighbor),
                    )

    LOGGER.debug(
        "A* from %s exhausted the open set after closing %d vertices",
        source,
        len(closed_set),
    )
    raise PathNotFoundError(source, target, graph)
