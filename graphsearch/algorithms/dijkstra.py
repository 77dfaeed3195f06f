"""Single-source shortest paths (Dijkstra) over an ordered-monoid weight domain.

Notes:
    The priority queue is a binary heap without decrease-key. Every improving
    relaxation pushes a new entry; an entry whose pushed distance no longer
    equals the live distance of its vertex is discarded when popped. Since a
    vertex is only pushed on a strict improvement, exactly one live entry per
    vertex is ever settled.

    Heap entries carry an insertion counter after the distance key, so vertices
    are never compared and equal distances are settled first-in, first-out.
"""

from __future__ import annotations

from heapq import heappop, heappush
from typing import Any, Dict, List, Optional, Tuple

from graphsearch.algorithms.base import neighbor_edges, require_arguments, require_vertex
from graphsearch.exceptions import PathNotFoundError
from graphsearch.graph.base import Graph, VertexID
from graphsearch.logging import get_logger, relaxation_trace_enabled
from graphsearch.paths.path import WeightedPath
from graphsearch.paths.predecessors import PredecessorsList, ShortestDistances, edge_weight
from graphsearch.weights import OrderedMonoid

LOGGER = get_logger(__name__)


class ShortestPaths:
    """Result of a single-source search: distances plus predecessors.

    Paths are materialized on demand from the predecessor map.

    Attributes:
        graph: The searched graph.
        source: The search source.
        monoid: The weight algebra used by the search.
        distances: Best distance per reached vertex.
        predecessors: Best predecessor edge per reached vertex.
    """

    def __init__(
        self,
        graph: Graph,
        source: VertexID,
        monoid: OrderedMonoid,
        distances: ShortestDistances,
        predecessors: PredecessorsList,
    ) -> None:
        self.graph = graph
        self.source = source
        self.monoid = monoid
        self.distances = distances
        self.predecessors = predecessors

    def __contains__(self, vertex: Any) -> bool:
        return vertex in self.distances

    def reachable(self) -> List[VertexID]:
        """Vertices reached by the search, in the order they were first reached."""
        return list(self.distances)

    def distance_to(self, target: VertexID) -> Any:
        """Return the shortest distance from the source to ``target``.

        Raises:
            PathNotFoundError: If ``target`` was not reached.
        """
        if target not in self.distances:
            raise PathNotFoundError(self.source, target, self.graph)
        return self.distances.get_weight(target)

    def path_to(self, target: VertexID) -> WeightedPath:
        """Return the shortest path from the source to ``target``.

        Raises:
            PathNotFoundError: If ``target`` was not reached.
        """
        return self.predecessors.build_path(self.source, target, self.monoid)


def dijkstra(
    graph: Graph,
    source: VertexID,
    monoid: OrderedMonoid,
    target: Optional[VertexID] = None,
) -> ShortestPaths:
    """Compute shortest paths from ``source``.

    Edge weights must be non-negative with respect to ``monoid`` (the order
    must be monotonic under ``combine``); this is not checked.

    Args:
        graph: The graph to search. Directed graphs are followed along
            outbound edges only.
        source: The source vertex.
        monoid: Weight algebra used for every addition and comparison.
        target: Optional destination. When given, the search stops as soon as
            ``target`` is settled; distances of vertices not yet settled at
            that point may be larger than optimal.

    Returns:
        The distances and predecessors of every reached vertex.

    Raises:
        ValueError: If ``graph``, ``source`` or ``monoid`` is None, or an
            explored edge carries no weight.
        KeyError: If ``source`` (or ``target``, when given) is not in ``graph``.
    """
    require_arguments(graph=graph, source=source, monoid=monoid)
    require_vertex(graph, source)
    if target is not None:
        require_vertex(graph, target, role="Target")

    edges_of = neighbor_edges(graph)
    sort_key = monoid.sort_key
    trace = relaxation_trace_enabled(LOGGER)

    distances = ShortestDistances(monoid)
    predecessors = PredecessorsList(graph)
    distances.set_weight(source, monoid.zero())

    counter = 0
    min_pq: List[Tuple[Any, int, VertexID, Any]] = [
        (sort_key(monoid.zero()), counter, source, monoid.zero())
    ]
    settled = 0
    stale = 0

    while min_pq:
        _, _, vertex, vertex_distance = heappop(min_pq)
        if monoid.compare(vertex_distance, distances.get_weight(vertex)) != 0:
            stale += 1
            continue
        settled += 1

        if target is not None and vertex == target:
            break

        for edge in edges_of(vertex):
            neighbor = edge.connected_vertex(vertex)
            new_distance = monoid.combine(vertex_distance, edge_weight(edge))
            if neighbor not in distances or monoid.less(
                new_distance, distances.get_weight(neighbor)
            ):
                distances.set_weight(neighbor, new_distance)
                predecessors.add_predecessor(neighbor, edge)
                counter += 1
                heappush(min_pq, (sort_key(new_distance), counter, neighbor, new_distance))
                if trace:
                    LOGGER.debug(
                        "Relaxed %s -> %s via edge %s: %r", vertex, neighbor, edge.key, new_distance
                    )

    LOGGER.debug(
        "Dijkstra from %s settled %d vertices, skipped %d stale entries",
        source,
        settled,
        stale,
    )
    return ShortestPaths(graph, source, monoid, distances, predecessors)
