"""Search-time bookkeeping: best-known distances and predecessor edges.

Both structures are created fresh for every search call and are owned by it.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, Optional, Tuple, Union, overload

from graphsearch.exceptions import PathNotFoundError
from graphsearch.graph.base import Edge, Graph, VertexID, WeightedEdge
from graphsearch.paths.path import Path, WeightedPath
from graphsearch.weights import OrderedMonoid


def edge_weight(edge: Edge) -> Any:
    """Return the weight of ``edge``.

    Raises:
        ValueError: If the edge carries no weight.
    """
    if not isinstance(edge, WeightedEdge):
        raise ValueError(f"Edge {edge} carries no weight.")
    return edge.weight


class ShortestDistances:
    """Best-known weight per vertex; a vertex absent from the map is unset.

    Also serves as the priority source for the search queues: ``sort_key``
    wraps a vertex's weight so that heap order follows the monoid's order.
    """

    def __init__(self, monoid: OrderedMonoid) -> None:
        self._monoid = monoid
        self._distances: Dict[VertexID, Any] = {}

    def get_weight(self, vertex: VertexID) -> Optional[Any]:
        """Return the weight recorded for ``vertex``, or None when unset."""
        return self._distances.get(vertex)

    def set_weight(self, vertex: VertexID, weight: Any) -> None:
        self._distances[vertex] = weight

    def sort_key(self, vertex: VertexID) -> Any:
        return self._monoid.sort_key(self._distances[vertex])

    def compare(self, vertex_1: VertexID, vertex_2: VertexID) -> int:
        """Compare the recorded weights of two vertices (both must be set)."""
        return self._monoid.compare(self._distances[vertex_1], self._distances[vertex_2])

    def as_dict(self) -> Dict[VertexID, Any]:
        return dict(self._distances)

    def __contains__(self, vertex: Any) -> bool:
        return vertex in self._distances

    def __iter__(self) -> Iterator[VertexID]:
        return iter(self._distances)

    def __len__(self) -> int:
        return len(self._distances)


class PredecessorsList:
    """How each vertex was best reached: vertex -> (predecessor, edge).

    Entries are overwritten on every improving relaxation, so the map always
    forms a tree rooted at the search source and paths are rebuilt by walking
    it backward.
    """

    def __init__(self, graph: Graph) -> None:
        self._graph = graph
        self._predecessors: Dict[VertexID, Tuple[VertexID, Edge]] = {}

    def add_predecessor(self, tail: VertexID, edge: Edge) -> None:
        """Record that ``tail`` is best reached through ``edge``."""
        self._predecessors[tail] = (edge.connected_vertex(tail), edge)

    def get_predecessor(self, vertex: VertexID) -> Optional[Tuple[VertexID, Edge]]:
        return self._predecessors.get(vertex)

    def __contains__(self, vertex: Any) -> bool:
        return vertex in self._predecessors

    def __len__(self) -> int:
        return len(self._predecessors)

    def is_empty(self) -> bool:
        return not self._predecessors

    @overload
    def build_path(
        self, source: VertexID, target: VertexID, monoid: None = None
    ) -> Path: ...

    @overload
    def build_path(
        self, source: VertexID, target: VertexID, monoid: OrderedMonoid
    ) -> WeightedPath: ...

    def build_path(
        self,
        source: VertexID,
        target: VertexID,
        monoid: Optional[OrderedMonoid] = None,
    ) -> Union[Path, WeightedPath]:
        """Materialize the path from ``source`` to ``target``.

        Walks the predecessor chain backward from ``target`` and reverses it.
        With a ``monoid`` the result is a :class:`WeightedPath` whose weight
        is accumulated in forward path order, so non-commutative monoids are
        handled correctly.

        Args:
            source: Path start.
            target: Path end.
            monoid: Weight algebra; omit it for an unweighted :class:`Path`.

        Returns:
            The path from ``source`` to ``target``.

        Raises:
            PathNotFoundError: If the chain from ``target`` never reaches
                ``source``.
        """
        vertices = [target]
        edges = []
        vertex = target
        while vertex != source:
            entry = self._predecessors.get(vertex)
            if entry is None:
                raise PathNotFoundError(source, target, self._graph)
            vertex, edge = entry
            vertices.append(vertex)
            edges.append(edge)

        vertices.reverse()
        edges.reverse()

        if monoid is None:
            return Path(tuple(vertices), tuple(edges))
        weight = monoid.sum(edge_weight(edge) for edge in edges)
        return WeightedPath(tuple(vertices), tuple(edges), weight)
