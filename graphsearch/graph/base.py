"""Read-only graph capability set consumed by the algorithms.

Algorithms only ever talk to a graph through :class:`Graph` and
:class:`DirectedGraph`. Any object implementing these methods can be searched;
:mod:`graphsearch.graph.strict_multigraph` provides NetworkX-backed
implementations.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterable, List, Tuple

VertexID = Hashable
EdgeID = Hashable
AttrDict = Dict[str, Any]


@dataclass(frozen=True)
class Edge:
    """An edge between two vertices.

    For undirected graphs ``source`` and ``target`` are simply the endpoints in
    the order they were given when the edge was added.

    Attributes:
        source: First endpoint (tail of a directed edge).
        target: Second endpoint (head of a directed edge).
        key: Edge identifier, unique within its graph.
    """

    source: VertexID
    target: VertexID
    key: EdgeID

    def endpoints(self) -> Tuple[VertexID, VertexID]:
        """Return ``(source, target)``."""
        return self.source, self.target

    def connected_vertex(self, vertex: VertexID) -> VertexID:
        """Return the endpoint opposite to ``vertex``.

        Args:
            vertex: One of the edge endpoints.

        Returns:
            The other endpoint (``vertex`` itself for a self-loop).

        Raises:
            ValueError: If ``vertex`` is not an endpoint of this edge.
        """
        if vertex == self.source:
            return self.target
        if vertex == self.target:
            return self.source
        raise ValueError(f"Vertex '{vertex}' is not an endpoint of edge {self}.")


@dataclass(frozen=True)
class WeightedEdge(Edge):
    """An edge carrying a weight of arbitrary type.

    The weight does not take part in equality or hashing, so unhashable weight
    values (lists, dicts) are fine.
    """

    weight: Any = field(default=None, compare=False)


class Graph(abc.ABC):
    """Read-only view of a graph: vertices, edges and incidence."""

    @abc.abstractmethod
    def get_vertices(self) -> List[VertexID]:
        """Return all vertices in insertion order."""
        ...

    @abc.abstractmethod
    def get_edges(self) -> Dict[EdgeID, Edge]:
        """Return all edges keyed by edge id, in insertion order."""
        ...

    @abc.abstractmethod
    def has_vertex(self, vertex: VertexID) -> bool:
        """Return True if ``vertex`` belongs to the graph."""
        ...

    @abc.abstractmethod
    def incident_edges(self, vertex: VertexID) -> Iterable[Edge]:
        """Return every edge touching ``vertex``.

        The order is stable for an unchanged graph; traversal order depends on
        it.
        """
        ...

    def get_endpoints(self, edge: Edge) -> Tuple[VertexID, VertexID]:
        """Return the two endpoints of ``edge``."""
        return edge.endpoints()


class DirectedGraph(Graph):
    """A graph whose edges have a direction."""

    @abc.abstractmethod
    def outbound_edges(self, vertex: VertexID) -> Iterable[Edge]:
        """Return the edges leaving ``vertex``."""
        ...

    @abc.abstractmethod
    def inbound_edges(self, vertex: VertexID) -> Iterable[Edge]:
        """Return the edges entering ``vertex``."""
        ...
