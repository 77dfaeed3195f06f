"""Helpers shared by the traversal and search algorithms."""

from __future__ import annotations

from typing import Any, Callable, Iterable

from graphsearch.graph.base import DirectedGraph, Edge, Graph, VertexID

#: Returns the edges a search may follow out of a vertex.
NeighborEdges = Callable[[VertexID], Iterable[Edge]]


def neighbor_edges(graph: Graph) -> NeighborEdges:
    """Resolve once which incidence query a search should use.

    Directed graphs are explored along outbound edges only; every other graph
    along all incident edges.
    """
    if isinstance(graph, DirectedGraph):
        return graph.outbound_edges
    return graph.incident_edges


def require_arguments(**arguments: Any) -> None:
    """Fail fast on missing arguments.

    Raises:
        ValueError: If any keyword argument is None.
    """
    for name, value in arguments.items():
        if value is None:
            raise ValueError(f"Argument '{name}' must not be None.")


def require_vertex(graph: Graph, vertex: VertexID, role: str = "Source") -> None:
    """Raises KeyError if ``vertex`` is not in ``graph``."""
    if not graph.has_vertex(vertex):
        raise KeyError(f"{role} node '{vertex}' is not in the graph.")
