"""Visitor-driven breadth-first and depth-first traversal.

Both searches call back into a :class:`GraphVisitHandler` and interpret the
:class:`VisitState` it returns after every callback:

- ``CONTINUE``: carry on.
- ``SKIP_CHILDREN``: from ``discover_vertex``, do not expand that vertex; from
  ``discover_edge``, do not follow that edge (its far end stays undiscovered
  and may still be reached through another edge).
- ``STOP``: halt immediately. Only ``finish_graph`` and ``on_completed`` are
  called afterwards, and the search returns normally.

Exploration follows the incidence order reported by the graph (outbound edges
for directed graphs), so for a given graph the visit order is deterministic.
"""

from __future__ import annotations

from collections import deque
from enum import IntEnum
from typing import Any, Deque, List, Optional, Set, Tuple, Union

from graphsearch.algorithms.base import neighbor_edges, require_arguments, require_vertex
from graphsearch.graph.base import DirectedGraph, Edge, Graph, VertexID, WeightedEdge
from graphsearch.graph.strict_multigraph import StrictMultiDiGraph, StrictMultiGraph
from graphsearch.logging import get_logger

LOGGER = get_logger(__name__)


class VisitState(IntEnum):
    """Signal returned by visitor callbacks."""

    CONTINUE = 1
    SKIP_CHILDREN = 2
    STOP = 3


class GraphVisitHandler:
    """Base visitor; every callback continues by default.

    Subclasses override the callbacks they care about and ``on_completed`` to
    produce the value returned by the search.
    """

    def discover_graph(self, graph: Graph) -> None:
        """Called once before the traversal starts."""

    def discover_vertex(self, vertex: VertexID) -> VisitState:
        return VisitState.CONTINUE

    def discover_edge(self, head: VertexID, edge: Edge, tail: VertexID) -> VisitState:
        """Called before ``edge`` is followed from ``head`` to undiscovered ``tail``."""
        return VisitState.CONTINUE

    def finish_edge(self, head: VertexID, edge: Edge, tail: VertexID) -> VisitState:
        return VisitState.CONTINUE

    def finish_vertex(self, vertex: VertexID) -> VisitState:
        return VisitState.CONTINUE

    def finish_graph(self, graph: Graph) -> None:
        """Called once when the traversal ends, stopped or not."""

    def on_completed(self) -> Any:
        """Return the traversal result."""
        return None


class VertexSequenceVisitor(GraphVisitHandler):
    """Records vertices in the order they are discovered."""

    def __init__(self) -> None:
        self.vertices: List[VertexID] = []

    def discover_vertex(self, vertex: VertexID) -> VisitState:
        self.vertices.append(vertex)
        return VisitState.CONTINUE

    def on_completed(self) -> List[VertexID]:
        return self.vertices


class VisitGraphBuilder(GraphVisitHandler):
    """Builds the traversal tree.

    The result holds every vertex of the visited graph and the edges the
    traversal followed, with their original keys and weights. Directed inputs
    give a `StrictMultiDiGraph`, all others a `StrictMultiGraph`.
    """

    def __init__(self) -> None:
        self.visit_graph: Optional[Union[StrictMultiGraph, StrictMultiDiGraph]] = None

    def discover_graph(self, graph: Graph) -> None:
        if isinstance(graph, DirectedGraph):
            self.visit_graph = StrictMultiDiGraph()
        else:
            self.visit_graph = StrictMultiGraph()
        for vertex in graph.get_vertices():
            self.visit_graph.add_node(vertex)

    def discover_edge(self, head: VertexID, edge: Edge, tail: VertexID) -> VisitState:
        assert self.visit_graph is not None
        attr = {}
        if isinstance(edge, WeightedEdge):
            attr[self.visit_graph.weight_attr] = edge.weight
        self.visit_graph.add_edge(edge.source, edge.target, key=edge.key, **attr)
        return VisitState.CONTINUE

    def on_completed(self) -> Optional[Union[StrictMultiGraph, StrictMultiDiGraph]]:
        return self.visit_graph


def breadth_first_search(
    graph: Graph,
    source: VertexID,
    handler: Optional[GraphVisitHandler] = None,
) -> Any:
    """Breadth-first traversal from ``source``.

    A vertex is marked visited when it is discovered (enqueued), so every
    reachable vertex is enqueued at most once. ``finish_edge`` follows the
    discovery of the edge's far end; ``finish_vertex`` fires once all edges of
    the vertex have been examined.

    Args:
        graph: Graph to traverse.
        source: Start vertex.
        handler: Visitor receiving the callbacks. Defaults to a
            :class:`VertexSequenceVisitor`.

    Returns:
        Whatever ``handler.on_completed()`` returns; the list of visited
        vertices for the default handler.

    Raises:
        ValueError: If ``graph`` or ``source`` is None.
        KeyError: If ``source`` is not in ``graph``.
    """
    require_arguments(graph=graph, source=source)
    require_vertex(graph, source)
    if handler is None:
        handler = VertexSequenceVisitor()
    edges_of = neighbor_edges(graph)

    handler.discover_graph(graph)
    visited: Set[VertexID] = {source}
    # Queue entries: (vertex, expand its children)
    queue: Deque[Tuple[VertexID, bool]] = deque()

    state = handler.discover_vertex(source)
    stopped = state == VisitState.STOP
    if not stopped:
        queue.append((source, state == VisitState.CONTINUE))

    while queue and not stopped:
        vertex, expand = queue.popleft()
        if expand:
            for edge in edges_of(vertex):
                tail = edge.connected_vertex(vertex)
                if tail in visited:
                    continue
                edge_state = handler.discover_edge(vertex, edge, tail)
                if edge_state == VisitState.STOP:
                    stopped = True
                    break
                if edge_state == VisitState.SKIP_CHILDREN:
                    continue
                visited.add(tail)
                tail_state = handler.discover_vertex(tail)
                if tail_state == VisitState.STOP:
                    stopped = True
                    break
                queue.append((tail, tail_state == VisitState.CONTINUE))
                if handler.finish_edge(vertex, edge, tail) == VisitState.STOP:
                    stopped = True
                    break
        if stopped:
            break
        if handler.finish_vertex(vertex) == VisitState.STOP:
            stopped = True

    LOGGER.debug(
        "BFS from %s discovered %d vertices%s",
        source,
        len(visited),
        " (stopped by handler)" if stopped else "",
    )
    handler.finish_graph(graph)
    return handler.on_completed()


def depth_first_search(
    graph: Graph,
    source: VertexID,
    handler: Optional[GraphVisitHandler] = None,
) -> Any:
    """Depth-first traversal from ``source`` using an explicit stack.

    A vertex is marked visited when it is popped and processed. Its unvisited
    neighbors are pushed in incidence order, so the last one pushed is explored
    first. A vertex may sit on the stack more than once; later copies are
    dropped when popped. ``finish_vertex`` (then ``finish_edge`` for the edge
    that led to it) fires after the vertex's whole subtree is done.

    Args:
        graph: Graph to traverse.
        source: Start vertex.
        handler: Visitor receiving the callbacks. Defaults to a
            :class:`VertexSequenceVisitor`.

    Returns:
        Whatever ``handler.on_completed()`` returns; the list of visited
        vertices for the default handler.

    Raises:
        ValueError: If ``graph`` or ``source`` is None.
        KeyError: If ``source`` is not in ``graph``.
    """
    require_arguments(graph=graph, source=source)
    require_vertex(graph, source)
    if handler is None:
        handler = VertexSequenceVisitor()
    edges_of = neighbor_edges(graph)

    handler.discover_graph(graph)
    visited: Set[VertexID] = set()
    # Stack entries: (vertex, edge that led here, vertex it came from, finishing)
    stack: List[Tuple[VertexID, Optional[Edge], Optional[VertexID], bool]] = [
        (source, None, None, False)
    ]
    stopped = False

    while stack:
        vertex, edge, head, finishing = stack.pop()

        if finishing:
            if handler.finish_vertex(vertex) == VisitState.STOP:
                stopped = True
                break
            if edge is not None and handler.finish_edge(head, edge, vertex) == VisitState.STOP:
                stopped = True
                break
            continue

        if vertex in visited:
            continue

        if edge is not None:
            edge_state = handler.discover_edge(head, edge, vertex)
            if edge_state == VisitState.STOP:
                stopped = True
                break
            if edge_state == VisitState.SKIP_CHILDREN:
                continue

        visited.add(vertex)
        state = handler.discover_vertex(vertex)
        if state == VisitState.STOP:
            stopped = True
            break

        stack.append((vertex, edge, head, True))
        if state == VisitState.CONTINUE:
            for next_edge in edges_of(vertex):
                tail = next_edge.connected_vertex(vertex)
                if tail not in visited:
                    stack.append((tail, next_edge, vertex, False))

    LOGGER.debug(
        "DFS from %s discovered %d vertices%s",
        source,
        len(visited),
        " (stopped by handler)" if stopped else "",
    )
    handler.finish_graph(graph)
    return handler.on_completed()
