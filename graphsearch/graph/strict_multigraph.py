"""Strict multigraphs with validation and the graphsearch capability set.

`StrictMultiGraph` and `StrictMultiDiGraph` extend `networkx.MultiGraph` and
`networkx.MultiDiGraph` to enforce explicit vertex management, unique edge
identifiers and predictable error handling. Both implement the read-only
:class:`~graphsearch.graph.base.Graph` interface used by the algorithms;
the directed variant also implements
:class:`~graphsearch.graph.base.DirectedGraph`.
"""

from __future__ import annotations

from pickle import dumps, loads
from typing import Any, Dict, Iterator, List, Optional, Tuple

import networkx as nx

from graphsearch.config import SEARCH_CONFIG
from graphsearch.graph.base import (
    AttrDict,
    DirectedGraph,
    Edge,
    EdgeID,
    Graph,
    VertexID,
    WeightedEdge,
)

EdgeTuple = Tuple[VertexID, VertexID, EdgeID, AttrDict]


class _StrictGraphMixin:
    """Strict add/remove rules shared by the undirected and directed graphs.

    This class enforces:
      - No automatic creation of missing vertices when adding an edge.
      - No duplicate vertices (raises ValueError on duplicates).
      - No duplicate edges by key (raises ValueError on duplicates).
      - Removing non-existent vertices or edges raises ValueError.
      - Auto-assigned edge keys are monotonically increasing integers.
      - ``copy()`` performs a pickle-based deep copy by default.

    Edges carrying ``weight_attr`` are reported as :class:`WeightedEdge`,
    all others as plain :class:`Edge`.
    """

    _adj: Dict[VertexID, Dict[VertexID, Dict[EdgeID, AttrDict]]]
    _node: Dict[VertexID, AttrDict]

    def __init__(self, *args, weight_attr: Optional[str] = None, **kwargs) -> None:
        """Initialize the graph.

        Args:
            *args: Positional arguments forwarded to the NetworkX constructor.
            weight_attr: Edge attribute used as the edge weight. Defaults to
                ``SEARCH_CONFIG.weight_attr``.
            **kwargs: Keyword arguments forwarded to the NetworkX constructor.
        """
        self.weight_attr: str = weight_attr or SEARCH_CONFIG.weight_attr
        self._edges: Dict[EdgeID, EdgeTuple] = {}
        # Only advances; removed edges do not give their ids back.
        self._next_edge_id: int = 0
        super().__init__(*args, **kwargs)

    def new_edge_key(self, u: VertexID, v: VertexID, key: Optional[int] = None) -> int:  # type: ignore[override]
        """Return a new unique integer edge id.

        Signature matches NetworkX's ``new_edge_key(self, u, v, key=None)``.
        """
        next_edge_id = self._next_edge_id
        self._next_edge_id += 1
        return int(next_edge_id)

    def copy(self, as_view: bool = False, pickle: bool = True):
        """Create a copy of this graph.

        Without pickling, vertex and edge attribute dicts are copied one level
        deep and every edge keeps its key.

        Args:
            as_view: If True, return a view instead of a full copy; only used
                if ``pickle=False``.
            pickle: If True, perform a pickle-based deep copy.

        Returns:
            A new instance (or view) of the graph.
        """
        if pickle:
            return loads(dumps(self))
        if as_view:
            return super().copy(as_view=True)  # type: ignore[misc]

        graph = self._empty_copy()
        graph.graph.update(self.graph)  # type: ignore[attr-defined]
        for node, data in self._node.items():
            graph.add_node(node, **data)
        # Undirected adjacency lists each edge at both ends; _edges holds it once.
        for key, (src_node, dst_node, _, attr) in self._edges.items():
            graph.add_edge(src_node, dst_node, key=key, **attr)
        graph._next_edge_id = self._next_edge_id
        return graph

    def _empty_copy(self):
        """Return an empty graph of the same class and weight attribute."""
        return self.__class__(weight_attr=self.weight_attr)

    #
    # Vertex management
    #
    def add_node(self, node_for_adding: VertexID, **attr: Any) -> None:
        """Add a single vertex, disallowing duplicates.

        Raises:
            ValueError: If the vertex already exists in the graph.
        """
        if node_for_adding in self._node:
            raise ValueError(f"Node '{node_for_adding}' already exists in this graph.")
        super().add_node(node_for_adding, **attr)  # type: ignore[misc]

    def remove_node(self, n: VertexID) -> None:
        """Remove a single vertex and all incident edges.

        Raises:
            ValueError: If the vertex does not exist in the graph.
        """
        if n not in self._node:
            raise ValueError(f"Node '{n}' does not exist.")
        to_delete = [
            e_id for e_id, (s, t, _, _) in self._edges.items() if s == n or t == n
        ]
        for e_id in to_delete:
            del self._edges[e_id]
        super().remove_node(n)  # type: ignore[misc]

    #
    # Edge management
    #
    def add_edge(  # pyright: ignore[reportIncompatibleMethodOverride]
        self,
        u_for_edge: VertexID,
        v_for_edge: VertexID,
        key: Optional[EdgeID] = None,
        **attr: Any,
    ) -> EdgeID:
        """Add an edge between two existing vertices.

        If no key is provided, a unique monotonically increasing integer key is
        assigned via ``new_edge_key``. When an explicit integer key is provided,
        the internal counter is advanced past it.

        Args:
            u_for_edge: The source vertex. Must exist in the graph.
            v_for_edge: The target vertex. Must exist in the graph.
            key: The unique edge key. If None, a new key is generated.
            **attr: Arbitrary edge attributes, including the weight.

        Returns:
            The key associated with the new edge.

        Raises:
            ValueError: If either vertex does not exist, or if the key is
                already in use.
        """
        if u_for_edge not in self._node:
            raise ValueError(f"Source node '{u_for_edge}' does not exist.")
        if v_for_edge not in self._node:
            raise ValueError(f"Target node '{v_for_edge}' does not exist.")

        if key is None:
            key = self.new_edge_key(u_for_edge, v_for_edge)
        else:
            if key in self._edges:
                raise ValueError(f"Edge with id '{key}' already exists.")
            if isinstance(key, int) and key >= self._next_edge_id:
                self._next_edge_id = key + 1

        super().add_edge(u_for_edge, v_for_edge, key=key, **attr)  # type: ignore[misc]
        self._edges[key] = (
            u_for_edge,
            v_for_edge,
            key,
            self._adj[u_for_edge][v_for_edge][key],
        )
        return key

    def remove_edge_by_id(self, key: EdgeID) -> None:
        """Remove an edge by its unique key.

        Raises:
            ValueError: If no edge with this key exists in the graph.
        """
        if key not in self._edges:
            raise ValueError(f"Edge with id='{key}' not found.")
        src_node, dst_node, _, _ = self._edges.pop(key)
        super().remove_edge(src_node, dst_node, key=key)  # type: ignore[misc]

    def _check_endpoints(self, u: VertexID, v: VertexID, key: EdgeID) -> None:
        src_node, dst_node, _, _ = self._edges[key]
        if src_node != u or dst_node != v:
            raise ValueError(
                f"Edge with id='{key}' is actually from {src_node} to {dst_node}, "
                f"not from {u} to {v}."
            )

    def remove_edge(self, u: VertexID, v: VertexID, key: Optional[EdgeID] = None) -> None:
        """Remove an edge (or all edges) between ``u`` and ``v``.

        Args:
            u: One endpoint. Must exist in the graph.
            v: The other endpoint. Must exist in the graph.
            key: If provided, remove only the edge with this key.

        Raises:
            ValueError: If the vertices do not exist, the key does not exist or
                does not join ``u`` and ``v``, or no edges join them.
        """
        if u not in self._node:
            raise ValueError(f"Source node '{u}' does not exist.")
        if v not in self._node:
            raise ValueError(f"Target node '{v}' does not exist.")

        if key is not None:
            if key not in self._edges:
                raise ValueError(f"No edge with id='{key}' found from {u} to {v}.")
            self._check_endpoints(u, v, key)
            self.remove_edge_by_id(key)
            return

        edge_ids = tuple(self._adj[u].get(v, ()))
        if not edge_ids:
            raise ValueError(f"No edges from '{u}' to '{v}' to remove.")
        for e_id in edge_ids:
            self.remove_edge_by_id(e_id)

    #
    # Convenience methods
    #
    def get_edge(self, key: EdgeID) -> Edge:
        """Return the edge with the given key.

        Raises:
            ValueError: If no edge with this key is found.
        """
        if key not in self._edges:
            raise ValueError(f"Edge with id='{key}' not found.")
        return self._make_edge(key)

    def get_edge_attr(self, key: EdgeID) -> AttrDict:
        """Return the attribute dictionary of a specific edge.

        Raises:
            ValueError: If no edge with this key is found.
        """
        if key not in self._edges:
            raise ValueError(f"Edge with id='{key}' not found.")
        return self._edges[key][3]

    def has_edge_by_id(self, key: EdgeID) -> bool:
        """Check whether an edge with the given key exists."""
        return key in self._edges

    def edges_between(self, u: VertexID, v: VertexID) -> List[EdgeID]:
        """List all edge keys from ``u`` to ``v`` (or between them, if undirected)."""
        if u not in self._adj or v not in self._adj[u]:
            return []
        return list(self._adj[u][v].keys())

    def update_edge_attr(self, key: EdgeID, **attr: Any) -> None:
        """Update attributes on an existing edge by key.

        Raises:
            ValueError: If the edge with the given key does not exist.
        """
        if key not in self._edges:
            raise ValueError(f"Edge with id='{key}' not found.")
        self._edges[key][3].update(attr)

    #
    # Graph capability set
    #
    def get_vertices(self) -> List[VertexID]:
        return list(self._node)

    def get_edges(self) -> Dict[EdgeID, Edge]:
        return {key: self._make_edge(key) for key in self._edges}

    def has_vertex(self, vertex: VertexID) -> bool:
        return vertex in self._node

    def incident_edges(self, vertex: VertexID) -> Iterator[Edge]:
        for keydict in self._adj[vertex].values():
            for key in keydict:
                yield self._make_edge(key)

    def _make_edge(self, key: EdgeID) -> Edge:
        src_node, dst_node, _, attr = self._edges[key]
        if self.weight_attr in attr:
            return WeightedEdge(src_node, dst_node, key, attr[self.weight_attr])
        return Edge(src_node, dst_node, key)


class StrictMultiGraph(_StrictGraphMixin, nx.MultiGraph, Graph):
    """Undirected multigraph with strict rules and unique edge ids.

    ``incident_edges(v)`` yields edges grouped by neighbor, neighbors in the
    order they were first connected to ``v``.
    """

    def _check_endpoints(self, u: VertexID, v: VertexID, key: EdgeID) -> None:
        src_node, dst_node, _, _ = self._edges[key]
        if {src_node, dst_node} != {u, v}:
            raise ValueError(
                f"Edge with id='{key}' joins {src_node} and {dst_node}, "
                f"not {u} and {v}."
            )


class StrictMultiDiGraph(_StrictGraphMixin, nx.MultiDiGraph, DirectedGraph):
    """Directed multigraph with strict rules and unique edge ids."""

    _succ: Dict[VertexID, Dict[VertexID, Dict[EdgeID, AttrDict]]]
    _pred: Dict[VertexID, Dict[VertexID, Dict[EdgeID, AttrDict]]]

    def outbound_edges(self, vertex: VertexID) -> Iterator[Edge]:
        for keydict in self._succ[vertex].values():
            for key in keydict:
                yield self._make_edge(key)

    def inbound_edges(self, vertex: VertexID) -> Iterator[Edge]:
        for keydict in self._pred[vertex].values():
            for key in keydict:
                yield self._make_edge(key)

    def incident_edges(self, vertex: VertexID) -> Iterator[Edge]:
        """Yield outbound edges, then inbound edges; self-loops appear once."""
        yield from self.outbound_edges(vertex)
        for edge in self.inbound_edges(vertex):
            if edge.source != vertex:
                yield edge
