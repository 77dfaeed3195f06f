"""Graph conversion utilities between the strict graphs and NetworkX graphs.

`to_networkx` consolidates multi-edges into a simple NetworkX graph and can
preserve the original edge data for reversion through a special ``_uv_edges``
attribute. `from_networkx` accepts any NetworkX graph, restoring multi-edges
from ``_uv_edges`` when present.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional, Tuple, Union

import networkx as nx

from graphsearch.graph.base import AttrDict, EdgeID, VertexID
from graphsearch.graph.strict_multigraph import StrictMultiDiGraph, StrictMultiGraph

StrictGraph = Union[StrictMultiGraph, StrictMultiDiGraph]


def to_networkx(
    graph: StrictGraph,
    edge_func: Optional[
        Callable[[StrictGraph, VertexID, VertexID, Dict[EdgeID, AttrDict]], dict]
    ] = None,
    revertible: bool = True,
) -> nx.Graph:
    """Convert a strict graph to a simple NetworkX graph.

    Parallel edges between the same pair of vertices are consolidated into one
    edge. A directed input gives an ``nx.DiGraph``, an undirected one an
    ``nx.Graph``.

    Args:
        graph: The graph to convert.
        edge_func: Optional function computing the consolidated edge
            attributes. It receives ``(graph, u, v, edges)`` where ``edges``
            maps edge key to attribute dict.
        revertible: If True, store the original multi-edge data in
            ``_uv_edges`` so that `from_networkx` can restore it.

    Returns:
        The consolidated NetworkX graph.
    """
    nx_graph = nx.DiGraph() if graph.is_directed() else nx.Graph()
    nx_graph.add_nodes_from(graph.nodes(data=True))

    grouped: Dict[Tuple[VertexID, VertexID], Dict[EdgeID, AttrDict]] = {}
    for edge in graph.get_edges().values():
        u, v = edge.endpoints()
        if not graph.is_directed() and (v, u) in grouped:
            u, v = v, u
        grouped.setdefault((u, v), {})[edge.key] = graph.get_edge_attr(edge.key)

    for (u, v), edges in grouped.items():
        typed_edges = {key: dict(attr) for key, attr in edges.items()}
        if edge_func:
            nx_graph.add_edge(u, v, **edge_func(graph, u, v, typed_edges))
        else:
            nx_graph.add_edge(u, v)

        if revertible:
            nx_graph.edges[u, v]["_uv_edges"] = [
                (
                    graph.get_edge(key).source,
                    graph.get_edge(key).target,
                    {key: attr},
                )
                for key, attr in typed_edges.items()
            ]
    return nx_graph


def from_networkx(nx_graph: nx.Graph, weight_attr: Optional[str] = None) -> StrictGraph:
    """Convert any NetworkX graph to a strict graph.

    Directed inputs give a `StrictMultiDiGraph`, undirected ones a
    `StrictMultiGraph`. Edges carrying ``_uv_edges`` (see `to_networkx`) are
    expanded back into the original multi-edges with their original keys;
    other edges get fresh integer keys.

    Args:
        nx_graph: The NetworkX graph to convert.
        weight_attr: Edge attribute to expose as the edge weight. Defaults to
            ``SEARCH_CONFIG.weight_attr``.

    Returns:
        The strict graph.
    """
    graph: StrictGraph
    if nx_graph.is_directed():
        graph = StrictMultiDiGraph(weight_attr=weight_attr)
    else:
        graph = StrictMultiGraph(weight_attr=weight_attr)

    for node, data in nx_graph.nodes(data=True):
        graph.add_node(node, **data)

    for u, v, data in nx_graph.edges(data=True):
        uv_edges = data.get("_uv_edges")
        if not uv_edges:
            graph.add_edge(u, v, **data)
            continue
        for orig_u, orig_v, edges in uv_edges:
            for edge_id, edge_data in edges.items():
                graph.add_edge(orig_u, orig_v, edge_id, **edge_data)
    return graph
