"""Spanning trees grown from a root with Prim's algorithm.

The frontier is handled exactly like Dijkstra's queue, except that the key of a
frontier vertex is the weight of the single cheapest edge joining it to the
tree rather than a path distance. Keys live in a ``ShortestDistances`` map, the
joining edges in a ``PredecessorsList``, and the heap uses lazy deletion.
"""

from __future__ import annotations

from heapq import heappop, heappush
from typing import Any, List, Set, Tuple

from graphsearch.algorithms.base import neighbor_edges, require_arguments, require_vertex
from graphsearch.graph.base import DirectedGraph, Graph, VertexID
from graphsearch.graph.spanning_tree import SpanningTree
from graphsearch.logging import get_logger
from graphsearch.paths.predecessors import PredecessorsList, ShortestDistances, edge_weight
from graphsearch.weights import OrderedMonoid

LOGGER = get_logger(__name__)


def prim_spanning_tree(graph: Graph, root: VertexID, monoid: OrderedMonoid) -> SpanningTree:
    """Grow a minimum spanning tree from ``root``.

    Vertices unreachable from ``root`` are left out. On a directed graph only
    outbound edges are followed; the result then spans everything reachable
    from ``root`` but is not guaranteed to be minimal.

    Args:
        graph: The graph to span.
        root: The vertex the tree grows from.
        monoid: Weight algebra used to compare edges and total the tree.

    Returns:
        The tree, containing ``root`` even when it has no edges.

    Raises:
        ValueError: If an argument is None or an explored edge carries no
            weight.
        KeyError: If ``root`` is not in ``graph``.
    """
    require_arguments(graph=graph, root=root, monoid=monoid)
    require_vertex(graph, root, role="Root")

    edges_of = neighbor_edges(graph)
    sort_key = monoid.sort_key

    # Weight of the cheapest known edge joining each frontier vertex to the tree
    keys = ShortestDistances(monoid)
    joining_edges = PredecessorsList(graph)
    tree = SpanningTree(monoid)
    in_tree: Set[VertexID] = set()

    keys.set_weight(root, monoid.zero())
    counter = 0
    frontier: List[Tuple[Any, int, VertexID, Any]] = [
        (sort_key(monoid.zero()), counter, root, monoid.zero())
    ]

    while frontier:
        _, _, vertex, vertex_key = heappop(frontier)
        if vertex in in_tree or monoid.compare(vertex_key, keys.get_weight(vertex)) != 0:
            continue

        in_tree.add(vertex)
        entry = joining_edges.get_predecessor(vertex)
        if entry is None:
            tree.add_node(vertex)
        else:
            tree.add_tree_edge(entry[1])

        for edge in edges_of(vertex):
            neighbor = edge.connected_vertex(vertex)
            if neighbor in in_tree:
                continue
            weight = edge_weight(edge)
            if neighbor not in keys or monoid.less(weight, keys.get_weight(neighbor)):
                keys.set_weight(neighbor, weight)
                joining_edges.add_predecessor(neighbor, edge)
                counter += 1
                heappush(frontier, (sort_key(weight), counter, neighbor, weight))

    LOGGER.debug(
        "Spanning tree from %s covers %d vertices with total weight %r",
        root,
        len(in_tree),
        tree.weight,
    )
    return tree


def spanning_forest(graph: Graph, monoid: OrderedMonoid) -> List[SpanningTree]:
    """Return one minimum spanning tree per connected component.

    Roots are picked in vertex insertion order.

    Raises:
        ValueError: If an argument is None or ``graph`` is directed.
    """
    require_arguments(graph=graph, monoid=monoid)
    if isinstance(graph, DirectedGraph):
        raise ValueError("Spanning forests are only defined for undirected graphs.")

    forest: List[SpanningTree] = []
    covered: Set[VertexID] = set()
    for vertex in graph.get_vertices():
        if vertex in covered:
            continue
        tree = prim_spanning_tree(graph, vertex, monoid)
        covered.update(tree.get_vertices())
        forest.append(tree)
    return forest
