"""Spanning tree result type."""

from __future__ import annotations

from typing import Any, Optional

from graphsearch.graph.base import Edge
from graphsearch.graph.strict_multigraph import StrictMultiGraph
from graphsearch.paths.predecessors import edge_weight
from graphsearch.weights import FLOAT_WEIGHTS, OrderedMonoid


class SpanningTree(StrictMultiGraph):
    """An undirected graph holding tree edges and their running total weight.

    Attributes:
        monoid: Weight algebra used to accumulate ``weight``.
        weight: Combination of the weights of all tree edges, in the order they
            were added.
    """

    def __init__(self, monoid: Optional[OrderedMonoid] = None, *args, **kwargs) -> None:
        self.monoid: OrderedMonoid = monoid or FLOAT_WEIGHTS
        self.weight: Any = self.monoid.zero()
        super().__init__(*args, **kwargs)

    def _empty_copy(self) -> SpanningTree:
        tree = SpanningTree(self.monoid, weight_attr=self.weight_attr)
        # Edges are copied verbatim, so the total carries over unchanged
        tree.weight = self.weight
        return tree

    def add_tree_edge(self, edge: Edge) -> None:
        """Add a weighted edge, its missing endpoints, and its weight to the total.

        The edge keeps its key, so it can be matched against the source graph.

        Raises:
            ValueError: If the edge carries no weight or its key is already used.
        """
        weight = edge_weight(edge)
        for vertex in edge.endpoints():
            if not self.has_vertex(vertex):
                self.add_node(vertex)
        self.add_edge(edge.source, edge.target, key=edge.key, **{self.weight_attr: weight})
        self.weight = self.monoid.combine(self.weight, weight)
