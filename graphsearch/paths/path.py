"""Immutable path values returned by the search algorithms.

A ``Path`` is an alternating vertex/edge sequence; ``WeightedPath`` adds the
total weight computed with the search's ordered monoid.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Tuple

from graphsearch.graph.base import Edge, VertexID


@dataclass(frozen=True)
class Path:
    """A sequence of vertices joined by edges.

    Invariants (checked on construction):
      - ``len(vertices) == len(edges) + 1``
      - ``edges[i]`` joins ``vertices[i]`` and ``vertices[i + 1]``

    Attributes:
        vertices: Vertices from source to target, inclusive.
        edges: Edges in traversal order.
    """

    vertices: Tuple[VertexID, ...]
    edges: Tuple[Edge, ...]

    def __post_init__(self) -> None:
        if len(self.vertices) != len(self.edges) + 1:
            raise ValueError(
                f"A path with {len(self.edges)} edges needs {len(self.edges) + 1} "
                f"vertices, got {len(self.vertices)}."
            )
        for idx, edge in enumerate(self.edges):
            head, tail = self.vertices[idx], self.vertices[idx + 1]
            if {head, tail} != set(edge.endpoints()):
                raise ValueError(
                    f"Edge {edge} at position {idx} does not join '{head}' and '{tail}'."
                )

    @property
    def source(self) -> VertexID:
        """Return the first vertex of the path."""
        return self.vertices[0]

    @property
    def target(self) -> VertexID:
        """Return the last vertex of the path."""
        return self.vertices[-1]

    @property
    def order(self) -> int:
        """Number of vertices on the path."""
        return len(self.vertices)

    @property
    def size(self) -> int:
        """Number of edges on the path."""
        return len(self.edges)

    def __iter__(self) -> Iterator[VertexID]:
        return iter(self.vertices)

    def __contains__(self, vertex: Any) -> bool:
        return vertex in self.vertices

    def __repr__(self) -> str:
        return f"Path({' -> '.join(str(v) for v in self.vertices)})"


@dataclass(frozen=True, repr=False)
class WeightedPath(Path):
    """A path with its total weight.

    Attributes:
        weight: The ordered-monoid combination of all edge weights, in path
            order.
    """

    weight: Any = None

    def __repr__(self) -> str:
        return (
            f"WeightedPath({' -> '.join(str(v) for v in self.vertices)}, "
            f"weight={self.weight!r})"
        )
