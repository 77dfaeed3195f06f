"""Exceptions raised by graphsearch algorithms."""

from __future__ import annotations

from typing import Any, Hashable


class PathNotFoundError(LookupError):
    """No chain of edges connects ``source`` to ``target`` in ``graph``.

    An unreachable target is an expected outcome of a search, so callers are
    meant to catch this and react to it.

    Attributes:
        source: The vertex the search started from.
        target: The vertex that could not be reached.
        graph: The graph that was searched.
    """

    def __init__(self, source: Hashable, target: Hashable, graph: Any) -> None:
        self.source = source
        self.target = target
        self.graph = graph
        super().__init__(
            f"Path from '{source}' to '{target}' doesn't exist in graph {graph}"
        )
