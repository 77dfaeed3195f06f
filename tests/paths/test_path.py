"""Tests for the Path and WeightedPath value types."""

import pytest

from graphsearch.graph.base import Edge, WeightedEdge
from graphsearch.paths.path import Path, WeightedPath

AB = Edge("A", "B", 0)
CB = Edge("C", "B", 1)


def test_path_basic_creation():
    """Edges may join consecutive vertices in either orientation."""
    path = Path(("A", "B", "C"), (AB, CB))

    assert path.source == "A"
    assert path.target == "C"
    assert path.order == 3
    assert path.size == 2
    assert list(path) == ["A", "B", "C"]
    assert "B" in path
    assert "D" not in path


def test_single_vertex_path():
    path = Path(("A",), ())
    assert path.source == path.target == "A"
    assert path.size == 0


def test_length_mismatch_rejected():
    with pytest.raises(ValueError, match="needs 2 vertices, got 3"):
        Path(("A", "B", "C"), (AB,))
    with pytest.raises(ValueError, match="needs 1 vertices, got 0"):
        Path((), ())


def test_edge_must_join_consecutive_vertices():
    with pytest.raises(ValueError, match="position 1 does not join 'B' and 'D'"):
        Path(("A", "B", "D"), (AB, CB))


def test_path_is_immutable_and_hashable():
    path = Path(("A", "B"), (AB,))
    with pytest.raises(AttributeError):
        path.vertices = ("B",)  # type: ignore[misc]
    assert {path, Path(("A", "B"), (AB,))} == {path}


def test_repr():
    assert repr(Path(("A", "B", "C"), (AB, CB))) == "Path(A -> B -> C)"
    assert repr(WeightedPath(("A", "B"), (AB,), 2.5)) == "WeightedPath(A -> B, weight=2.5)"


def test_weighted_path_equality():
    edge = WeightedEdge("A", "B", 0, 1)
    path = WeightedPath(("A", "B"), (edge,), 1)

    assert path == WeightedPath(("A", "B"), (edge,), 1)
    assert path != WeightedPath(("A", "B"), (edge,), 2)
    assert path != Path(("A", "B"), (edge,))
    assert isinstance(path, Path)
