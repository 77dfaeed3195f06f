import pytest

from graphsearch.graph.strict_multigraph import StrictMultiDiGraph, StrictMultiGraph


def _undirected(vertices, edges, **kwargs) -> StrictMultiGraph:
    g = StrictMultiGraph(**kwargs)
    for v in vertices:
        g.add_node(v)
    for edge in edges:
        g.add_edge(*edge[:2], **({"weight": edge[2]} if len(edge) > 2 else {}))
    return g


def _directed(vertices, edges, **kwargs) -> StrictMultiDiGraph:
    g = StrictMultiDiGraph(**kwargs)
    for v in vertices:
        g.add_node(v)
    for edge in edges:
        g.add_edge(*edge[:2], **({"weight": edge[2]} if len(edge) > 2 else {}))
    return g


@pytest.fixture
def bfs_graph():
    #  r───s   t───u
    #  │   │ / │ / │
    #  v   w───x───y
    #
    # Edge keys follow insertion order:
    # s-r:0 s-w:1 r-v:2 w-t:3 w-x:4 t-u:5 t-x:6 y-u:7 y-x:8
    return _undirected(
        "rstuvwxy",
        [
            ("s", "r"),
            ("s", "w"),
            ("r", "v"),
            ("w", "t"),
            ("w", "x"),
            ("t", "u"),
            ("t", "x"),
            ("y", "u"),
            ("y", "x"),
        ],
    )


@pytest.fixture
def dfs_graph():
    #        s
    #      /   \
    #     a     b
    #    / \   / \
    #   c   d e   f
    #        / \
    #       h   g
    return _undirected(
        ["a", "b", "c", "d", "e", "f", "g", "h", "s"],
        [
            ("s", "a"),
            ("s", "b"),
            ("a", "c"),
            ("a", "d"),
            ("b", "e"),
            ("b", "f"),
            ("e", "h"),
            ("e", "g"),
        ],
    )


@pytest.fixture
def graph1():
    # Directed, weights in brackets, parallel edges listed together:
    #
    #   A ─[1,1,1]─► B ─[1,1,1]─► C ─[2]─► D
    #   A ─[1]─► E ─[1]─► C
    #   A ─[4]─► D
    #   C ─[1]─► F ─[1]─► D
    #
    # Edge keys: A>B:0,1,2 B>C:3,4,5 C>D:6 A>E:7 E>C:8 A>D:9 C>F:10 F>D:11
    return _directed(
        "ABCDEF",
        [
            ("A", "B", 1),
            ("A", "B", 1),
            ("A", "B", 1),
            ("B", "C", 1),
            ("B", "C", 1),
            ("B", "C", 1),
            ("C", "D", 2),
            ("A", "E", 1),
            ("E", "C", 1),
            ("A", "D", 4),
            ("C", "F", 1),
            ("F", "D", 1),
        ],
    )


@pytest.fixture
def stale_entry_graph():
    # B is first reached at 10, then improved to 2 through C.
    #
    #   A ─[10]─► B
    #   A ─[1]──► C ─[1]─► B
    return _directed("ABC", [("A", "B", 10), ("A", "C", 1), ("C", "B", 1)])


@pytest.fixture
def disconnected_graph():
    #  A──[1]──B     C──[1]──D
    return _undirected("ABCD", [("A", "B", 1.0), ("C", "D", 1.0)])


@pytest.fixture
def prim_graph():
    # Classic textbook example; minimum spanning tree weight is 39.
    return _undirected(
        "ABCDEFG",
        [
            ("A", "B", 7),
            ("A", "D", 5),
            ("B", "C", 8),
            ("B", "D", 9),
            ("B", "E", 7),
            ("C", "E", 5),
            ("D", "E", 15),
            ("D", "F", 6),
            ("E", "F", 8),
            ("E", "G", 9),
            ("F", "G", 11),
        ],
    )


GRID_SIZE = 5


@pytest.fixture
def grid_graph():
    # 5x5 undirected grid, vertices are (row, col). Horizontal edges cost 1,
    # vertical edges cost 4 except in column 4 where they cost 1.
    g = StrictMultiGraph()
    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            g.add_node((row, col))
    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            if col + 1 < GRID_SIZE:
                g.add_edge((row, col), (row, col + 1), weight=1)
            if row + 1 < GRID_SIZE:
                g.add_edge((row, col), (row + 1, col), weight=1 if col == 4 else 4)
    return g


def manhattan(vertex, target):
    """Admissible and consistent on ``grid_graph``: every edge costs at least 1."""
    return abs(vertex[0] - target[0]) + abs(vertex[1] - target[1])
