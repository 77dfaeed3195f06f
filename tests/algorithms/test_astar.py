import logging

import pytest

from graphsearch.algorithms.astar import astar, zero_heuristic
from graphsearch.algorithms.dijkstra import dijkstra
from graphsearch.exceptions import PathNotFoundError
from graphsearch.graph.strict_multigraph import StrictMultiDiGraph
from graphsearch.weights import FLOAT_WEIGHTS, INTEGER_WEIGHTS
from tests.algorithms.sample_graphs import GRID_SIZE, manhattan

CORNERS = [(0, 0), (0, GRID_SIZE - 1), (GRID_SIZE - 1, 0), (GRID_SIZE - 1, GRID_SIZE - 1)]


class TestAStar:
    def test_grid_path(self, grid_graph):
        path = astar(grid_graph, (0, 0), (4, 0), manhattan, INTEGER_WEIGHTS)
        # Going down column 4 is cheaper than down column 0
        assert path.weight == 12
        assert path.source == (0, 0)
        assert path.target == (4, 0)
        assert path.vertices == (
            tuple((0, c) for c in range(5))
            + tuple((r, 4) for r in range(1, 5))
            + tuple((4, c) for c in range(3, -1, -1))
        )
        assert INTEGER_WEIGHTS.sum(e.weight for e in path.edges) == path.weight

    @pytest.mark.parametrize("source", CORNERS)
    def test_matches_dijkstra_weight(self, grid_graph, source):
        result = dijkstra(grid_graph, source, INTEGER_WEIGHTS)
        for target in grid_graph.get_vertices():
            path = astar(grid_graph, source, target, manhattan, INTEGER_WEIGHTS)
            assert path.weight == result.distance_to(target)

    def test_zero_heuristic_matches_dijkstra_path(self, grid_graph):
        result = dijkstra(grid_graph, (0, 0), INTEGER_WEIGHTS)
        heuristic = zero_heuristic(INTEGER_WEIGHTS)
        for target in grid_graph.get_vertices():
            assert astar(grid_graph, (0, 0), target, heuristic, INTEGER_WEIGHTS) == result.path_to(target)

    def test_zero_heuristic_matches_dijkstra_on_multigraph(self, graph1):
        result = dijkstra(graph1, "A", INTEGER_WEIGHTS)
        heuristic = zero_heuristic(INTEGER_WEIGHTS)
        for target in result.reachable():
            path = astar(graph1, "A", target, heuristic, INTEGER_WEIGHTS)
            assert path == result.path_to(target)
            assert [e.key for e in path.edges] == [e.key for e in result.path_to(target).edges]

    def test_source_is_target(self, grid_graph):
        path = astar(grid_graph, (2, 2), (2, 2), manhattan, INTEGER_WEIGHTS)
        assert path.vertices == ((2, 2),)
        assert path.edges == ()
        assert path.weight == 0

    def test_stale_entry_is_not_expanded(self, stale_entry_graph):
        path = astar(stale_entry_graph, "A", "B", zero_heuristic(INTEGER_WEIGHTS), INTEGER_WEIGHTS)
        assert path.vertices == ("A", "C", "B")
        assert path.weight == 2

    def test_heuristic_guides_search(self, grid_graph, caplog):
        caplog.set_level(logging.DEBUG, logger="graphsearch")
        astar(grid_graph, (0, 0), (0, 4), manhattan, INTEGER_WEIGHTS)
        # A straight run along row 0 closes exactly the four vertices before the target
        assert "reached (0, 4) after closing 4 vertices" in caplog.text

    def test_unreachable(self, disconnected_graph):
        with pytest.raises(PathNotFoundError) as exc_info:
            astar(disconnected_graph, "A", "C", zero_heuristic(FLOAT_WEIGHTS), FLOAT_WEIGHTS)
        err = exc_info.value
        assert (err.source, err.target, err.graph) == ("A", "C", disconnected_graph)
        assert "Path from 'A' to 'C' doesn't exist" in str(err)

    def test_directed_uses_outbound_only(self):
        g = StrictMultiDiGraph()
        for v in "ABC":
            g.add_node(v)
        g.add_edge("A", "B", weight=1)
        g.add_edge("C", "B", weight=1)

        with pytest.raises(PathNotFoundError):
            astar(g, "A", "C", zero_heuristic(INTEGER_WEIGHTS), INTEGER_WEIGHTS)
        assert astar(g, "C", "B", zero_heuristic(INTEGER_WEIGHTS), INTEGER_WEIGHTS).weight == 1

    def test_idempotent(self, grid_graph):
        first = astar(grid_graph, (0, 0), (4, 4), manhattan, INTEGER_WEIGHTS)
        second = astar(grid_graph, (0, 0), (4, 4), manhattan, INTEGER_WEIGHTS)
        assert first == second
        assert first.edges == second.edges

    def test_invalid_arguments(self, grid_graph):
        with pytest.raises(ValueError):
            astar(grid_graph, (0, 0), (4, 4), None, INTEGER_WEIGHTS)
        with pytest.raises(ValueError):
            astar(grid_graph, (0, 0), (4, 4), manhattan, None)
        with pytest.raises(ValueError):
            astar(grid_graph, (0, 0), None, manhattan, INTEGER_WEIGHTS)
        with pytest.raises(KeyError):
            astar(grid_graph, (0, 0), (9, 9), manhattan, INTEGER_WEIGHTS)
