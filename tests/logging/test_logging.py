"""Tests for the graphsearch logging setup as seen by the search algorithms."""

import logging
from io import StringIO

import pytest

from graphsearch.algorithms.astar import astar, zero_heuristic
from graphsearch.algorithms.dijkstra import dijkstra
from graphsearch.algorithms.prim import prim_spanning_tree
from graphsearch.config import SEARCH_CONFIG
from graphsearch.logging import (
    ROOT_LOGGER_NAME,
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    relaxation_trace_enabled,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)
from graphsearch.weights import INTEGER_WEIGHTS


@pytest.fixture(autouse=True)
def _fresh_logging():
    """Start every test unconfigured and leave the default setup behind."""
    reset_logging()
    yield
    reset_logging()
    setup_root_logger()


@pytest.fixture
def stream():
    """Route the package root logger into a buffer, at INFO."""
    buffer = StringIO()
    setup_root_logger(
        level=logging.INFO,
        format_string="%(name)s|%(levelname)s|%(message)s",
        handler=logging.StreamHandler(buffer),
    )
    return buffer


def _clear(buffer: StringIO) -> None:
    buffer.seek(0)
    buffer.truncate(0)


def test_global_level_controls_search_summaries(stream, stale_entry_graph):
    dijkstra(stale_entry_graph, "A", INTEGER_WEIGHTS)
    assert stream.getvalue() == ""

    set_global_log_level(logging.DEBUG)
    dijkstra(stale_entry_graph, "A", INTEGER_WEIGHTS)
    assert (
        "graphsearch.algorithms.dijkstra|DEBUG|"
        "Dijkstra from A settled 3 vertices, skipped 1 stale entries"
    ) in stream.getvalue()

    _clear(stream)
    set_global_log_level(logging.WARNING)
    dijkstra(stale_entry_graph, "A", INTEGER_WEIGHTS)
    assert stream.getvalue() == ""


def test_enable_and_disable_debug_logging(stream, stale_entry_graph):
    heuristic = zero_heuristic(INTEGER_WEIGHTS)

    enable_debug_logging()
    astar(stale_entry_graph, "A", "B", heuristic, INTEGER_WEIGHTS)
    assert "A* from A reached B after closing 2 vertices" in stream.getvalue()

    _clear(stream)
    disable_debug_logging()
    astar(stale_entry_graph, "A", "B", heuristic, INTEGER_WEIGHTS)
    assert stream.getvalue() == ""


def test_prim_summary_uses_module_logger(stream, prim_graph):
    enable_debug_logging()
    prim_spanning_tree(prim_graph, "A", INTEGER_WEIGHTS)
    assert (
        "graphsearch.algorithms.prim|DEBUG|"
        "Spanning tree from A covers 7 vertices with total weight 39"
    ) in stream.getvalue()


def test_reset_then_get_logger_installs_one_handler():
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    assert root_logger.handlers == []

    first = get_logger("graphsearch.algorithms.dijkstra")
    second = get_logger("graphsearch.algorithms.astar")
    get_logger("graphsearch.algorithms.dijkstra")

    assert len(root_logger.handlers) == 1
    assert first.handlers == [] and second.handlers == []
    assert first.level == logging.NOTSET
    assert first.getEffectiveLevel() == logging.INFO


def test_repeated_setup_keeps_the_first_handler(stream, stale_entry_graph):
    setup_root_logger(level=logging.DEBUG)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    assert len(root_logger.handlers) == 1
    assert root_logger.level == logging.INFO
    set_global_log_level(logging.DEBUG)
    dijkstra(stale_entry_graph, "A", INTEGER_WEIGHTS)
    assert "Dijkstra from A" in stream.getvalue()


def test_trace_flag_ignored_below_debug(stream, stale_entry_graph, monkeypatch):
    monkeypatch.setattr(SEARCH_CONFIG, "trace_relaxations", True)
    logger = get_logger("graphsearch.algorithms.dijkstra")

    assert not relaxation_trace_enabled(logger)
    dijkstra(stale_entry_graph, "A", INTEGER_WEIGHTS)
    assert "Relaxed" not in stream.getvalue()

    enable_debug_logging()
    assert relaxation_trace_enabled(logger)
    dijkstra(stale_entry_graph, "A", INTEGER_WEIGHTS)
    assert "Relaxed C -> B via edge 2: 2" in stream.getvalue()

    _clear(stream)
    astar(stale_entry_graph, "A", "B", zero_heuristic(INTEGER_WEIGHTS), INTEGER_WEIGHTS)
    assert "Relaxed C -> B via edge 2: g=2 f=2" in stream.getvalue()


def test_trace_off_by_default_at_debug(stream, stale_entry_graph):
    enable_debug_logging()
    assert not relaxation_trace_enabled(get_logger("graphsearch.algorithms.dijkstra"))

    dijkstra(stale_entry_graph, "A", INTEGER_WEIGHTS)
    output = stream.getvalue()
    assert "Dijkstra from A" in output
    assert "Relaxed" not in output
