"""Configuration classes for graphsearch components."""

from dataclasses import dataclass


@dataclass
class SearchConfig:
    """Defaults shared by the concrete graphs and the search algorithms."""

    # Edge attribute exposed as ``WeightedEdge.weight`` by the strict graphs
    weight_attr: str = "weight"

    # Log every edge relaxation at DEBUG level (very verbose on large graphs)
    trace_relaxations: bool = False


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
