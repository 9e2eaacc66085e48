"""Directed, weighted graph with depth-first and Dijkstra path searches.

Quick start:

    from weighted_graph import Graph

    graph = Graph()
    for name in "ABCD":
        graph.add_node(name)
    graph.add_edge("A", "B", 1)
    graph.add_edge("B", "D", 1)

    cost, path = graph.dijkstra("A", "D")
"""

from .domain import (
    NO_PATH_COST,
    ConfigurationError,
    Edge,
    GraphError,
    GraphLoadError,
    InvalidCostError,
    NegativeCostError,
    Node,
    NodeNotFoundError,
    NoPathError,
    SearchResult,
    WeightedGraphError,
)
from .graph import Graph, NodeMarks, SearchContext, load_graph, parse_json, parse_text

__all__ = [
    "Graph",
    "Node",
    "Edge",
    "SearchResult",
    "NO_PATH_COST",
    "SearchContext",
    "NodeMarks",
    "load_graph",
    "parse_text",
    "parse_json",
    "WeightedGraphError",
    "GraphError",
    "InvalidCostError",
    "NegativeCostError",
    "GraphLoadError",
    "NodeNotFoundError",
    "NoPathError",
    "ConfigurationError",
]
