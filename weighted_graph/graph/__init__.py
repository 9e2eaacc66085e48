"""Graph data structure, path searches and loaders.

This subpackage contains the in-memory graph with its mutation API, the
depth-first and Dijkstra searches that run on top of it, and the modules
that build a graph from text or JSON descriptions and render it back.
"""

from .graph import Graph
from .load_graph import load_graph, parse_json, parse_text
from .render import format_graph, format_result, format_visited
from .search import (
    NodeMarks,
    SearchContext,
    SearchState,
    depth_first_search,
    dijkstra,
    unvisit,
)

__all__ = [
    "Graph",
    "load_graph",
    "parse_text",
    "parse_json",
    "format_graph",
    "format_result",
    "format_visited",
    "SearchState",
    "SearchContext",
    "NodeMarks",
    "depth_first_search",
    "dijkstra",
    "unvisit",
]
