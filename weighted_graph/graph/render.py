"""Console rendering of graphs and search results."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..domain.models import SearchResult

if TYPE_CHECKING:
    from .graph import Graph


def format_graph(graph: Graph) -> str:
    """Render every node and its outgoing edges, costs with two decimals."""
    nodes = graph.nodes
    lines = [" -- GRAPH -- ", f"{len(nodes)} Nodes"]
    for node in nodes:
        lines.append(f" Node : {node.name}")
        for edge in node.edges:
            lines.append(f"  -> {edge.to.name} ({float(edge.cost):.2f})")
        if not node.edges:
            lines.append("  <no-edges>")
    return "\n".join(lines) + "\n\n"


def format_visited(graph: Graph) -> str:
    """Render every node with its embedded visited flag as 0/1."""
    return " " + "".join(
        f"| {node.name} ({int(node.is_visited())}) |" for node in graph.nodes
    )


def format_path(result: SearchResult) -> str:
    return " -> ".join(result.names)


def format_result(result: SearchResult) -> str:
    """Render a search result as cost and path lines."""
    if result.is_empty:
        return "No path found!"
    return f"Total cost: {result.cost}\nPath: {format_path(result)}"
