"""Graph ports - Abstractions for graph loading and path solving.

These protocols define the contracts the path-finder service relies on:
a repository that produces a populated graph and solvers that compute a
path between two nodes of it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import SearchResult
    from ..graph.graph import Graph


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementation: adapters/graph/file_repository.py

    The repository is responsible for loading and caching the graph
    from persistent storage.
    """

    def load(self) -> Graph:
        """Load the graph.

        Returns:
            The populated graph.
        """
        ...


class PathSolverPort(Protocol):
    """Port for path computation.

    Implementations: adapters/graph/solvers.py
    """

    name: str

    def solve(self, graph: Graph, start: str, target: str) -> SearchResult:
        """Find a path between two nodes.

        Args:
            graph: The graph to search.
            start: Name of the start node.
            target: Name of the target node.

        Returns:
            SearchResult with path and cost.

        Raises:
            NodeNotFoundError: If an endpoint is not in the graph.
            NoPathError: If the target cannot be reached.
        """
        ...

    def solve_safe(self, graph: Graph, start: str, target: str) -> SearchResult:
        """Like solve(), but returns an empty result instead of raising."""
        ...
