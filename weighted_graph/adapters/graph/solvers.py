"""Path solver adapters.

These adapters wrap the graph searches and add:
- Typed errors for missing endpoints and unreachable targets
- Logging
- A non-raising variant for callers that prefer the empty result
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import ClassVar

from ...domain.errors import NodeNotFoundError, NoPathError
from ...domain.models import SearchResult
from ...graph.graph import Graph


@dataclass
class _PathSolver:
    """Shared solve / solve_safe logic; subclasses provide ``_search``."""

    name: ClassVar[str] = ""

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _search(self, graph: Graph, start: str, target: str) -> SearchResult:
        raise NotImplementedError

    def solve(self, graph: Graph, start: str, target: str) -> SearchResult:
        """Find a path between two nodes.

        Args:
            graph: The graph to search.
            start: Name of the start node.
            target: Name of the target node.

        Returns:
            SearchResult with path and cost.

        Raises:
            NodeNotFoundError: If start or target is not in the graph.
            NoPathError: If no path exists.
        """
        self._logger.debug(
            "Solving path",
            extra={"solver": self.name, "start": start, "target": target},
        )

        for node_name in (start, target):
            if not graph.is_node(node_name):
                raise NodeNotFoundError(
                    f"Node not in graph: {node_name}",
                    node_name=node_name,
                )

        result = self._search(graph, start, target)

        if result.is_empty:
            self._logger.warning(
                "No path found",
                extra={"solver": self.name, "start": start, "target": target},
            )
            raise NoPathError(
                f"No path from {start} to {target}",
                start=start,
                target=target,
            )

        self._logger.info(
            "Path found",
            extra={
                "solver": self.name,
                "start": start,
                "target": target,
                "hops": result.num_hops,
                "cost": result.cost,
            },
        )
        return result

    def solve_safe(self, graph: Graph, start: str, target: str) -> SearchResult:
        """Find a path, returning an empty result on failure.

        Like solve(), but never raises for missing nodes or unreachable
        targets.
        """
        return self._search(graph, start, target)


@dataclass
class DepthFirstPathSolver(_PathSolver):
    """Solver returning the first path a depth-first walk discovers.

    With embedded search state the marks are cleared after each search so
    the graph stays reusable.
    """

    name: ClassVar[str] = "dfs"

    def _search(self, graph: Graph, start: str, target: str) -> SearchResult:
        result = graph.defise(start, target)
        if graph.search_state == "embedded":
            graph.unvisit(start)
        return result


@dataclass
class DijkstraPathSolver(_PathSolver):
    """Solver using Dijkstra's shortest path algorithm."""

    name: ClassVar[str] = "dijkstra"

    def _search(self, graph: Graph, start: str, target: str) -> SearchResult:
        result = graph.dijkstra(start, target)
        if graph.search_state == "embedded":
            graph.unvisit(start)
        return result
