"""Path finder service - Main orchestrator.

Loads the graph through the repository port and dispatches path queries
to the configured solver.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

from ..domain.errors import ConfigurationError
from ..domain.models import SearchResult
from ..ports.graph import GraphRepositoryPort, PathSolverPort


@dataclass
class PathFinderService:
    """Service answering path queries over a loaded graph.

    Attributes:
        graph_repository: Loads the graph
        solvers: Path solvers keyed by algorithm name
        default_algorithm: Algorithm used when a query names none
    """

    graph_repository: GraphRepositoryPort
    solvers: Dict[str, PathSolverPort]
    default_algorithm: str = "dijkstra"

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _solver(self, algorithm: Optional[str]) -> PathSolverPort:
        name = algorithm or self.default_algorithm
        solver = self.solvers.get(name)
        if solver is None:
            raise ConfigurationError(
                f"Unknown search algorithm: {name}",
                setting_name="algorithm",
                expected_type=" | ".join(sorted(self.solvers)),
            )
        return solver

    def find_path(
        self, start: str, target: str, algorithm: Optional[str] = None
    ) -> SearchResult:
        """Find a path between two named nodes.

        Args:
            start: Name of the start node.
            target: Name of the target node.
            algorithm: Solver name, the default algorithm when omitted.

        Returns:
            SearchResult with the path and its cost.

        Raises:
            ConfigurationError: If the algorithm is unknown.
            GraphLoadError: If the graph cannot be loaded.
            NodeNotFoundError: If an endpoint is not in the graph.
            NoPathError: If no path exists.
        """
        solver = self._solver(algorithm)
        graph = self.graph_repository.load()
        self._logger.debug(
            "Finding path",
            extra={"algorithm": solver.name, "start": start, "target": target},
        )
        return solver.solve(graph, start, target)

    def find_path_safe(
        self, start: str, target: str, algorithm: Optional[str] = None
    ) -> SearchResult:
        """Like find_path(), but returns an empty result when none exists."""
        solver = self._solver(algorithm)
        return solver.solve_safe(self.graph_repository.load(), start, target)

    def compare(self, start: str, target: str) -> Dict[str, SearchResult]:
        """Run every solver on the same query.

        Returns:
            Results keyed by algorithm name, empty results included.
        """
        graph = self.graph_repository.load()
        results = {
            name: solver.solve_safe(graph, start, target)
            for name, solver in self.solvers.items()
        }
        self._logger.info(
            "Compared solvers",
            extra={
                "start": start,
                "target": target,
                "costs": {name: r.cost for name, r in results.items()},
            },
        )
        return results
