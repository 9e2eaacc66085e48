"""File Graph Repository adapter.

This adapter wraps the loaders in graph/load_graph.py and adds:
- Configuration injection (path, format, cost policy from config)
- Caching of the loaded graph
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ...config import GraphConfig, get_config
from ...graph.graph import Graph
from ...graph.load_graph import load_graph


@dataclass
class FileGraphRepository:
    """Graph repository that loads a text or JSON graph description.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (path, format, edge policy)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[Graph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> Graph:
        """Load the graph described by the configured file.

        Returns:
            The populated graph.

        Raises:
            GraphLoadError: If the file cannot be read or parsed.
            ConfigurationError: If the configured format is unknown.
        """
        if self._graph is not None:
            return self._graph

        path = self.config.input_path
        self._logger.debug(
            "Loading graph",
            extra={"path": str(path), "format": self.config.input_format},
        )

        graph = load_graph(
            path,
            input_format=self.config.input_format,
            graph=Graph.from_config(self.config),
            symmetric=self.config.symmetric_load,
        )
        self._graph = graph
        self._logger.info("Graph loaded", extra={"nodes": len(graph)})
        return graph

    def clear_cache(self) -> None:
        """Drop the cached graph so the next load re-reads the file."""
        self._graph = None
        self._logger.debug("Graph cache cleared")
