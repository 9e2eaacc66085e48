"""Tests for the path finder service."""

from dataclasses import dataclass

import pytest

from weighted_graph.adapters.graph import DepthFirstPathSolver, DijkstraPathSolver
from weighted_graph.domain.errors import ConfigurationError, NoPathError
from weighted_graph.graph.graph import Graph
from weighted_graph.services import PathFinderService


@dataclass
class StaticRepository:
    graph: Graph
    loads: int = 0

    def load(self) -> Graph:
        self.loads += 1
        return self.graph


@pytest.fixture
def finder(detour):
    return PathFinderService(
        graph_repository=StaticRepository(detour),
        solvers={"dijkstra": DijkstraPathSolver(), "dfs": DepthFirstPathSolver()},
    )


def test_default_algorithm_is_dijkstra(finder):
    result = finder.find_path("A", "C")

    assert result.names == ["A", "B", "C"]
    assert result.cost == 2


def test_explicit_algorithm(finder):
    result = finder.find_path("A", "C", algorithm="dfs")

    assert result.names == ["A", "C"]
    assert result.cost == 10


def test_configured_default_algorithm(detour):
    finder = PathFinderService(
        graph_repository=StaticRepository(detour),
        solvers={"dfs": DepthFirstPathSolver()},
        default_algorithm="dfs",
    )

    assert finder.find_path("A", "D").cost == 13


def test_unknown_algorithm(finder):
    with pytest.raises(ConfigurationError) as excinfo:
        finder.find_path("A", "C", algorithm="bfs")

    assert excinfo.value.setting_name == "algorithm"


def test_no_path_raises(finder):
    with pytest.raises(NoPathError):
        finder.find_path("D", "A")


def test_find_path_safe(finder):
    assert finder.find_path_safe("D", "A").is_empty
    assert finder.find_path_safe("A", "D").cost == 5


def test_compare(finder):
    results = finder.compare("A", "D")

    assert set(results) == {"dijkstra", "dfs"}
    assert results["dijkstra"].cost == 5
    assert results["dfs"].cost == 13
    assert results["dijkstra"].cost <= results["dfs"].cost


def test_compare_absent_target(finder):
    results = finder.compare("A", "Z")

    assert all(r.is_empty and r.cost == -1 for r in results.values())
