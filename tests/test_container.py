from pathlib import Path

import pytest

from weighted_graph.adapters.graph import DijkstraPathSolver, FileGraphRepository
from weighted_graph.config import AppConfig, GraphConfig, SearchConfig
from weighted_graph.container import Container
from weighted_graph.ports.graph import GraphRepositoryPort
from weighted_graph.services import PathFinderService


@pytest.fixture
def config(data_dir: Path) -> AppConfig:
    return AppConfig(
        graph=GraphConfig(data_dir=data_dir, input_file="weighted.txt"),
        search=SearchConfig(default_algorithm="dfs"),
    )


def test_create_default(config):
    container = Container.create_default(config)

    finder = container.resolve(PathFinderService)

    assert isinstance(finder.graph_repository, FileGraphRepository)
    assert set(finder.solvers) == {"dijkstra", "dfs"}
    assert finder.default_algorithm == "dfs"
    assert finder.find_path("A", "E").cost == 7


def test_singletons_are_shared(config):
    container = Container.create_default(config)

    assert container.resolve(GraphRepositoryPort) is container.resolve(GraphRepositoryPort)
    assert container.resolve(PathFinderService).graph_repository is container.resolve(
        GraphRepositoryPort
    )


def test_register_override(config):
    container = Container.create_default(config)
    container.register(DijkstraPathSolver, DijkstraPathSolver, singleton=False)

    assert container.resolve(DijkstraPathSolver) is not container.resolve(DijkstraPathSolver)


def test_resolve_unregistered():
    with pytest.raises(KeyError):
        Container().resolve(PathFinderService)


def test_clear_all(config):
    container = Container.create_default(config)
    container.clear_all()

    assert not container.is_registered(PathFinderService)


def test_register_replaces_cached_singleton(config):
    container = Container.create_default(config)
    first = container.resolve(GraphRepositoryPort)

    container.register(GraphRepositoryPort, lambda: FileGraphRepository(config.graph))

    assert container.resolve(GraphRepositoryPort) is not first
