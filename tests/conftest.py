"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import os
from pathlib import Path

import pytest

from weighted_graph.config import reset_config
from weighted_graph.graph.graph import Graph


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Isolate tests from WG_* variables and cached configuration."""
    for name in list(os.environ):
        if name.startswith("WG_"):
            monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def data_dir() -> Path:
    """Return the directory holding the sample graph files."""
    return Path(__file__).parent / "data"


@pytest.fixture
def diamond() -> Graph:
    """A -> B (1), B -> C (1), B -> D (1)."""
    graph = Graph()
    for name in "ABCD":
        graph.add_node(name)
    graph.add_edge("A", "B", 1)
    graph.add_edge("B", "C", 1)
    graph.add_edge("B", "D", 1)
    return graph


@pytest.fixture
def detour() -> Graph:
    """Graph where the first edge explored leads to an expensive route.

    A -> C (10) is inserted before A -> B (1) and B -> C (1), so a
    depth-first walk reaches C at cost 10 while the cheapest cost is 2.
    """
    graph = Graph()
    for name in "ABCD":
        graph.add_node(name)
    graph.add_edge("A", "C", 10)
    graph.add_edge("A", "B", 1)
    graph.add_edge("B", "C", 1)
    graph.add_edge("C", "D", 3)
    return graph
