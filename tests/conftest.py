from __future__ import annotations

import os

import pytest

from walkgraph import Graph
from walkgraph.config import get_settings
from walkgraph.sample import build_sample_graph


@pytest.fixture
def chain_graph() -> Graph[str]:
    """A->B, A->C, B->D, C->D, D->E."""
    graph: Graph[str] = Graph(5)
    for vertex, label in enumerate("ABCDE"):
        graph.set_label(vertex, label)
    graph.add_edge(0, 1)
    graph.add_edge(0, 2)
    graph.add_edge(1, 3)
    graph.add_edge(2, 3)
    graph.add_edge(3, 4)
    return graph


@pytest.fixture
def cycle_graph() -> Graph[str]:
    """A->B, B->C, C->A."""
    return Graph.from_edges(3, [(0, 1), (1, 2), (2, 0)], labels=["A", "B", "C"])


@pytest.fixture
def sample_graph() -> Graph[str]:
    return build_sample_graph()


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    """Keep WALKGRAPH_* variables and cached settings from leaking between tests."""
    for key in list(os.environ):
        if key.startswith("WALKGRAPH_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
