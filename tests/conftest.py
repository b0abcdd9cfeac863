"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from __future__ import annotations

import pytest

from labeled_graph import LabeledGraph, reset_config
from labeled_graph.config import GraphConfig


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Isolate every test from LG_* variables and the cached config."""
    for name in ("LG_GRAPH_NEIGHBOR_ORDER", "LG_LOG_LEVEL", "LG_LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def diamond() -> LabeledGraph[str]:
    """A -> B(1), A -> C(4), B -> C(1), C -> D(2), plus isolated Z."""
    graph: LabeledGraph[str] = LabeledGraph()
    for vertex in ("A", "B", "C", "D", "Z"):
        graph.add_vertex(vertex, f"data-{vertex}")
    graph.add_directed_edge("A", "B", 1)
    graph.add_directed_edge("A", "C", 4)
    graph.add_directed_edge("B", "C", 1)
    graph.add_directed_edge("C", "D", 2)
    return graph


@pytest.fixture
def sorted_config() -> GraphConfig:
    return GraphConfig(neighbor_order="sorted")


class Recorder:
    """Visitor that records every (vertex, payload) call in order."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, object]] = []

    def __call__(self, vertex: str, payload: object) -> None:
        self.calls.append((vertex, payload))

    @property
    def order(self) -> list[str]:
        return [vertex for vertex, _ in self.calls]


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()
