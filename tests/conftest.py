"""Shared pytest fixtures for incidencegraph tests."""

from __future__ import annotations

from typing import Iterable

import pytest

from incidencegraph import IncidenceGraph, pygraph


@pytest.fixture
def graph() -> IncidenceGraph:
    """Empty core graph."""
    return IncidenceGraph()


@pytest.fixture
def abc_graph() -> IncidenceGraph:
    """Nodes A, B, C with edges A -> C and A -> B."""
    g = IncidenceGraph()
    for node_id in ("A", "B", "C"):
        g.add_node(node_id)
    g.add_edge("A", "C")
    g.add_edge("A", "B")
    return g


@pytest.fixture
def facade() -> pygraph:
    """Empty facade graph."""
    return pygraph()


@pytest.fixture
def build():
    """Helper that adds single-letter nodes then the given edges, asserting success."""

    def _build(g, nodes: str, edges: Iterable[tuple[str, str]] = ()) -> None:
        for node_id in nodes:
            assert g.add_node(node_id) is not None
        for from_id, to_id in edges:
            assert g.add_edge(from_id, to_id) is not None

    return _build
