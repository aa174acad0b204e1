"""Tests for the pygraph facade."""

from __future__ import annotations

import numpy as np

from incidencegraph import DEFAULT_WEIGHT, pygraph


class TestFacade:
    def test_overview_scenario(self, facade: pygraph, build) -> None:
        build(facade, "ABC", [("A", "C"), ("A", "B")])
        assert facade.get_edge("B", "A") is None
        edge = facade.get_edge("A", "B")
        assert edge.weight == DEFAULT_WEIGHT
        assert len(facade.get_out_edges_of("A")) == 2
        assert len(facade.get_in_edges_of("B")) == 1
        assert len(facade.get_all_edges_of("A")) == 2

        assert facade.remove_node("C").id == "C"
        assert facade.edge_size == 1
        assert facade.remove_edge("A", "B") is edge
        assert facade.edge_size == 0
        assert facade.node_size == 2

    def test_container_protocol(self, facade: pygraph, build) -> None:
        build(facade, "AB")
        assert "A" in facade
        assert "Z" not in facade
        assert len(facade) == 2
        assert facade.has_node("B")
        assert repr(facade) == "pygraph(node_size=2, edge_size=0)"

    def test_default_weight(self) -> None:
        g = pygraph(default_weight=3)
        g.add_node("A")
        assert g.default_weight == 3
        assert g.add_edge("A", "A").weight == 3
        assert g.add_node("A") is None

    def test_traversal(self, facade: pygraph, build) -> None:
        build(facade, "ABC", [("A", "B"), ("B", "C")])
        nodes, edges = [], []
        facade.for_each_node(lambda node: nodes.append(node.id))
        facade.for_each_edge(lambda edge: edges.append(edge.endpoints))
        assert sorted(nodes) == ["A", "B", "C"]
        assert sorted(edges) == [("A", "B"), ("B", "C")]

    def test_analysis_delegation(self, facade: pygraph, build) -> None:
        build(facade, "ABC", [("A", "B"), ("A", "C"), ("C", "C")])
        assert sorted(facade.get_successors("A")) == ["B", "C"]
        assert facade.get_predecessors("B") == ["A"]
        assert facade.get_out_degree("A") == 2
        assert facade.get_in_degree("C") == 2
        assert facade.get_degree("C") == 2
        assert facade.get_sources() == ["A"]
        assert facade.get_sinks() == ["B"]
        matrix, order = facade.get_weight_matrix()
        assert order == ["A", "B", "C"]
        assert matrix[2, 2] == 1
        assert np.count_nonzero(matrix) == 3

    def test_maintenance_delegation(self, facade: pygraph, build) -> None:
        build(facade, "ABC", [("A", "B"), ("C", "A")])
        facade.remove_node("A")
        assert facade.count_ghosts() == 2
        assert facade.purge_ghosts() == 2
        assert facade.count_ghosts() == 0
        assert facade.verify_counters()
        assert facade.edge_size == 0

    def test_removed_node_accepts_new_edges_after_readd(self, facade: pygraph, build) -> None:
        build(facade, "AB", [("A", "B")])
        facade.remove_node("A")
        facade.add_node("A")
        assert facade.get_in_edges_of("B") == []
        assert facade.add_edge("A", "B", 2).weight == 2
        assert facade.edge_size == 1
        assert facade.verify_counters()
