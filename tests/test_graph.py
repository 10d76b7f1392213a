"""
Tests for the Typed Edge Graph and Node State Store
"""

import pytest

from norm_network import (
    TypedEdgeGraph,
    EdgeKind,
    NetworkEdge,
    NodeState,
    NodeStateStore,
    DuplicateEdgeError,
    EndpointMissingError,
)


class TestTypedEdgeGraph:
    def test_create_graph(self):
        graph = TypedEdgeGraph()
        assert len(graph) == 0
        assert graph.get_nodes() == []
        assert graph.num_edges() == 0

    def test_add_node_is_idempotent(self):
        graph = TypedEdgeGraph()
        assert graph.add_node("a") is True
        assert graph.add_node("a") is False
        assert graph.get_nodes() == ["a"]
        assert "a" in graph

    def test_add_edge(self):
        graph = TypedEdgeGraph()
        graph.add_node("a")
        graph.add_node("b")

        edge = graph.add_edge("a", "b", EdgeKind.GENERALISATION)

        assert edge == NetworkEdge("a", "b", EdgeKind.GENERALISATION)
        assert graph.has_edge("a", "b", EdgeKind.GENERALISATION)
        assert not graph.has_edge("b", "a", EdgeKind.GENERALISATION)
        assert graph.get_out_edges("a") == [edge]
        assert graph.get_in_edges("b") == [edge]
        assert graph.get_out_edges("b") == []

    def test_add_edge_missing_endpoint(self):
        graph = TypedEdgeGraph()
        graph.add_node("a")

        with pytest.raises(EndpointMissingError) as excinfo:
            graph.add_edge("a", "b", EdgeKind.GENERALISATION)

        assert excinfo.value.missing == "b"
        assert graph.num_edges() == 0

    def test_duplicate_edge_rejected(self):
        graph = TypedEdgeGraph()
        graph.add_node("a")
        graph.add_node("b")
        original = graph.add_edge("a", "b", EdgeKind.SUBSTITUTABILITY)

        with pytest.raises(DuplicateEdgeError):
            graph.add_edge("a", "b", EdgeKind.SUBSTITUTABILITY)

        assert graph.get_edge("a", "b", EdgeKind.SUBSTITUTABILITY) is original
        assert graph.num_edges() == 1

    def test_parallel_edges_of_different_kinds(self):
        graph = TypedEdgeGraph()
        graph.add_node("a")
        graph.add_node("b")
        graph.add_edge("a", "b", EdgeKind.GENERALISATION)
        graph.add_edge("a", "b", EdgeKind.COMPLEMENTARITY)

        assert graph.num_edges() == 2
        assert len(graph.get_out_edges("a", EdgeKind.GENERALISATION)) == 1
        assert len(graph.get_out_edges("a", EdgeKind.COMPLEMENTARITY)) == 1
        assert graph.get_out_edges("a", EdgeKind.INCLUSION) == []

    def test_remove_edge(self):
        graph = TypedEdgeGraph()
        graph.add_node("a")
        graph.add_node("b")
        graph.add_edge("a", "b", EdgeKind.REGULATION)

        removed = graph.remove_edge("a", "b", EdgeKind.REGULATION)

        assert removed.kind == EdgeKind.REGULATION
        assert graph.get_out_edges("a") == []
        assert graph.get_in_edges("b") == []

    def test_remove_absent_edge_is_noop(self):
        graph = TypedEdgeGraph()
        graph.add_node("a")
        assert graph.remove_edge("a", "b", EdgeKind.CONCURRENCY) is None
        assert graph.remove_edge("x", "y", EdgeKind.CONCURRENCY) is None

    def test_remove_node_purges_incident_edges(self):
        graph = TypedEdgeGraph()
        for node in ("a", "b", "c"):
            graph.add_node(node)
        graph.add_edge("a", "b", EdgeKind.GENERALISATION)
        graph.add_edge("b", "c", EdgeKind.GENERALISATION)
        graph.add_edge("c", "b", EdgeKind.INCLUSION)

        removed = graph.remove_node("b")

        assert len(removed) == 3
        assert "b" not in graph
        assert graph.get_out_edges("a") == []
        assert graph.get_in_edges("c") == []
        assert graph.get_out_edges("c") == []
        assert graph.num_edges() == 0

    def test_remove_node_with_self_loop(self):
        graph = TypedEdgeGraph()
        graph.add_node("a")
        graph.add_edge("a", "a", EdgeKind.CONCURRENCY)

        graph.remove_node("a")

        assert len(graph) == 0
        assert graph.get_edges() == []

    def test_queries_on_unregistered_node(self):
        graph = TypedEdgeGraph()
        assert graph.get_out_edges("ghost") == []
        assert graph.get_in_edges("ghost") == []
        assert graph.remove_node("ghost") == []
        assert not graph.has_node("ghost")

    def test_enumeration_keeps_insertion_order(self):
        graph = TypedEdgeGraph()
        for node in ("p", "c1", "c2", "c3"):
            graph.add_node(node)
        for child in ("c2", "c1", "c3"):
            graph.add_edge(child, "p", EdgeKind.GENERALISATION)

        sources = [edge.source for edge in graph.get_in_edges("p")]
        assert sources == ["c2", "c1", "c3"]

    def test_get_edges_by_kind(self):
        graph = TypedEdgeGraph()
        for node in ("a", "b", "c"):
            graph.add_node(node)
        graph.add_edge("a", "b", EdgeKind.GENERALISATION)
        graph.add_edge("b", "c", EdgeKind.SUBSTITUTABILITY)

        assert len(graph.get_edges()) == 2
        assert graph.get_edges(EdgeKind.SUBSTITUTABILITY) == [
            NetworkEdge("b", "c", EdgeKind.SUBSTITUTABILITY)
        ]


class TestNetworkEdge:
    def test_value_semantics(self):
        first = NetworkEdge("a", "b", EdgeKind.GENERALISATION)
        second = NetworkEdge("a", "b", EdgeKind.GENERALISATION)
        assert first == second
        assert hash(first) == hash(second)
        assert first != NetworkEdge("a", "b", EdgeKind.INCLUSION)

    def test_str(self):
        edge = NetworkEdge("a", "b", EdgeKind.GENERALISATION)
        assert str(edge) == "a -[generalisation]-> b"

    def test_six_edge_kinds(self):
        assert len(EdgeKind) == 6


class TestNodeStateStore:
    def test_default_state_is_inactive(self):
        store = NodeStateStore()
        assert store.get_state("a") == NodeState.INACTIVE

    def test_set_state_reports_change(self):
        store = NodeStateStore()
        assert store.set_state("a", NodeState.ACTIVE) is True
        assert store.set_state("a", NodeState.ACTIVE) is False
        assert store.get_state("a") == NodeState.ACTIVE
        assert store.set_state("a", NodeState.INACTIVE) is True
        assert store.get_state("a") == NodeState.INACTIVE

    def test_set_invalid_state(self):
        store = NodeStateStore()
        with pytest.raises(ValueError):
            store.set_state("a", "active")

    def test_discard(self):
        store = NodeStateStore()
        store.set_state("a", NodeState.ACTIVE)
        store.discard("a")
        store.discard("never-set")
        assert store.get_state("a") == NodeState.INACTIVE


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
