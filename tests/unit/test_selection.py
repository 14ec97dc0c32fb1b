"""Unit tests for node selection and relation partitioning."""

from neurograph.models import GraphEdge, GraphNode
from neurograph.visualization.selection import (
    UNSELECTED,
    Selected,
    Unselected,
    clear_selection,
    describe_relationships,
    partition_edges,
    toggle_selection,
)


class TestToggleSelection:
    """Tests for the selection reducer."""

    def test_select_from_unselected(self) -> None:
        assert toggle_selection(UNSELECTED, "e1") == Selected("e1")

    def test_click_selected_node_unselects(self) -> None:
        """Test two clicks on the same node return to Unselected."""
        state = toggle_selection(UNSELECTED, "e1")
        state = toggle_selection(state, "e1")
        assert state == UNSELECTED
        assert isinstance(state, Unselected)

    def test_click_other_node_moves_directly(self) -> None:
        state = toggle_selection(Selected("e1"), "e2")
        assert state == Selected("e2")

    def test_clear(self) -> None:
        assert clear_selection() == UNSELECTED

    def test_node_id(self) -> None:
        assert UNSELECTED.node_id is None
        assert Selected("e3").node_id == "e3"


class TestPartitionEdges:
    """Tests for partition_edges."""

    def test_example(self) -> None:
        """Test one edge e1 -> e2 seen from both ends."""
        edge = GraphEdge(source="e1", target="e2", label="causes")

        from_e1 = partition_edges([edge], "e1")
        assert from_e1.outgoing == [edge]
        assert from_e1.incoming == []

        from_e2 = partition_edges([edge], "e2")
        assert from_e2.incoming == [edge]
        assert from_e2.outgoing == []

    def test_union_is_touching_edges(self) -> None:
        edges = [
            GraphEdge(source="a", target="b", label="1"),
            GraphEdge(source="b", target="c", label="2"),
            GraphEdge(source="c", target="a", label="3"),
            GraphEdge(source="c", target="d", label="4"),
        ]

        result = partition_edges(edges, "a")
        touching = [e for e in edges if e.source == "a" or e.target == "a"]

        assert sorted(result.incoming + result.outgoing, key=lambda e: e.label) == touching
        assert not set(result.incoming) & set(result.outgoing)

    def test_self_loop_in_both(self) -> None:
        loop = GraphEdge(source="a", target="a", label="refers to")

        result = partition_edges([loop], "a")

        assert result.incoming == [loop]
        assert result.outgoing == [loop]

    def test_unknown_node(self) -> None:
        result = partition_edges([GraphEdge(source="a", target="b", label="x")], "z")
        assert result.incoming == []
        assert result.outgoing == []


class TestDescribeRelationships:
    """Tests for detail panel resolution."""

    def test_other_labels(self, sample_nodes: list[GraphNode], sample_edges: list[GraphEdge]) -> None:
        node = sample_nodes[1]  # e2

        detail = describe_relationships(node, partition_edges(sample_edges, "e2"), sample_nodes)

        assert [(r.label, r.other_label) for r in detail.incoming] == [("explained", "Albert Einstein")]
        assert [(r.label, r.other_label) for r in detail.outgoing] == [("founded", "Quantum mechanics")]

    def test_missing_other_end_blank(self, sample_nodes: list[GraphNode]) -> None:
        """Test an unknown endpoint renders with an empty label."""
        edges = [GraphEdge(source="e1", target="ghost", label="haunts")]

        detail = describe_relationships(sample_nodes[0], partition_edges(edges, "e1"), sample_nodes)

        assert detail.outgoing[0].other_label == ""
        assert detail.outgoing[0].other_id == "ghost"

    def test_to_dict(self, sample_nodes: list[GraphNode], sample_edges: list[GraphEdge]) -> None:
        detail = describe_relationships(
            sample_nodes[0], partition_edges(sample_edges, "e1"), sample_nodes
        )
        data = detail.to_dict()

        assert data["node"]["id"] == "e1"
        assert data["incoming"] == []
        assert data["outgoing"] == [
            {"label": "explained", "other_id": "e2", "other_label": "Photoelectric effect"}
        ]
