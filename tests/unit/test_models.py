"""Unit tests for knowledge graph models."""

import pytest

from neurograph.exceptions import ParseError
from neurograph.models import Entity, GraphEdge, GraphNode, KnowledgeGraphData, Relationship


class TestEntity:
    """Tests for Entity model."""

    def test_from_dict_full(self) -> None:
        """Test entity with all fields."""
        entity = Entity.from_dict({
            "id": "entity_1",
            "name": "Marie Curie",
            "type": "person",
            "description": "Chemist",
        })
        assert entity.id == "entity_1"
        assert entity.name == "Marie Curie"
        assert entity.type == "person"
        assert entity.description == "Chemist"

    def test_from_dict_missing_fields(self) -> None:
        """Missing fields degrade to defaults instead of failing."""
        entity = Entity.from_dict({"id": "x"})
        assert entity.name == ""
        assert entity.type == "other"
        assert entity.description is None

    def test_unknown_type_kept(self) -> None:
        """Types outside the known set are not rejected."""
        entity = Entity.from_dict({"id": "d", "name": "1905", "type": "date"})
        assert entity.type == "date"

    def test_from_dict_not_object(self) -> None:
        with pytest.raises(ParseError):
            Entity.from_dict("Marie Curie")

    def test_to_dict_omits_missing_description(self) -> None:
        entity = Entity(id="e1", name="Paris", type="place")
        assert entity.to_dict() == {"id": "e1", "name": "Paris", "type": "place"}


class TestRelationship:
    """Tests for Relationship model."""

    def test_from_dict(self) -> None:
        rel = Relationship.from_dict(
            {"source": "e1", "target": "e2", "label": "invented", "strength": 0.8}
        )
        assert rel.source == "e1"
        assert rel.target == "e2"
        assert rel.label == "invented"
        assert rel.strength == 0.8

    def test_strength_clamped(self) -> None:
        assert Relationship.from_dict({"strength": 3}).strength == 1.0
        assert Relationship.from_dict({"strength": -1}).strength == 0.0

    def test_strength_invalid(self) -> None:
        assert Relationship.from_dict({"strength": "strong"}).strength == 0.0
        assert Relationship.from_dict({}).strength == 0.0


class TestKnowledgeGraphData:
    """Tests for building graph data from extraction output."""

    def test_from_extraction(self) -> None:
        graph = KnowledgeGraphData.from_extraction(
            question="q",
            answer="a",
            extracted={
                "entities": [{"id": "e1", "name": "A", "type": "concept"}],
                "relationships": [{"source": "e1", "target": "e9", "label": "x", "strength": 0.5}],
            },
        )
        assert len(graph.entities) == 1
        assert len(graph.relationships) == 1
        # Dangling references are kept at this stage
        assert graph.relationships[0].target == "e9"

    def test_empty_object(self) -> None:
        """Missing keys degrade to empty lists."""
        graph = KnowledgeGraphData.from_extraction("q", "a", {})
        assert graph.entities == []
        assert graph.relationships == []

    def test_null_values(self) -> None:
        graph = KnowledgeGraphData.from_extraction("q", "a", {"entities": None, "relationships": None})
        assert graph.entities == []
        assert graph.relationships == []

    def test_top_level_not_object(self) -> None:
        with pytest.raises(ParseError):
            KnowledgeGraphData.from_extraction("q", "a", [])

    def test_entities_not_list(self) -> None:
        with pytest.raises(ParseError):
            KnowledgeGraphData.from_extraction("q", "a", {"entities": "none"})

    def test_to_dict(self) -> None:
        graph = KnowledgeGraphData(question="q", answer="a")
        assert graph.to_dict() == {"question": "q", "answer": "a", "entities": [], "relationships": []}


class TestViewModels:
    """Tests for GraphNode and GraphEdge."""

    def test_node_is_immutable(self) -> None:
        node = GraphNode(id="e1", label="A", type="concept", position=(1.0, 2.0, 3.0))
        with pytest.raises(AttributeError):
            node.position = (0.0, 0.0, 0.0)  # type: ignore[misc]

    def test_node_to_dict(self) -> None:
        node = GraphNode(id="e1", label="A", type="concept", position=(1.0, 2.0, 3.0))
        assert node.to_dict()["position"] == [1.0, 2.0, 3.0]

    def test_edge_to_dict(self) -> None:
        edge = GraphEdge(source="e1", target="e2", label="causes")
        assert edge.to_dict() == {"source": "e1", "target": "e2", "label": "causes"}
