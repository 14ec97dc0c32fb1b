"""Unit tests for 3D scene composition."""

import logging

import pytest

from neurograph.models import ENTITY_TYPES, GraphEdge, GraphNode
from neurograph.visualization.scene import (
    HOVERED,
    IDLE,
    SELECTED,
    TYPE_COLORS,
    build_scene,
    color_for,
    midpoint,
    node_appearance,
    resolve_edges,
)
from neurograph.visualization.selection import UNSELECTED, Selected


class TestPalette:
    """Tests for type colors."""

    def test_known_types(self) -> None:
        assert color_for("person") == "#f59e0b"
        assert color_for("technology") == "#06b6d4"

    def test_unknown_type_uses_other(self) -> None:
        assert color_for("spaceship") == TYPE_COLORS["other"]

    def test_every_entity_type_has_color(self) -> None:
        for entity_type in ENTITY_TYPES:
            assert entity_type in TYPE_COLORS


class TestNodeAppearance:
    """Tests for interaction-dependent node appearance."""

    def test_idle(self) -> None:
        assert node_appearance(False) == IDLE
        assert IDLE.radius == 0.4

    def test_hovered(self) -> None:
        assert node_appearance(False, is_hovered=True) == HOVERED

    def test_selected_wins_over_hover(self) -> None:
        assert node_appearance(True, is_hovered=True) == SELECTED
        assert SELECTED.emissive_intensity == 0.8


class TestResolveEdges:
    """Tests for edge endpoint resolution."""

    def test_midpoint(self) -> None:
        assert midpoint((0.0, 0.0, 0.0), (2.0, 4.0, -6.0)) == (1.0, 2.0, -3.0)

    def test_dangling_edges_dropped(self, sample_nodes: list[GraphNode]) -> None:
        edges = [
            GraphEdge(source="e1", target="e2", label="explained"),
            GraphEdge(source="e1", target="nowhere", label="lost"),
            GraphEdge(source="ghost", target="e3", label="lost"),
        ]

        resolved, dropped = resolve_edges(sample_nodes, edges)

        assert dropped == 2
        assert len(resolved) == 1
        assert resolved[0]["start"] == [4.0, 0.5, 0.0]
        assert resolved[0]["end"] == [-2.0, -1.0, 4.0]
        assert resolved[0]["midpoint"] == [1.0, -0.25, 2.0]


class TestBuildScene:
    """Tests for build_scene."""

    def test_payload(self, sample_nodes: list[GraphNode], sample_edges: list[GraphEdge]) -> None:
        scene = build_scene(sample_nodes, sample_edges, UNSELECTED, scene_key=3)

        assert scene["key"] == 3
        assert len(scene["nodes"]) == 3
        assert len(scene["edges"]) == 2
        assert scene["dropped_edges"] == 0
        assert scene["camera"] == {"position": [0, 5, 15], "fov": 60}
        assert scene["controls"]["min_distance"] == 5
        assert scene["controls"]["max_distance"] == 30
        assert scene["nodes"][0]["color"] == TYPE_COLORS["person"]

    def test_selection_changes_nodes_only(
        self, sample_nodes: list[GraphNode], sample_edges: list[GraphEdge]
    ) -> None:
        before = build_scene(sample_nodes, sample_edges, UNSELECTED)
        after = build_scene(sample_nodes, sample_edges, Selected("e2"))

        selected = [n for n in after["nodes"] if n["selected"]]
        assert [n["id"] for n in selected] == ["e2"]
        assert selected[0]["radius"] == SELECTED.radius
        assert selected[0]["emissive_intensity"] == SELECTED.emissive_intensity
        assert after["nodes"][0]["radius"] == IDLE.radius
        assert after["edges"] == before["edges"]

    def test_dropped_edges_logged(
        self, sample_nodes: list[GraphNode], caplog: pytest.LogCaptureFixture
    ) -> None:
        edges = [GraphEdge(source="e1", target="missing", label="x")]

        with caplog.at_level(logging.WARNING):
            scene = build_scene(sample_nodes, edges, UNSELECTED)

        assert scene["edges"] == []
        assert scene["dropped_edges"] == 1
        assert "Dropped 1 edge" in caplog.text

    def test_empty(self) -> None:
        scene = build_scene([], [], UNSELECTED)
        assert scene["nodes"] == []
        assert scene["edges"] == []
