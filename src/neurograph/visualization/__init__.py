"""Visualization layer - layout, selection and 3D scene composition."""

from neurograph.visualization.layout import assign_radial_layout, build_edges
from neurograph.visualization.scene import TYPE_COLORS, build_scene, color_for, node_appearance
from neurograph.visualization.selection import (
    UNSELECTED,
    NodeDetail,
    NodeRelationships,
    RelationView,
    Selected,
    SelectionState,
    Unselected,
    clear_selection,
    describe_relationships,
    partition_edges,
    toggle_selection,
)

__all__ = [
    # Layout
    "assign_radial_layout",
    "build_edges",
    # Scene
    "TYPE_COLORS",
    "build_scene",
    "color_for",
    "node_appearance",
    # Selection
    "UNSELECTED",
    "Selected",
    "SelectionState",
    "Unselected",
    "NodeDetail",
    "NodeRelationships",
    "RelationView",
    "clear_selection",
    "describe_relationships",
    "partition_edges",
    "toggle_selection",
]
