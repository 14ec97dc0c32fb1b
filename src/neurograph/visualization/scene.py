"""3D scene composition for the dashboard.

Builds the render payload the browser draws with three.js: node spheres
with their palette color and interaction-dependent size, edge segments with
a midpoint label, plus the fixed camera, lights, controls and animation
rates. Only the payload is computed here; the page does the drawing.
"""

import logging
from dataclasses import dataclass

from neurograph.models import GraphEdge, GraphNode, Position
from neurograph.visualization.selection import Selected, SelectionState

logger = logging.getLogger(__name__)

TYPE_COLORS: dict[str, str] = {
    "person": "#f59e0b",  # amber
    "place": "#10b981",  # emerald
    "concept": "#8b5cf6",  # violet
    "organization": "#3b82f6",  # blue
    "event": "#ec4899",  # pink
    "technology": "#06b6d4",  # cyan
    "date": "#f97316",  # orange
    "product": "#a855f7",  # purple
    "other": "#64748b",  # slate
}

EDGE_COLOR = "#60a5fa"
EDGE_OPACITY = 0.4
BACKGROUND_COLOR = "#0a0a0a"
LABEL_OFFSET = 0.4


@dataclass(frozen=True)
class NodeAppearance:
    radius: float
    emissive_intensity: float

    def to_dict(self) -> dict:
        return {"radius": self.radius, "emissive_intensity": self.emissive_intensity}


IDLE = NodeAppearance(radius=0.4, emissive_intensity=0.4)
HOVERED = NodeAppearance(radius=0.45, emissive_intensity=0.6)
SELECTED = NodeAppearance(radius=0.5, emissive_intensity=0.8)

# Radians (or units) per animation frame
ANIMATION = {
    "node_spin": 0.003,
    "bob_amplitude": 0.001,
    "bob_frequency": 0.5,
    "group_spin": 0.0008,
}

CAMERA = {"position": [0, 5, 15], "fov": 60}

CONTROLS = {
    "enable_damping": True,
    "damping_factor": 0.05,
    "enable_zoom": True,
    "enable_pan": True,
    "min_distance": 5,
    "max_distance": 30,
}

LIGHTS = [
    {"kind": "ambient", "intensity": 0.6, "color": "#ffffff"},
    {"kind": "point", "position": [10, 10, 10], "intensity": 1.2, "color": "#ffffff"},
    {"kind": "point", "position": [-10, -10, -10], "intensity": 0.6, "color": "#60a5fa"},
    {"kind": "point", "position": [0, 10, 0], "intensity": 0.5, "color": "#a78bfa"},
]

GRID = {"size": 30, "divisions": 30, "center_color": "#1e293b", "line_color": "#0f172a"}

MATERIAL = {"metalness": 0.8, "roughness": 0.2, "segments": 32}


def color_for(entity_type: str) -> str:
    """Palette color for an entity type, the "other" color when unknown."""
    return TYPE_COLORS.get(entity_type, TYPE_COLORS["other"])


def node_appearance(is_selected: bool, is_hovered: bool = False) -> NodeAppearance:
    """Selection wins over hover. Edges never change with interaction state."""
    if is_selected:
        return SELECTED
    if is_hovered:
        return HOVERED
    return IDLE


def midpoint(start: Position, end: Position) -> Position:
    return (
        (start[0] + end[0]) * 0.5,
        (start[1] + end[1]) * 0.5,
        (start[2] + end[2]) * 0.5,
    )


def resolve_edges(
    nodes: list[GraphNode],
    edges: list[GraphEdge],
) -> tuple[list[dict], int]:
    """Resolve edge endpoints to positions.

    Edges whose source or target is not in the node set are skipped.
    Returns (renderable edges, number dropped).
    """
    positions = {node.id: node.position for node in nodes}
    resolved = []
    dropped = 0
    for index, edge in enumerate(edges):
        start = positions.get(edge.source)
        end = positions.get(edge.target)
        if start is None or end is None:
            dropped += 1
            continue
        resolved.append({
            "key": f"edge-{index}-{edge.source}-{edge.target}",
            "source": edge.source,
            "target": edge.target,
            "label": edge.label,
            "start": list(start),
            "end": list(end),
            "midpoint": list(midpoint(start, end)),
        })
    return resolved, dropped


def build_scene(
    nodes: list[GraphNode],
    edges: list[GraphEdge],
    selection: SelectionState,
    scene_key: int = 0,
) -> dict:
    """Compose the full render payload for the current graph state."""
    selected_id = selection.node_id if isinstance(selection, Selected) else None

    rendered_nodes = []
    for node in nodes:
        is_selected = node.id == selected_id
        appearance = node_appearance(is_selected)
        rendered_nodes.append({
            **node.to_dict(),
            "color": color_for(node.type),
            "selected": is_selected,
            "radius": appearance.radius,
            "emissive_intensity": appearance.emissive_intensity,
            "label_offset": appearance.radius + LABEL_OFFSET,
        })

    rendered_edges, dropped = resolve_edges(nodes, edges)
    if dropped:
        logger.warning(f"Dropped {dropped} edge(s) referencing unknown node ids")

    return {
        "key": scene_key,
        "nodes": rendered_nodes,
        "edges": rendered_edges,
        "dropped_edges": dropped,
        "appearance": {
            "idle": IDLE.to_dict(),
            "hovered": HOVERED.to_dict(),
            "selected": SELECTED.to_dict(),
            "label_offset": LABEL_OFFSET,
        },
        "edge_style": {"color": EDGE_COLOR, "opacity": EDGE_OPACITY},
        "material": MATERIAL,
        "animation": ANIMATION,
        "camera": CAMERA,
        "controls": CONTROLS,
        "lights": LIGHTS,
        "grid": GRID,
        "background": BACKGROUND_COLOR,
    }
