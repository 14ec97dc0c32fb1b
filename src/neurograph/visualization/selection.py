"""Node selection state and relation inspection.

Selection is a two-state machine, Unselected or Selected(node_id), driven
by toggle_selection. Clicking the selected node clears the selection and
clicking any other node selects it directly.
"""

from dataclasses import dataclass, field

from neurograph.models import GraphEdge, GraphNode


@dataclass(frozen=True)
class Unselected:
    """No node is selected."""

    node_id: None = None


@dataclass(frozen=True)
class Selected:
    """Exactly one node is selected."""

    node_id: str


SelectionState = Unselected | Selected

UNSELECTED = Unselected()


def toggle_selection(state: SelectionState, node_id: str) -> SelectionState:
    """Reduce a click on node_id into the next selection state."""
    if isinstance(state, Selected) and state.node_id == node_id:
        return UNSELECTED
    return Selected(node_id)


def clear_selection() -> SelectionState:
    return UNSELECTED


@dataclass
class NodeRelationships:
    """Edges touching a node. A self-loop appears in both lists."""

    incoming: list[GraphEdge] = field(default_factory=list)
    outgoing: list[GraphEdge] = field(default_factory=list)


def partition_edges(edges: list[GraphEdge], node_id: str) -> NodeRelationships:
    """Split edges into incoming (target == node_id) and outgoing (source == node_id)."""
    return NodeRelationships(
        incoming=[e for e in edges if e.target == node_id],
        outgoing=[e for e in edges if e.source == node_id],
    )


@dataclass
class RelationView:
    """One row of the detail panel."""

    label: str
    other_id: str
    other_label: str

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "other_id": self.other_id,
            "other_label": self.other_label,
        }


@dataclass
class NodeDetail:
    """Detail panel contents for the selected node."""

    node: GraphNode
    incoming: list[RelationView]
    outgoing: list[RelationView]

    def to_dict(self) -> dict:
        return {
            "node": self.node.to_dict(),
            "incoming": [r.to_dict() for r in self.incoming],
            "outgoing": [r.to_dict() for r in self.outgoing],
        }


def _label_for(node_id: str, nodes: list[GraphNode]) -> str:
    for node in nodes:
        if node.id == node_id:
            return node.label
    return ""


def describe_relationships(
    node: GraphNode,
    relationships: NodeRelationships,
    nodes: list[GraphNode],
) -> NodeDetail:
    """Resolve the other endpoint of each edge to its display label ("" if unknown)."""
    return NodeDetail(
        node=node,
        incoming=[
            RelationView(label=e.label, other_id=e.source, other_label=_label_for(e.source, nodes))
            for e in relationships.incoming
        ],
        outgoing=[
            RelationView(label=e.label, other_id=e.target, other_label=_label_for(e.target, nodes))
            for e in relationships.outgoing
        ],
    )
