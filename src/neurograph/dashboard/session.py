"""Dashboard session - the single owner of graph view state.

Handles question validation, the loading flag, notifications, reset and
the per-type legend. All mutation happens in response to discrete events
(generate, node click, reset); nothing runs in the background.

Reset does not cancel a generation that is still waiting on the API: when
that call resolves its graph is applied to whatever the session looks like
at that moment.
"""

import logging
import random
from collections import Counter
from dataclasses import dataclass
from typing import Literal

from neurograph.config import Settings, settings as default_settings
from neurograph.exceptions import GraphGenerationError
from neurograph.generation.pipeline import GraphPipeline
from neurograph.models import GraphEdge, GraphNode
from neurograph.visualization import (
    UNSELECTED,
    NodeDetail,
    Selected,
    SelectionState,
    assign_radial_layout,
    build_edges,
    build_scene,
    color_for,
    describe_relationships,
    partition_edges,
    toggle_selection,
)

logger = logging.getLogger(__name__)

NotificationVariant = Literal["default", "warning", "destructive"]


@dataclass
class Notification:
    """Transient, user-visible message (toast)."""

    title: str
    description: str
    variant: NotificationVariant = "default"

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "variant": self.variant,
        }


class DashboardSession:
    """View state for one dashboard: question, answer, graph and selection."""

    def __init__(
        self,
        pipeline: GraphPipeline,
        settings: Settings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.pipeline = pipeline
        self.settings = settings or default_settings
        self.rng = rng or random.Random(self.settings.layout_seed)

        self.question = ""
        self.answer = ""
        self.nodes: list[GraphNode] = []
        self.edges: list[GraphEdge] = []
        self.selection: SelectionState = UNSELECTED
        self.graph_key = 0
        self.is_loading = False

    async def generate(self, question: str) -> Notification:
        """Validate, run the pipeline and replace the graph on success."""
        if not question or not question.strip():
            return Notification(
                title="Question required",
                description="Please enter a question first",
                variant="destructive",
            )

        if self.is_loading:
            return Notification(
                title="Generation in progress",
                description="Wait for the current knowledge graph to finish",
                variant="warning",
            )

        self.question = question
        self.is_loading = True
        try:
            graph = await self.pipeline.generate(question)
        except GraphGenerationError as e:
            logger.error(f"Knowledge graph generation failed: {e}")
            return Notification(
                title="Error",
                description=str(e) or "Failed to generate knowledge graph",
                variant="destructive",
            )
        finally:
            self.is_loading = False

        # Selection is kept across regenerations; a reused id selects the new node.
        self.answer = graph.answer
        self.nodes = assign_radial_layout(graph.entities, self.rng)
        self.edges = build_edges(graph.relationships)

        return Notification(
            title="Knowledge graph generated",
            description=(
                f"Extracted {len(self.nodes)} entities and {len(self.edges)} relationships"
            ),
        )

    def select(self, node_id: str) -> SelectionState:
        """Toggle selection of a node. Ids not in the current graph are ignored."""
        if any(node.id == node_id for node in self.nodes):
            self.selection = toggle_selection(self.selection, node_id)
        return self.selection

    def clear_selection(self) -> None:
        self.selection = UNSELECTED

    def reset(self) -> None:
        """Clear everything and force the 3D scene to remount."""
        self.nodes = []
        self.edges = []
        self.graph_key += 1
        self.question = ""
        self.answer = ""
        self.selection = UNSELECTED

    @property
    def selected_node(self) -> GraphNode | None:
        if not isinstance(self.selection, Selected):
            return None
        for node in self.nodes:
            if node.id == self.selection.node_id:
                return node
        return None

    def detail(self) -> NodeDetail | None:
        node = self.selected_node
        if node is None:
            return None
        return describe_relationships(node, partition_edges(self.edges, node.id), self.nodes)

    def category_counts(self) -> dict[str, int]:
        """Entity count per type, in first-seen order."""
        return dict(Counter(node.type for node in self.nodes))

    def legend(self) -> list[dict]:
        return [
            {"type": entity_type, "count": count, "color": color_for(entity_type)}
            for entity_type, count in self.category_counts().items()
        ]

    def snapshot(self) -> dict:
        """JSON-ready view of the whole dashboard."""
        detail = self.detail()
        return {
            "question": self.question,
            "answer": self.answer,
            "is_loading": self.is_loading,
            "graph_key": self.graph_key,
            "entity_count": len(self.nodes),
            "relationship_count": len(self.edges),
            "legend": self.legend(),
            "selected_node_id": self.selection.node_id,
            "detail": detail.to_dict() if detail else None,
            "scene": build_scene(self.nodes, self.edges, self.selection, self.graph_key),
        }
