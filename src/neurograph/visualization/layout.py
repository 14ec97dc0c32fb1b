"""Radial layout for extracted entities.

Entity i of N sits at angle 2*pi*i/N on a circle with a random radius in
[4, 6) and a random height in [-1.5, 1.5). No collision avoidance and no
force simulation; the randomness comes from an explicit generator so a
seeded layout is reproducible.
"""

import math
import random

from neurograph.models import Entity, GraphEdge, GraphNode, Relationship

MIN_RADIUS = 4.0
RADIUS_SPREAD = 2.0
HEIGHT_SPREAD = 3.0


def assign_radial_layout(
    entities: list[Entity],
    rng: random.Random | None = None,
) -> list[GraphNode]:
    """Create one node per entity, in entity order, with a radial position."""
    if rng is None:
        rng = random.Random()

    total = len(entities)
    nodes = []
    for index, entity in enumerate(entities):
        angle = (index / total) * math.pi * 2
        radius = MIN_RADIUS + rng.random() * RADIUS_SPREAD
        height = (rng.random() - 0.5) * HEIGHT_SPREAD

        nodes.append(
            GraphNode(
                id=entity.id,
                label=entity.name,
                type=entity.type,
                position=(math.cos(angle) * radius, height, math.sin(angle) * radius),
                description=entity.description,
            )
        )
    return nodes


def build_edges(relationships: list[Relationship]) -> list[GraphEdge]:
    """One edge per relationship. Dangling endpoints are kept here and dropped at render time."""
    return [
        GraphEdge(source=rel.source, target=rel.target, label=rel.label)
        for rel in relationships
    ]
