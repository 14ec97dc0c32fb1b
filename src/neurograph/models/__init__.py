"""Neurograph data models."""

from neurograph.models.graph import (
    ENTITY_TYPES,
    Entity,
    GraphEdge,
    GraphNode,
    KnowledgeGraphData,
    Position,
    Relationship,
)

__all__ = [
    "ENTITY_TYPES",
    "Entity",
    "Relationship",
    "KnowledgeGraphData",
    "GraphNode",
    "GraphEdge",
    "Position",
]
