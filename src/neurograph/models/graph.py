"""Knowledge graph models - extracted entities, relationships and their view models."""

from dataclasses import dataclass, field
from typing import Any

from neurograph.exceptions import ParseError

ENTITY_TYPES: tuple[str, ...] = (
    "person",
    "place",
    "concept",
    "organization",
    "event",
    "technology",
    "other",
)

Position = tuple[float, float, float]


def _require_object(value: Any, what: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ParseError(f"Expected {what} to be a JSON object, got {type(value).__name__}")
    return value


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


@dataclass
class Entity:
    """
    A named thing extracted from the answer text.

    The type is whatever the model produced; it is not checked against
    ENTITY_TYPES, the renderer falls back to the "other" color instead.
    """

    id: str
    name: str
    type: str = "other"
    description: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "Entity":
        data = _require_object(data, "entity")
        description = data.get("description")
        return cls(
            id=_text(data.get("id")),
            name=_text(data.get("name")),
            type=_text(data.get("type")) or "other",
            description=_text(description) if description is not None else None,
        )

    def to_dict(self) -> dict:
        result: dict[str, Any] = {"id": self.id, "name": self.name, "type": self.type}
        if self.description is not None:
            result["description"] = self.description
        return result


@dataclass
class Relationship:
    """A directed, labeled, weighted connection between two entities."""

    source: str
    target: str
    label: str
    strength: float = 0.0  # 0-1

    @classmethod
    def from_dict(cls, data: Any) -> "Relationship":
        data = _require_object(data, "relationship")
        try:
            strength = float(data.get("strength") or 0.0)
        except (TypeError, ValueError):
            strength = 0.0
        return cls(
            source=_text(data.get("source")),
            target=_text(data.get("target")),
            label=_text(data.get("label")),
            strength=min(1.0, max(0.0, strength)),
        )

    def to_dict(self) -> dict:
        return {
            "source": self.source,
            "target": self.target,
            "label": self.label,
            "strength": self.strength,
        }


@dataclass
class KnowledgeGraphData:
    """Result of one generation: the question, the answer and the extracted graph."""

    question: str
    answer: str
    entities: list[Entity] = field(default_factory=list)
    relationships: list[Relationship] = field(default_factory=list)

    @classmethod
    def from_extraction(cls, question: str, answer: str, extracted: Any) -> "KnowledgeGraphData":
        """Build from the parsed extraction JSON.

        Missing "entities"/"relationships" keys (or null values) degrade to
        empty lists. Anything that is not the expected container shape is a
        ParseError.
        """
        extracted = _require_object(extracted, "extraction result")

        raw_entities = extracted.get("entities") or []
        raw_relationships = extracted.get("relationships") or []
        if not isinstance(raw_entities, list):
            raise ParseError("Expected 'entities' to be a JSON array")
        if not isinstance(raw_relationships, list):
            raise ParseError("Expected 'relationships' to be a JSON array")

        return cls(
            question=question,
            answer=answer,
            entities=[Entity.from_dict(e) for e in raw_entities],
            relationships=[Relationship.from_dict(r) for r in raw_relationships],
        )

    def to_dict(self) -> dict:
        return {
            "question": self.question,
            "answer": self.answer,
            "entities": [e.to_dict() for e in self.entities],
            "relationships": [r.to_dict() for r in self.relationships],
        }


@dataclass(frozen=True)
class GraphNode:
    """Rendered node. Position is assigned once, at creation."""

    id: str
    label: str
    type: str
    position: Position
    description: str | None = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "label": self.label,
            "type": self.type,
            "position": list(self.position),
            "description": self.description,
        }


@dataclass(frozen=True)
class GraphEdge:
    """Rendered edge. Endpoints are resolved against the node list at render time."""

    source: str
    target: str
    label: str

    def to_dict(self) -> dict:
        return {"source": self.source, "target": self.target, "label": self.label}
