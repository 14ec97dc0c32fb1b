"""Pytest configuration and fixtures."""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from neurograph.config import Settings
from neurograph.generation.llm_client import LLMClient
from neurograph.generation.pipeline import GraphPipeline
from neurograph.models import Entity, GraphEdge, GraphNode, KnowledgeGraphData, Relationship

SAMPLE_ANSWER = (
    "Albert Einstein explained the photoelectric effect in 1905, "
    "which helped found quantum mechanics."
)

SAMPLE_EXTRACTION = {
    "entities": [
        {"id": "e1", "name": "Albert Einstein", "type": "person", "description": "Physicist"},
        {"id": "e2", "name": "Photoelectric effect", "type": "concept"},
        {"id": "e3", "name": "Quantum mechanics", "type": "concept", "description": "Physics theory"},
    ],
    "relationships": [
        {"source": "e1", "target": "e2", "label": "explained", "strength": 0.9},
        {"source": "e2", "target": "e3", "label": "founded", "strength": 0.7},
    ],
}


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with a fixed key and layout seed."""
    return Settings(
        openai_api_key="sk-test",
        llm_base_url="http://localhost:11434/v1",
        llm_model="gpt-4o",
        llm_timeout=None,
        answer_temperature=0.7,
        answer_max_tokens=800,
        extraction_temperature=0.3,
        extraction_max_tokens=1500,
        layout_seed=42,
    )


@pytest.fixture
def sample_answer() -> str:
    """Answer text the mock model gives for the sample question."""
    return SAMPLE_ANSWER


@pytest.fixture
def mock_llm_client() -> LLMClient:
    """Mock LLM client answering once, then returning the sample extraction JSON."""
    client = MagicMock(spec=LLMClient)
    client.generate = AsyncMock(side_effect=[SAMPLE_ANSWER, json.dumps(SAMPLE_EXTRACTION)])
    client.close = AsyncMock()
    return client


@pytest.fixture
def sample_graph() -> KnowledgeGraphData:
    """Sample generation result."""
    return KnowledgeGraphData(
        question="How is Einstein related to quantum mechanics?",
        answer=SAMPLE_ANSWER,
        entities=[Entity.from_dict(e) for e in SAMPLE_EXTRACTION["entities"]],
        relationships=[Relationship.from_dict(r) for r in SAMPLE_EXTRACTION["relationships"]],
    )


@pytest.fixture
def mock_pipeline(sample_graph: KnowledgeGraphData) -> GraphPipeline:
    """Mock pipeline returning the sample graph."""
    pipeline = MagicMock(spec=GraphPipeline)
    pipeline.generate = AsyncMock(return_value=sample_graph)
    return pipeline


@pytest.fixture
def sample_nodes() -> list[GraphNode]:
    """Three nodes at fixed positions."""
    return [
        GraphNode(id="e1", label="Albert Einstein", type="person", position=(4.0, 0.5, 0.0)),
        GraphNode(id="e2", label="Photoelectric effect", type="concept", position=(-2.0, -1.0, 4.0)),
        GraphNode(id="e3", label="Quantum mechanics", type="concept", position=(-2.0, 1.0, -4.0)),
    ]


@pytest.fixture
def sample_edges() -> list[GraphEdge]:
    """Edges between the sample nodes."""
    return [
        GraphEdge(source="e1", target="e2", label="explained"),
        GraphEdge(source="e2", target="e3", label="founded"),
    ]
