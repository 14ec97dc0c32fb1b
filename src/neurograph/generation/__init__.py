"""Generation layer - chat completion client and the answer/extraction pipeline."""

from neurograph.generation.llm_client import LLMClient, get_llm_client
from neurograph.generation.pipeline import (
    AnswerResult,
    GraphPipeline,
    StageResult,
    generate_knowledge_graph,
)

__all__ = [
    # LLM
    "LLMClient",
    "get_llm_client",
    # Pipeline
    "AnswerResult",
    "GraphPipeline",
    "StageResult",
    "generate_knowledge_graph",
]
