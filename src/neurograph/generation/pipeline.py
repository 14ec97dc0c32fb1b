"""Graph generation pipeline - answer the question, then extract a graph from the answer.

Two stages, awaited strictly in sequence because the extraction prompt
embeds the answer text:

1. Answer: question -> AnswerResult
2. Extraction: AnswerResult -> KnowledgeGraphData

Each stage returns a StageResult. The pipeline stops at the first stage
that failed and hands that failure back to the caller.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Generic, TypeVar

from neurograph.config import Settings, settings as default_settings
from neurograph.exceptions import GraphGenerationError, ParseError
from neurograph.generation.llm_client import LLMClient, get_llm_client
from neurograph.generation.prompts import (
    ANSWER_SYSTEM_PROMPT,
    EXTRACTION_PROMPT,
    EXTRACTION_SYSTEM_PROMPT,
    JSON_RESPONSE_FORMAT,
)
from neurograph.models import KnowledgeGraphData

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class StageResult(Generic[T]):
    """Outcome of one pipeline stage: either a value or the error that stopped it."""

    value: T | None = None
    error: GraphGenerationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


@dataclass
class AnswerResult:
    """Intermediate result handed from the answer stage to the extraction stage."""

    question: str
    answer: str


class GraphPipeline:
    """Runs the answer and extraction stages against the chat completion API."""

    def __init__(
        self,
        llm_client: LLMClient | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.llm = llm_client or get_llm_client()
        self.settings = settings or default_settings

    async def answer(self, question: str) -> StageResult[AnswerResult]:
        """Stage 1: ask the question with the assistant system prompt."""
        try:
            answer = await self.llm.generate(
                prompt=question,
                system_prompt=ANSWER_SYSTEM_PROMPT,
                temperature=self.settings.answer_temperature,
                max_tokens=self.settings.answer_max_tokens,
            )
        except GraphGenerationError as e:
            logger.error(f"Answer stage failed: {e}")
            return StageResult(error=e)

        return StageResult(value=AnswerResult(question=question, answer=answer))

    async def extract(self, answered: AnswerResult) -> StageResult[KnowledgeGraphData]:
        """Stage 2: extract entities and relationships from the answer as JSON."""
        prompt = EXTRACTION_PROMPT.format(
            question=answered.question,
            answer=answered.answer,
        )
        try:
            raw = await self.llm.generate(
                prompt=prompt,
                system_prompt=EXTRACTION_SYSTEM_PROMPT,
                temperature=self.settings.extraction_temperature,
                max_tokens=self.settings.extraction_max_tokens,
                response_format=JSON_RESPONSE_FORMAT,
            )
            graph = self.parse_extraction(answered, raw)
        except GraphGenerationError as e:
            logger.error(f"Extraction stage failed: {e}")
            return StageResult(error=e)

        return StageResult(value=graph)

    @staticmethod
    def parse_extraction(answered: AnswerResult, raw: str) -> KnowledgeGraphData:
        """Parse the extraction output. Malformed JSON is a ParseError, never repaired."""
        try:
            extracted = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ParseError(str(e)) from e

        return KnowledgeGraphData.from_extraction(
            question=answered.question,
            answer=answered.answer,
            extracted=extracted,
        )

    async def run(self, question: str) -> StageResult[KnowledgeGraphData]:
        """Run both stages, stopping at the first failure."""
        if not question or not question.strip():
            raise ValueError("Question must not be blank")

        answered = await self.answer(question)
        if not answered.ok:
            return StageResult(error=answered.error)

        result = await self.extract(answered.unwrap())
        if result.ok:
            graph = result.unwrap()
            logger.info(
                f"Generated graph with {len(graph.entities)} entities "
                f"and {len(graph.relationships)} relationships"
            )
        return result

    async def generate(self, question: str) -> KnowledgeGraphData:
        """Run the pipeline and return the graph, raising the failed stage's error."""
        result = await self.run(question)
        return result.unwrap()


async def generate_knowledge_graph(
    question: str,
    llm_client: LLMClient | None = None,
) -> KnowledgeGraphData:
    """Convenience function for one-off generation."""
    pipeline = GraphPipeline(llm_client=llm_client)
    return await pipeline.generate(question)
