"""API routes for Neurograph.

Provides:
- /v1/graph for one-shot generation (raw question, answer and graph)
- /api/* dashboard endpoints driving the 3D view state
- /health
"""

import logging

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, Field

from neurograph.config import Settings, settings
from neurograph.dashboard import DashboardSession
from neurograph.exceptions import (
    ConfigurationError,
    GraphGenerationError,
    ParseError,
    UpstreamError,
)
from neurograph.generation.pipeline import GraphPipeline

logger = logging.getLogger(__name__)

router = APIRouter()

VERSION = "0.1.0"


# ============================================================================
# Models
# ============================================================================


class QuestionRequest(BaseModel):
    """A question to turn into a knowledge graph."""

    question: str = ""


class ToggleRequest(BaseModel):
    """A node picked in the 3D view."""

    node_id: str


class EntityModel(BaseModel):
    id: str
    name: str
    type: str
    description: str | None = None


class RelationshipModel(BaseModel):
    source: str
    target: str
    label: str
    strength: float = Field(ge=0.0, le=1.0)


class KnowledgeGraphResponse(BaseModel):
    """Answer plus extracted graph."""

    question: str
    answer: str
    entities: list[EntityModel]
    relationships: list[RelationshipModel]


class NotificationModel(BaseModel):
    title: str
    description: str
    variant: str = "default"


class GenerateResponse(BaseModel):
    """Result of a dashboard generation attempt."""

    notification: NotificationModel
    state: dict


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = VERSION
    api_key_configured: bool


# ============================================================================
# Helpers
# ============================================================================


def get_session(request: Request) -> DashboardSession:
    """Get dashboard session from app state."""
    return request.app.state.session


def get_pipeline(request: Request) -> GraphPipeline:
    """Get generation pipeline from app state."""
    return request.app.state.pipeline


def error_status(error: GraphGenerationError) -> int:
    """HTTP status for a generation failure."""
    if isinstance(error, ConfigurationError):
        return 500
    if isinstance(error, (UpstreamError, ParseError)):
        return 502
    return 500


# ============================================================================
# Generation
# ============================================================================


@router.post("/v1/graph", response_model=KnowledgeGraphResponse)
async def generate_graph(body: QuestionRequest, request: Request) -> KnowledgeGraphResponse:
    """Answer a question and extract its knowledge graph."""
    if not body.question.strip():
        raise HTTPException(status_code=400, detail="Please enter a question first")

    pipeline = get_pipeline(request)
    try:
        graph = await pipeline.generate(body.question)
    except GraphGenerationError as e:
        raise HTTPException(status_code=error_status(e), detail=str(e))

    return KnowledgeGraphResponse(**graph.to_dict())


# ============================================================================
# Dashboard
# ============================================================================


@router.get("/api/state")
async def get_state(request: Request) -> dict:
    """Current dashboard state including the 3D scene payload."""
    return get_session(request).snapshot()


@router.post("/api/generate", response_model=GenerateResponse)
async def dashboard_generate(body: QuestionRequest, request: Request) -> GenerateResponse:
    """Run a generation for the dashboard. Failures come back as notifications."""
    session = get_session(request)
    notification = await session.generate(body.question)
    return GenerateResponse(
        notification=NotificationModel(**notification.to_dict()),
        state=session.snapshot(),
    )


@router.post("/api/selection/toggle")
async def toggle_node(body: ToggleRequest, request: Request) -> dict:
    """Toggle selection of a node (click in the 3D view)."""
    session = get_session(request)
    session.select(body.node_id)
    return session.snapshot()


@router.post("/api/selection/clear")
async def clear_selection(request: Request) -> dict:
    """Close the detail panel."""
    session = get_session(request)
    session.clear_selection()
    return session.snapshot()


@router.post("/api/reset")
async def reset(request: Request) -> dict:
    """Clear graph, question and answer, and remount the scene."""
    session = get_session(request)
    session.reset()
    logger.info(f"Dashboard reset (scene key {session.graph_key})")
    return session.snapshot()


# ============================================================================
# Admin
# ============================================================================


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Health check endpoint. Degraded when no API key is configured."""
    app_settings: Settings = getattr(request.app.state, "settings", settings)
    configured = app_settings.api_key_configured

    return HealthResponse(
        status="healthy" if configured else "degraded",
        api_key_configured=configured,
    )
