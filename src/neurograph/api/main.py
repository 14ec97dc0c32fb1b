"""FastAPI application for Neurograph.

Serves the 3D knowledge graph dashboard and the JSON endpoints behind it.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from neurograph.api.graph import router as graph_router
from neurograph.api.routes import VERSION, router
from neurograph.config import Settings, settings as default_settings
from neurograph.dashboard import DashboardSession
from neurograph.generation.llm_client import LLMClient
from neurograph.generation.pipeline import GraphPipeline

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application lifespan - startup and shutdown."""
    app_settings: Settings = app.state.settings

    # Startup
    logger.info("Starting Neurograph API...")
    logger.info(f"Model: {app_settings.llm_model} at {app_settings.llm_base_url}")
    if not app_settings.api_key_configured:
        logger.warning("OPENAI_API_KEY is not set, every generation attempt will fail")

    yield

    # Shutdown
    logger.info("Shutting down Neurograph API...")
    await app.state.pipeline.llm.close()


def create_app(
    settings: Settings | None = None,
    pipeline: GraphPipeline | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    app_settings = settings or default_settings

    app = FastAPI(
        title="Neurograph",
        description="Turns AI answers into interactive 3D knowledge graphs",
        version=VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if pipeline is None:
        pipeline = GraphPipeline(llm_client=LLMClient(settings=app_settings), settings=app_settings)

    # One session owns all dashboard state
    app.state.settings = app_settings
    app.state.pipeline = pipeline
    app.state.session = DashboardSession(pipeline=pipeline, settings=app_settings)

    # Include routes
    app.include_router(router)
    app.include_router(graph_router)

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(
        level=default_settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    uvicorn.run(
        "neurograph.api.main:app",
        host=default_settings.api_host,
        port=default_settings.api_port,
        reload=default_settings.api_debug,
    )
