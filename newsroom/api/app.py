"""
FastAPI application factory and configuration
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from newsroom.api.dependencies import AppState
from newsroom.api.routes import query, health, root
from newsroom.config import settings


# Setup logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan event handler for startup and shutdown"""
    # Startup
    app_state = AppState()

    logger.info("Starting query pipeline initialization...")

    try:
        from newsroom.rag.pipeline import create_query_pipeline

        query_pipeline = create_query_pipeline()
        app_state.set_query_pipeline(query_pipeline)

        if len(query_pipeline.store) == 0:
            logger.warning("Corpus is empty, run `newsroom ingest` to build it")
        else:
            logger.info(f"Query pipeline ready with {len(query_pipeline.store)} documents")

        app_state.set_startup_complete(True)

    except Exception as e:
        logger.error(f"Failed to initialize query pipeline: {e}")
        app_state.set_query_pipeline(None)
        app_state.set_startup_complete(True)

    yield

    # Shutdown
    logger.info("Shutting down query pipeline...")
    query_pipeline = app_state.get_query_pipeline()
    if query_pipeline is not None:
        query_pipeline.cleanup()
    logger.info("Application shutdown complete")


def create_app() -> FastAPI:
    """Factory function creating the FastAPI app"""
    app = FastAPI(
        title=settings.API_TITLE,
        description=settings.API_DESCRIPTION,
        version=settings.API_VERSION,
        lifespan=lifespan
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(root.router)
    app.include_router(query.router)
    app.include_router(health.router)

    return app
