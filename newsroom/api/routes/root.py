"""
Main routes for the application
"""
from fastapi import APIRouter, Depends

from newsroom.config import settings
from newsroom.api.dependencies import get_app_state, AppState
from newsroom.api.models import ExampleQueriesResponse

router = APIRouter()


@router.get("/")
async def root(app_state: AppState = Depends(get_app_state)):
    """Root endpoint with startup status"""
    return {
        "message": settings.API_TITLE,
        "status": "running" if app_state.is_startup_complete() else "starting",
        "version": settings.API_VERSION,
        "features": [
            "City council agenda search",
            "City website search",
            "AI summaries"
        ]
    }


@router.get("/api/v1/examples", response_model=ExampleQueriesResponse)
async def get_example_queries():
    """Get example queries that can be asked"""
    return ExampleQueriesResponse(example_queries=settings.get_example_queries())
