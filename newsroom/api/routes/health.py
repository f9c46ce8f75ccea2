"""
Routes for health checks and monitoring
"""
from fastapi import APIRouter, Depends

from newsroom.api.models import HealthResponse, StatsResponse, CategoriesResponse
from newsroom.api.dependencies import get_query_pipeline
from newsroom.api.services import HealthService, StatsService

router = APIRouter(tags=["health"])


@router.get("/api/v1/health", response_model=HealthResponse)
async def health_check(query_pipeline=Depends(get_query_pipeline)):
    """Health check endpoint"""
    return HealthResponse(**HealthService.check_pipeline_health(query_pipeline))


@router.get("/api/v1/stats", response_model=StatsResponse)
async def get_stats(query_pipeline=Depends(get_query_pipeline)):
    """Get query and corpus statistics"""
    return StatsService.get_system_stats(query_pipeline)


@router.get("/api/v1/categories", response_model=CategoriesResponse)
async def get_categories(query_pipeline=Depends(get_query_pipeline)):
    """List document categories with their counts"""
    return CategoriesResponse(categories=StatsService.get_categories(query_pipeline))
