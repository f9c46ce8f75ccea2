"""
API module for Newsroom AI

Contains the FastAPI app factory, models, routes, services and exceptions.
"""

from .app import create_app
from .models import (
    QueryRequest,
    QueryResponse,
    QueryResultModel,
    HealthResponse,
    StatsResponse,
    CategoriesResponse,
    ExampleQueriesResponse
)
from .exceptions import (
    PipelineNotInitialized,
    ApplicationStartupIncomplete,
    EmptyQueryError,
    InternalServerError
)
from .dependencies import AppState

__all__ = [
    # App factory
    'create_app',

    # Models
    'QueryRequest',
    'QueryResponse',
    'QueryResultModel',
    'HealthResponse',
    'StatsResponse',
    'CategoriesResponse',
    'ExampleQueriesResponse',

    # Exceptions
    'PipelineNotInitialized',
    'ApplicationStartupIncomplete',
    'EmptyQueryError',
    'InternalServerError',

    # Dependencies
    'AppState'
]
