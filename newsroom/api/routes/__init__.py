"""
API routes module

Contains the route handlers for all API endpoints.
"""

from . import query, health, root

from .query import router as query_router
from .health import router as health_router
from .root import router as root_router

__all__ = [
    # Modules
    'query',
    'health',
    'root',

    # Routers
    'query_router',
    'health_router',
    'root_router'
]
