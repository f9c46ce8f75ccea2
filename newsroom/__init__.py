"""
Newsroom AI

Packages:
- api: FastAPI application and routes
- rag: document corpus, keyword search and AI summaries
- crawl: city website crawling
- cli: typer command line interface
"""

from . import crawl, rag, api

__version__ = "1.0.0"

__all__ = [
    'api',
    'rag',
    'crawl',
    '__version__'
]
