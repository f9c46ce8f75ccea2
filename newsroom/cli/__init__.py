"""
Command line interface for Newsroom AI
"""

from .app import app

__all__ = ['app']
