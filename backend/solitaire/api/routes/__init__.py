"""API routes package.

This package contains all API route handlers for the application.
"""
from . import games
from . import simulate

__all__ = [
    "games",
    "simulate",
]
