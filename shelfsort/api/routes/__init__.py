"""API routes package.

This package contains all API route handlers for the application.
"""
from . import levels
from . import play
from . import sessions

__all__ = [
    "levels",
    "play",
    "sessions",
]
