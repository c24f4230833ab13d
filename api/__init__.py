"""
Studyhall API package.

Provides the FastAPI application for the Studyhall study service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
