"""API routes for SlideLoader."""

from .routes import slides

__all__ = [
    "slides",
]
