"""Slide API endpoints."""
import logging
from typing import Any

from fastapi import APIRouter, Request

from slideloader.core import get_settings
from slideloader.services import get_slide_loader, list_decks

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["slides"])


@router.get("/slides")
async def get_decks() -> dict[str, Any]:
    """List the markdown decks that can be selected with the slide parameter."""
    settings = get_settings()
    decks = list_decks(settings.slides_dir)

    return {
        "decks": [
            {**deck.model_dump(), "page_url": deck.page_url(settings.slide_param)}
            for deck in decks
        ],
        "total": len(decks),
        "default": settings.default_slide,
    }


@router.get("/slides/resolve")
async def resolve_slide(request: Request) -> dict[str, Any]:
    """
    Show which deck the page would load for this query string.

    Takes the same query string as the slideshow page and goes through the
    same extraction, but does not render anything.
    """
    resolved = get_slide_loader().resolve(request.url.query)
    return resolved.model_dump()
