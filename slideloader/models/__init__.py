"""Pydantic models for SlideLoader."""

from .slide import DEFAULT_SLIDE, PARAM_VALUE_PATTERN, Slideshow, RenderResult, ResolvedSlide, DeckInfo

__all__ = [
    "DEFAULT_SLIDE",
    "PARAM_VALUE_PATTERN",
    "Slideshow",
    "RenderResult",
    "ResolvedSlide",
    "DeckInfo",
]
