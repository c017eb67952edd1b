"""
Slideshow service package.
Selects a markdown deck per page load and renders the remark.js page for it.
"""

from .loader import SlideLoader, build_slide_path, get_slide_loader
from .renderer import RemarkRenderer, SlideshowRenderer
from .decks import list_decks

__all__ = [
    "SlideLoader",
    "build_slide_path",
    "get_slide_loader",
    "RemarkRenderer",
    "SlideshowRenderer",
    "list_decks",
]
