"""Service layer for SlideLoader."""

from .query_params import DEFAULT_SLIDE, MalformedEncodingError, decode_uri_component, get_query_param
from .slideshow import SlideLoader, RemarkRenderer, build_slide_path, get_slide_loader, list_decks

__all__ = [
    "DEFAULT_SLIDE",
    "MalformedEncodingError",
    "decode_uri_component",
    "get_query_param",
    "SlideLoader",
    "RemarkRenderer",
    "build_slide_path",
    "get_slide_loader",
    "list_decks",
]
