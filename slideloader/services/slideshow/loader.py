"""
Slide loader.

Runs once per page load: picks the deck from the query string, builds its
relative markdown path and hands that path to the renderer.
"""
import logging
from typing import Optional

from slideloader.models.slide import RenderResult, ResolvedSlide
from slideloader.services.query_params import DEFAULT_SLIDE, get_query_param
from .renderer import RemarkRenderer, SlideshowRenderer

logger = logging.getLogger(__name__)

SLIDES_PREFIX = "slides/"
SLIDES_SUFFIX = ".md"


def build_slide_path(name: str) -> str:
    """Relative path of the markdown source for deck ``name``."""
    return SLIDES_PREFIX + name + SLIDES_SUFFIX


class SlideLoader:
    """Page-load handler that feeds the selected deck to a renderer."""

    def __init__(
        self,
        renderer: SlideshowRenderer,
        param: str = "slide",
        default: str = DEFAULT_SLIDE,
    ):
        self.renderer = renderer
        self.param = param
        self.default = default

    def resolve(self, query_string: str) -> ResolvedSlide:
        """Work out which deck a query string selects, without rendering it."""
        name = get_query_param(query_string, self.param, default=self.default)
        # A query value equal to the default is indistinguishable from the fallback
        return ResolvedSlide(
            name=name,
            source_url=build_slide_path(name),
            is_default=name == self.default,
        )

    def on_load(self, query_string: str) -> RenderResult:
        """
        Handle a page load.

        Calls the renderer's ``create`` exactly once with the selected
        source. Renderer errors are returned as a failed result rather than
        raised, so the caller decides how to present them.
        """
        source_url = self.resolve(query_string).source_url
        try:
            slideshow = self.renderer.create(source_url=source_url)
        except Exception as e:
            logger.error(f"Failed to render slideshow for {source_url}: {e}")
            return RenderResult.failure(source_url, str(e) or type(e).__name__)

        logger.info(f"Loaded slideshow {source_url}")
        return RenderResult.success(slideshow)


# Singleton instance
_slide_loader: Optional[SlideLoader] = None


def get_slide_loader() -> SlideLoader:
    """Get the singleton slide loader, configured from application settings."""
    global _slide_loader
    if _slide_loader is None:
        from slideloader.core import get_settings

        settings = get_settings()
        _slide_loader = SlideLoader(
            renderer=RemarkRenderer(
                remark_js_url=settings.remark_js_url,
                title=settings.app_name,
            ),
            param=settings.slide_param,
            default=settings.default_slide,
        )
    return _slide_loader
