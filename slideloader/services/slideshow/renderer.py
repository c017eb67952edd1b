"""
Slideshow renderers.

Rendering is delegated to remark.js running in the browser. The server side
only produces the page that loads remark.js and calls
``remark.create({sourceUrl: ...})`` with the selected markdown source.
"""
import logging
from pathlib import Path
from typing import Optional, Protocol

from fastapi.templating import Jinja2Templates

from slideloader.models.slide import Slideshow

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent.parent.parent / "web" / "templates"
SLIDESHOW_TEMPLATE = "slideshow.html"


class SlideshowRenderer(Protocol):
    """Creation entry point of a slideshow rendering library."""

    def create(self, source_url: str) -> Slideshow:
        ...


class RemarkRenderer:
    """Renders the remark.js slideshow page for a markdown source."""

    def __init__(
        self,
        remark_js_url: str,
        title: str = "Slides",
        templates: Optional[Jinja2Templates] = None,
    ):
        self.remark_js_url = remark_js_url
        self.title = title
        self.templates = templates or Jinja2Templates(directory=TEMPLATES_DIR)

    def create(self, source_url: str) -> Slideshow:
        """Render the page that calls ``remark.create({sourceUrl: source_url})``."""
        template = self.templates.get_template(SLIDESHOW_TEMPLATE)
        html = template.render(
            title=self.title,
            remark_js_url=self.remark_js_url,
            source_url=source_url,
        )
        logger.debug(f"Rendered slideshow page for {source_url}")
        return Slideshow(source_url=source_url, html=html)
