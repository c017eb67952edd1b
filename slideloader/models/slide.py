"""Slide-related Pydantic models."""
from typing import Optional
from urllib.parse import quote

from pydantic import BaseModel, Field

DEFAULT_SLIDE = "monoids"

# Appended to the parameter name; captures its value up to the next &, # or =
PARAM_VALUE_PATTERN = "=([^&#=]*)"


class Slideshow(BaseModel):
    """A rendered slideshow page returned by a renderer."""

    source_url: str = Field(..., description="Markdown source the page loads")
    html: str = Field(..., description="Rendered HTML page")


class RenderResult(BaseModel):
    """Outcome of asking a renderer to create a slideshow."""

    ok: bool = Field(..., description="Whether the renderer succeeded")
    source_url: str = Field(..., description="Markdown source that was requested")
    slideshow: Optional[Slideshow] = Field(default=None, description="Rendered slideshow on success")
    error: Optional[str] = Field(default=None, description="Error message on failure")

    @classmethod
    def success(cls, slideshow: Slideshow) -> "RenderResult":
        return cls(ok=True, source_url=slideshow.source_url, slideshow=slideshow)

    @classmethod
    def failure(cls, source_url: str, error: str) -> "RenderResult":
        return cls(ok=False, source_url=source_url, error=error)


class ResolvedSlide(BaseModel):
    """The deck a query string selects."""

    name: str = Field(..., min_length=1, description="Deck name taken from the query string")
    source_url: str = Field(..., description="Relative path of the markdown source")
    is_default: bool = Field(default=False, description="Whether the default deck was used")


class DeckInfo(BaseModel):
    """A markdown deck available in the slides directory."""

    name: str = Field(..., description="Deck name (file name without .md)")
    source_url: str = Field(..., description="Relative path of the markdown source")
    size_bytes: int = Field(default=0, ge=0, description="File size in bytes")

    def page_url(self, param: str = "slide") -> str:
        """URL of the slideshow page that shows this deck."""
        return f"/?{param}={quote(self.name, safe='')}"
