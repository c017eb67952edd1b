"""Discovery of the markdown decks available to the slideshow page."""
import logging
from pathlib import Path

from slideloader.models.slide import DeckInfo
from .loader import SLIDES_SUFFIX, build_slide_path

logger = logging.getLogger(__name__)


def list_decks(slides_dir: Path) -> list[DeckInfo]:
    """
    List the markdown decks in ``slides_dir``, sorted by name.

    Only top-level ``.md`` files are listed; a missing directory yields an
    empty list.
    """
    if not slides_dir.is_dir():
        logger.warning(f"Slides directory not found: {slides_dir}")
        return []

    decks = []
    for path in sorted(slides_dir.iterdir()):
        if not path.is_file() or path.suffix != SLIDES_SUFFIX:
            continue
        decks.append(DeckInfo(
            name=path.stem,
            source_url=build_slide_path(path.stem),
            size_bytes=path.stat().st_size,
        ))
    return decks
