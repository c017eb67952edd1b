"""Logging configuration for SlideLoader."""
import logging
import sys
from typing import Union


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """
    Configure application logging.

    Args:
        level: Logging level, as a number or a level name (default: INFO)
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    # Access logs are noisy for a single-page app
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
