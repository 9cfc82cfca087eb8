from __future__ import annotations

import sys

from loguru import logger

from letswift_gallery.config import settings


def setup_logging(debug: bool = False) -> None:
    """Replace loguru's default sink with a stderr sink at the configured level."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if debug else settings.log_level)
