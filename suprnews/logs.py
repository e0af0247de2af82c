"""Loguru sink setup shared by the CLI and the API process."""

from __future__ import annotations

import sys
from typing import Optional

from loguru import logger

from suprnews.config import settings

_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def configure_logging(level: Optional[str] = None) -> None:
    """Replace loguru's default sink with a stderr sink at *level*.

    Falls back to ``settings.log_level`` when *level* is not given.
    """
    logger.remove()
    logger.add(sys.stderr, level=(level or settings.log_level).upper(), format=_FORMAT)
