# emwa/log.py
from __future__ import annotations
import os
import sys
from typing import Optional

from loguru import logger


def configure_logging(verbose: bool = False, log_path: Optional[str] = None) -> None:
    """
    Console sink on stderr (DEBUG when verbose, else INFO), plus an optional
    rotating file sink. Only entry points call this; the library just logs.
    """
    level = "DEBUG" if verbose else "INFO"
    logger.remove()
    logger.enable("emwa")
    logger.add(sys.stderr, level=level,
               format="<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | {message}")
    if log_path:
        parent = os.path.dirname(log_path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        logger.add(log_path, level=level, rotation="10 MB", retention="7 days", enqueue=False)
