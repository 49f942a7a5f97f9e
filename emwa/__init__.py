# emwa/__init__.py
from __future__ import annotations

from loguru import logger

from .errors import EMWAError, ModeMismatchError, StaleDataError
from .ema import EMWA, Smoothing
from .series import feed, smooth, smooth_irregular

# silent unless an application enables it
logger.disable(__name__)

__all__ = [
    "EMWA", "Smoothing",
    "EMWAError", "ModeMismatchError", "StaleDataError",
    "feed", "smooth", "smooth_irregular",
]
