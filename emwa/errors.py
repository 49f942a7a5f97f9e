# emwa/errors.py
from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .ema import Smoothing


class EMWAError(Exception):
    """Base class for everything the accumulator raises."""


class ModeMismatchError(EMWAError):
    """Ingestion method does not match the accumulator's smoothing kind."""
    def __init__(self, expected: "Smoothing", actual: "Smoothing"):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{expected.name.lower()} ingestion called on a {actual.name.lower()} accumulator"
        )


class StaleDataError(EMWAError):
    """Timestamp is older than the last accepted one."""
    def __init__(self, time: float, last_time: float):
        self.time = time
        self.last_time = last_time
        super().__init__(f"stale timestamp {time!r} < last accepted {last_time!r}")
