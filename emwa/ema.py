# emwa/ema.py
from __future__ import annotations
import math
from enum import Enum

from loguru import logger

from .errors import ModeMismatchError, StaleDataError


class Smoothing(Enum):
    STATIC = "static"     # constant alpha, evenly-spaced series
    DYNAMIC = "dynamic"   # alpha decays with elapsed time, irregular series


class EMWA:
    """
    Exponentially weighted moving average over a scalar stream.

    The smoothing kind is fixed at construction:
      - STATIC:  use add(data); value <- alpha*data + (1-alpha)*value
      - DYNAMIC: use add_with_time(data, time); alpha is recomputed per call as
                 exp(-elapsed / datapoints), so long gaps and long histories both
                 lower the weight of the new point.

    The first accepted point seeds the value as-is. Calls that raise never
    modify the accumulator. Not thread-safe; callers serialize access.
    """

    def __init__(self, alpha: float, kind: Smoothing):
        # no range check on alpha; values outside [0, 1] extrapolate
        self._alpha = float(alpha)
        self._kind = Smoothing(kind)
        self._value = 0.0
        self._datapoints = 0
        self._time = 0.0
        logger.debug(f"[EMWA] created alpha={self._alpha} kind={self._kind.value}")

    # --- read-only state ---
    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def kind(self) -> Smoothing:
        return self._kind

    @property
    def datapoints(self) -> int:
        return self._datapoints

    @property
    def time(self) -> float:
        """Timestamp of the last accepted timed point (0.0 before any)."""
        return self._time

    def value(self) -> float:
        return self._value

    # --- ingestion ---
    def add(self, data: float) -> float:
        """Ingest one point of an evenly-spaced series. Returns the new value."""
        self._require(Smoothing.STATIC)
        data = float(data)
        self._datapoints += 1
        if self._datapoints == 1:
            self._value = data
        else:
            self._value = self._alpha * data + (1.0 - self._alpha) * self._value
        return self._value

    def compute_alpha(self, time: float) -> float:
        """Weight the next timed point at `time` would get; raises StaleDataError."""
        diff = float(time) - self._time
        if diff < 0.0:
            raise StaleDataError(float(time), self._time)
        return math.exp(-diff / (self._datapoints + 1))

    def add_with_time(self, data: float, time: float) -> float:
        """Ingest one point of an irregular series observed at `time`."""
        self._require(Smoothing.DYNAMIC)
        data, time = float(data), float(time)
        if self._datapoints == 0:
            self._value = data
        else:
            try:
                a = self.compute_alpha(time)
            except StaleDataError:
                logger.debug(f"[EMWA] rejected stale point t={time} last={self._time}")
                raise
            self._value = a * data + (1.0 - a) * self._value
        self._datapoints += 1
        self._time = time
        return self._value

    def _require(self, kind: Smoothing) -> None:
        if self._kind is not kind:
            logger.debug(f"[EMWA] {kind.value} ingestion refused on {self._kind.value} accumulator")
            raise ModeMismatchError(expected=kind, actual=self._kind)

    def __repr__(self) -> str:
        return (f"EMWA(alpha={self._alpha!r}, kind={self._kind.name}, "
                f"datapoints={self._datapoints}, value={self._value!r})")
