# emwa/series.py
from __future__ import annotations
from typing import Optional, Sequence
import numpy as np

from .ema import EMWA, Smoothing


def feed(acc: EMWA, values: Sequence[float], times: Optional[Sequence[float]] = None) -> np.ndarray:
    """
    Push a whole series through an existing accumulator.
    Returns the running value after each point (same length as `values`).
    Pass `times` for DYNAMIC accumulators; with `times` a STATIC accumulator
    raises ModeMismatchError, without it a DYNAMIC one does.
    """
    xs = np.asarray(values, dtype=float).ravel()
    out = np.empty_like(xs)
    if times is None:
        for i, x in enumerate(xs):
            out[i] = acc.add(x)
        return out

    ts = np.asarray(times, dtype=float).ravel()
    if ts.shape != xs.shape:
        raise ValueError(f"values/times length mismatch: {xs.size} vs {ts.size}")
    for i, (x, t) in enumerate(zip(xs, ts)):
        out[i] = acc.add_with_time(x, t)
    return out


def smooth(values: Sequence[float], alpha: float) -> np.ndarray:
    """EMA of an evenly-spaced series; alpha blends toward the new value."""
    return feed(EMWA(alpha, Smoothing.STATIC), values)


def smooth_irregular(values: Sequence[float], times: Sequence[float], alpha: float = 0.5) -> np.ndarray:
    """Time-decayed EMA of an irregularly-spaced series."""
    return feed(EMWA(alpha, Smoothing.DYNAMIC), values, times)
