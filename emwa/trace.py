# emwa/trace.py
from __future__ import annotations
import csv, os
from typing import Any, Callable, Dict, Optional, Protocol

from .ema import EMWA, Smoothing

TRACE_KEYS = ["step", "data", "time", "value", "datapoints"]


class TraceLogger(Protocol):
    def log(self, step: int, scalars: Dict[str, Any]) -> None: ...
    def flush(self) -> None: ...
    def close(self) -> None: ...


class CSVTraceLogger:
    """Append-only CSV logger with header auto-discovery or predefined schema."""
    def __init__(self, path: str, fieldnames: list[str] | None = None):
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.path = path
        self._fieldnames = fieldnames
        self._file = open(path, "a", newline="")
        self._writer: Optional[csv.DictWriter] = None

    def log(self, step: int, scalars: Dict[str, Any]) -> None:
        row = {"step": step, **scalars}
        if self._writer is None:
            if self._fieldnames is None:
                self._fieldnames = list(row.keys())
            self._writer = csv.DictWriter(
                self._file,
                fieldnames=self._fieldnames,
                extrasaction="ignore",
            )
            if self._file.tell() == 0:
                self._writer.writeheader()
        self._writer.writerow(row)

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def __enter__(self) -> "CSVTraceLogger":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def make_trace_hook(
    logger: TraceLogger,
    acc: EMWA,
    every: int = 1,
) -> Callable[..., float]:
    """
    Returns a function(step, data, time=None) -> float that ingests into `acc`
    (add or add_with_time depending on its kind) and logs a trace row every
    `every` steps. Errors from the accumulator propagate; nothing is logged then.
    """
    every = max(1, int(every))

    def _on_point(step: int, data: float, time: Optional[float] = None) -> float:
        if acc.kind is Smoothing.DYNAMIC:
            value = acc.add_with_time(data, time)
        else:
            value = acc.add(data)
        if step % every == 0:
            logger.log(int(step), {
                "data": float(data),
                "time": "" if time is None else float(time),
                "value": value,
                "datapoints": acc.datapoints,
            })
        return value

    return _on_point
