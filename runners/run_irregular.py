# runners/run_irregular.py
from __future__ import annotations
from typing import Iterable, Optional, Tuple

from loguru import logger

from config import AppConfig
from emwa import EMWA, Smoothing, StaleDataError
from emwa.trace import CSVTraceLogger, TRACE_KEYS, make_trace_hook

def clock_points(cfg: AppConfig) -> Iterable[Tuple[float, float]]:
    """(data, time) pairs: data 1..points-1 on a clock ticking by clock_step."""
    clock = cfg.clock_start
    for i in range(1, cfg.points):
        yield float(i), clock
        clock += cfg.clock_step

def main(cfg: AppConfig = AppConfig(), points: Optional[Iterable[Tuple[float, float]]] = None) -> float:
    logger.info("adding datapoints to a irregular timeseries (dynamic smoothing):")
    observations = EMWA(cfg.alpha_irregular, Smoothing.DYNAMIC)
    trace = CSVTraceLogger(cfg.trace_path, fieldnames=TRACE_KEYS) if cfg.trace_path else None
    ingest = make_trace_hook(trace, observations, every=cfg.trace_every) if trace else None

    dropped = 0
    try:
        for step, (data, t) in enumerate(points if points is not None else clock_points(cfg)):
            try:
                if ingest is not None:
                    ingest(step, data, t)
                else:
                    observations.add_with_time(data, t)
            except StaleDataError as e:
                if not cfg.skip_stale:
                    raise
                dropped += 1
                logger.warning(f"dropping point {step}: {e}")
    finally:
        if trace is not None:
            trace.close()

    if dropped:
        logger.info(f"dropped {dropped} stale points")
    if trace is not None:
        logger.info(f"trace written to {cfg.trace_path}")
    logger.info(f"observations emwa: {observations.value()}")
    return observations.value()

if __name__ == "__main__":
    main()
