# config.py
from dataclasses import dataclass, replace
from typing import Optional

@dataclass(frozen=True, slots=True)
class AppConfig:
    # regular series (static smoothing)
    alpha_regular: float = 1.0

    # irregular series (dynamic smoothing)
    alpha_irregular: float = 0.5
    clock_start: float = 100_000.0       # arbitrary clock origin
    clock_step: float = 1.0
    skip_stale: bool = False             # drop out-of-order points instead of failing

    # shared
    points: int = 100                    # feeds 1..points-1
    trace_path: Optional[str] = None     # CSV trace of the irregular run
    trace_every: int = 1
    verbose: bool = False
    log_path: Optional[str] = None


    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
