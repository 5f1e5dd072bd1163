import time
from dataclasses import dataclass
from typing import Any, Callable


@dataclass
class ProfileResult:
    result: Any
    elapsed_ms: float


class PerformanceProfiler:
    """Wall-clock timing for a single call."""

    def time_function(self, func: Callable[..., Any], *args, **kwargs) -> ProfileResult:
        start = time.perf_counter()
        result = func(*args, **kwargs)
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        return ProfileResult(result=result, elapsed_ms=elapsed_ms)
