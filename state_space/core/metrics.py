# state_space/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, List, Optional
import time, tracemalloc

NO_PATH = "no path"
BUDGET_EXHAUSTED = "expansion budget exhausted"


@dataclass
class SearchResult:
    algo: str
    success: bool
    path: List[Any] = field(default_factory=list)
    cost: float = float("inf")
    nodes_expanded: int = 0
    time_s: Optional[float] = None
    peak_kb: Optional[int] = None
    error: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.success

    @property
    def length(self) -> int:
        """Number of edges in the path; -1 when nothing was found."""
        return len(self.path) - 1 if self.path else -1


class MeasuredRun:
    """
    Context manager for timing and (approximate) peak memory.
    Safe to query .elapsed and .peak_kb *inside* the with-block.
    Only stops tracemalloc if this run started it.
    """
    def __init__(self, trace_memory: bool = True) -> None:
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self._peak_kb: int = 0
        self._trace_memory = trace_memory
        self._owns_trace: bool = False

    def __enter__(self) -> "MeasuredRun":
        if self._trace_memory and not tracemalloc.is_tracing():
            tracemalloc.start()
            self._owns_trace = True
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        if self._trace_memory and tracemalloc.is_tracing():
            _, peak = tracemalloc.get_traced_memory()
            self._peak_kb = max(self._peak_kb, peak // 1024)
        if self._owns_trace:
            tracemalloc.stop()
            self._owns_trace = False
        return False  # don't suppress exceptions

    @property
    def elapsed(self) -> float:
        """Seconds elapsed. Works before and after __exit__."""
        if self.t0 is None:
            return 0.0
        if self.t1 is None:
            return time.perf_counter() - self.t0
        return self.t1 - self.t0

    @property
    def peak_kb(self) -> Optional[int]:
        """Approx peak KB, or None when memory tracing is off."""
        if not self._trace_memory:
            return None
        if self.t1 is None and tracemalloc.is_tracing():
            _, peak = tracemalloc.get_traced_memory()
            return max(self._peak_kb, peak // 1024)
        return self._peak_kb
