"""
Profiling utilities for catalog loads.

Measures wall-clock time (perf_counter) and resident memory (psutil) around a
block of code. The orchestrator wraps every catalog load in `profile_block`
so load timings show up in the logs and in `glossary stats`.

Usage:
    from glossary.utils.profiler import profile_block

    with profile_block("catalog-load") as stats:
        await loader.load_all()

    print(stats.duration_seconds, stats.rss_delta_bytes)
"""

from __future__ import annotations

import contextlib
import time
from dataclasses import dataclass, field
from typing import Any, Generator, Optional

import psutil


@dataclass
class ProfileStats:
    """
    Container for profiling measurements.
    """

    label: str
    start_ts: float = field(default=0.0)
    end_ts: float = field(default=0.0)
    duration_seconds: float = field(default=0.0)
    rss_before_bytes: Optional[int] = field(default=None)
    rss_after_bytes: Optional[int] = field(default=None)
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def rss_delta_bytes(self) -> Optional[int]:
        if self.rss_before_bytes is None or self.rss_after_bytes is None:
            return None
        return self.rss_after_bytes - self.rss_before_bytes

    def as_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "duration_seconds": round(self.duration_seconds, 4),
            "rss_after_bytes": self.rss_after_bytes,
            "rss_delta_bytes": self.rss_delta_bytes,
            **self.extra,
        }


def _current_rss(process: psutil.Process) -> Optional[int]:
    try:
        return process.memory_info().rss
    except psutil.Error:
        return None


@contextlib.contextmanager
def profile_block(label: str) -> Generator[ProfileStats, None, None]:
    """
    Context manager to profile a block of code.

    Parameters
    ----------
    label : str
        Human-friendly label for the profiled block.

    Notes
    -----
    Works around awaited code too: the measurements bracket whatever runs
    between `__enter__` and `__exit__`, including event-loop suspensions.
    """
    stats = ProfileStats(label=label)
    process = psutil.Process()
    stats.rss_before_bytes = _current_rss(process)

    stats.start_ts = time.perf_counter()
    try:
        yield stats
    finally:
        stats.end_ts = time.perf_counter()
        stats.duration_seconds = stats.end_ts - stats.start_ts
        stats.rss_after_bytes = _current_rss(process)


__all__ = ["ProfileStats", "profile_block"]
