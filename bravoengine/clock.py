"""Frame timing with time dilation, and a scope timer for measuring code."""

from __future__ import annotations

import sys
import time
from typing import Callable, Optional, TextIO


class Clock:
    """Tracks per-frame delta time and total elapsed time, scaled by a dilation factor.

    ``delta_time`` is the dilated time in seconds since the previous frame,
    ``raw_delta_time`` the undilated value, and ``ticks`` the accumulated dilated
    time since :meth:`initialize`.
    """

    def __init__(self, timer: Callable[[], float] = time.perf_counter) -> None:
        self._timer = timer
        self.delta_time = 0.0
        self.raw_delta_time = 0.0
        self.ticks = 0.0
        self.time_dilation = 1.0
        self.initialize()

    def initialize(self) -> None:
        """Reset the clock; call once at application start."""
        self._start_time = self._timer()
        self._last_frame_time = self._start_time
        self.ticks = 0.0
        self.delta_time = 0.0
        self.time_dilation = 1.0

    @property
    def start_time(self) -> float:
        return self._start_time

    def update(self) -> None:
        """Advance one frame, recomputing the delta times and the elapsed total."""
        current = self._timer()
        self.raw_delta_time = current - self._last_frame_time
        if self.time_dilation <= 0.0:
            self.time_dilation = 0.0
        self.delta_time = self.raw_delta_time * self.time_dilation
        self._last_frame_time = current
        self.ticks += self.delta_time


class ScopedTimer:
    """Context manager that prints how long its block took, in milliseconds."""

    def __init__(
        self,
        name: str,
        stream: Optional[TextIO] = None,
        timer: Callable[[], int] = time.perf_counter_ns,
    ) -> None:
        self.name = name
        self._stream = stream
        self._timer = timer
        self._start_us = 0
        self.elapsed_ms: Optional[float] = None

    def _now_us(self) -> int:
        return self._timer() // 1000

    def __enter__(self) -> ScopedTimer:
        self._start_us = self._now_us()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        duration_us = self._now_us() - self._start_us
        self.elapsed_ms = duration_us * 0.001
        stream = self._stream if self._stream is not None else sys.stdout
        print(f"{self.name}: {self.elapsed_ms:g}ms", file=stream)
        return None