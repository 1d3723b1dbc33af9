"""Frames-per-second counter."""

from __future__ import annotations

import time
from typing import Callable, Optional

_TICK_MASK = 0xFFFFFFFF


def _milliseconds() -> int:
    return int(time.monotonic() * 1000) & _TICK_MASK


class FpsTimer:
    """Counts calls and reports how many happened in the last full second.

    ``clock`` returns a 32-bit millisecond tick count; differences wrap.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None) -> None:
        self._clock = clock if clock is not None else _milliseconds
        self.start_time = 0
        self.fps = 0
        self.counter = 0

    def calc_fps(self) -> int:
        """Count one frame and return the rate measured over the last second."""
        now = self._clock()
        if ((now - self.start_time) & _TICK_MASK) > 1000:
            self.fps = self.counter
            self.start_time = now
            self.counter = 0
        self.counter += 1
        return self.fps