"""First-order low and high pass filters for the audio output."""

from __future__ import annotations

from abc import ABC, abstractmethod

_PI = 3.1415928535


class FirstOrderFilter(ABC):
    """Base for single-pole filters at a cutoff and sample rate in hertz."""

    def __init__(self, cutoff: int, sample_rate: int) -> None:
        self.rc = 1.0 / (2 * _PI * float(cutoff))
        self.dt = 1.0 / float(sample_rate)
        self._prev_x = 0.0
        self._prev_y = 0.0

    @abstractmethod
    def process(self, sample: float) -> float:
        """Filter one sample and return the output."""


class LowPassFilter(FirstOrderFilter):
    """Exponential smoothing low pass filter."""

    def __init__(self, cutoff: int, sample_rate: int) -> None:
        super().__init__(cutoff, sample_rate)
        self.alpha = self.dt / (self.rc + self.dt)

    def process(self, sample: float) -> float:
        y = self.alpha * sample + (1 - self.alpha) * self._prev_y
        self._prev_x, self._prev_y = sample, y
        return y


class HighPassFilter(FirstOrderFilter):
    """Single-pole high pass filter."""

    def __init__(self, cutoff: int, sample_rate: int) -> None:
        super().__init__(cutoff, sample_rate)
        self.alpha = self.rc / (self.rc + self.dt)

    def process(self, sample: float) -> float:
        y = self.alpha * self._prev_y + self.alpha * (sample - self._prev_x)
        self._prev_x, self._prev_y = sample, y
        return y