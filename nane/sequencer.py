"""Countdown timer used by the audio channels."""

from __future__ import annotations

from typing import Callable, Optional


class Sequencer:
    """Counts clocks down from a period and fires a handler when it expires.

    A negative period disables expiry entirely. A looping sequencer reloads
    its counter from the period when it expires; a one-shot sequencer stays
    at zero and fires on every further clock.
    """

    def __init__(
        self,
        period: int,
        looping: bool,
        on_expire: Optional[Callable[[], None]] = None,
    ) -> None:
        self.counter = period
        self.period = period
        self.looping = looping
        self.halted = False
        self.on_expire = on_expire

    def clock(self) -> None:
        """Advance the sequencer by one clock."""
        if self.halted:
            return
        if self.counter <= 0 and self.period >= 0:
            if self.looping:
                self.counter = self.period
            if self.on_expire is not None:
                self.on_expire()
            return
        self.counter -= 1

    def set_period(self, period: int, reset_counter: bool) -> None:
        """Change the period, optionally reloading the counter from it."""
        self.period = period
        if reset_counter:
            self.reset_counter()

    def reset_counter(self) -> None:
        """Reload the counter from the period."""
        self.counter = self.period