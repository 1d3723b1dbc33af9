"""Volume envelope shared by the pulse and noise channels."""

from __future__ import annotations

from nane.sequencer import Sequencer

MAX_VOLUME = 15


class VolumeEnvelope:
    """Sawtooth volume decay, or a constant volume taken from the period."""

    def __init__(self) -> None:
        self._decay = MAX_VOLUME
        self._reset_pending = False
        self.constant_volume = False
        self.looping = False
        self._sequencer = Sequencer(-1, True, self._step_decay)

    def _step_decay(self) -> None:
        if self._decay <= 0:
            if self.looping:
                self._decay = MAX_VOLUME
            return
        self._decay -= 1

    @property
    def period(self) -> int:
        """Envelope period, also the volume when constant volume is on."""
        return self._sequencer.period

    @period.setter
    def period(self, value: int) -> None:
        self._sequencer.set_period(value, False)

    def clock(self) -> None:
        """Advance the envelope by one frame-counter tick."""
        if self._reset_pending:
            self._decay = MAX_VOLUME
            self._sequencer.reset_counter()
            self._reset_pending = False
            return
        self._sequencer.clock()

    def reset(self) -> None:
        """Restart the decay on the next clock."""
        self._reset_pending = True

    def volume(self) -> float:
        """Current volume between 0 and 15."""
        if self.constant_volume:
            return float(self._sequencer.period)
        return float(self._decay)