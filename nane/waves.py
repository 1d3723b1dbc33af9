"""Pulse, triangle and noise channels of the audio unit."""

from __future__ import annotations

from abc import ABC, abstractmethod

from nane.envelope import VolumeEnvelope
from nane.sequencer import Sequencer

_WORD = 0xFFFF
_BYTE = 0xFF


def _lookup(table, index):
    if not 0 <= index < len(table):
        raise IndexError(f"index {index} outside table of {len(table)} entries")
    return table[index]


class Wave(ABC):
    """Common interface of an audio channel."""

    LENGTH_COUNTER_LOOKUP = (
        10, 254, 20, 2, 40, 4, 80, 6,
        160, 8, 60, 10, 14, 12, 26, 14,
        12, 16, 24, 18, 48, 20, 96, 22,
        192, 24, 72, 26, 16, 28, 32, 30,
    )

    enabled: bool

    @classmethod
    def length_from_code(cls, code: int) -> int:
        """Length counter value for a five-bit code."""
        return _lookup(cls.LENGTH_COUNTER_LOOKUP, code)

    @abstractmethod
    def apu_clock(self) -> None:
        """Advance the channel timer by one tick."""

    @abstractmethod
    def watchdog_clock(self) -> None:
        """Advance the length counter."""

    @abstractmethod
    def set_watchdog_timer(self, length: int) -> None:
        """Load the length counter directly."""

    @abstractmethod
    def set_watchdog_timer_from_code(self, code: int) -> None:
        """Load the length counter from the lookup table."""

    @abstractmethod
    def output_sample(self) -> float:
        """Current output level between 0 and 15."""


class SquareWave(Wave):
    """Pulse channel with duty cycle, envelope and frequency sweep."""

    DUTY_CYCLE_TABLE = (
        (0, 1, 0, 0, 0, 0, 0, 0),
        (0, 1, 1, 0, 0, 0, 0, 0),
        (0, 1, 1, 1, 1, 0, 0, 0),
        (1, 0, 0, 1, 1, 1, 1, 1),
    )

    def __init__(self, is_pulse2: bool) -> None:
        self.is_pulse2 = is_pulse2
        self.enabled = False
        self.duty_cycle = 0
        self._sequence_pos = 0
        self._envelope = VolumeEnvelope()
        self._watchdog = Sequencer(-1, False)
        self._pulse = Sequencer(-1, True, self._advance_sequence)
        self._sweep = Sequencer(-1, True, self._apply_sweep)
        self._sweep_reset = False
        self.sweep_enabled = False
        self.sweep_negative = False
        self.sweep_shift = 0

    def _advance_sequence(self) -> None:
        self._sequence_pos = (self._sequence_pos + 1) % 8

    def _apply_sweep(self) -> None:
        if self.sweep_enabled:
            self._pulse.set_period(self._target_period(), False)

    def _target_period(self) -> int:
        period = self._pulse.period & _WORD
        change = period >> self.sweep_shift
        if not self.sweep_negative:
            target = period + change
        elif not self.is_pulse2:
            # pulse 1 negates with ones' complement
            target = period - (change - 1)
        else:
            target = period - change
        return target & _WORD

    def _duty_level(self) -> int:
        return self.DUTY_CYCLE_TABLE[self.duty_cycle][self._sequence_pos]

    def _is_muted(self) -> bool:
        if not self.enabled or self._watchdog.counter <= 0:
            return True
        if not self._duty_level():
            return True
        target = self._target_period()
        return target < 8 or target > 0x7FF

    @property
    def sequence_position(self) -> int:
        """Step within the eight-step duty sequence."""
        return self._sequence_pos

    @property
    def pulse_period(self) -> int:
        return self._pulse.period & _WORD

    @pulse_period.setter
    def pulse_period(self, value: int) -> None:
        self._pulse.set_period(value & _WORD, False)

    @property
    def watchdog_timer(self) -> int:
        return self._watchdog.counter

    @property
    def halt_watchdog(self) -> bool:
        return self._watchdog.halted

    @halt_watchdog.setter
    def halt_watchdog(self, value: bool) -> None:
        self._watchdog.halted = value
        self._envelope.looping = value

    @property
    def envelope_period(self) -> int:
        """Envelope period, or the fixed volume with constant volume on."""
        return self._envelope.period

    @envelope_period.setter
    def envelope_period(self, value: int) -> None:
        self._envelope.period = value

    @property
    def constant_volume(self) -> bool:
        return self._envelope.constant_volume

    @constant_volume.setter
    def constant_volume(self, value: bool) -> None:
        self._envelope.constant_volume = value

    def apu_clock(self) -> None:
        self._pulse.clock()

    def watchdog_clock(self) -> None:
        self._watchdog.clock()

    def envelope_clock(self) -> None:
        """Advance the volume envelope."""
        self._envelope.clock()

    def sweep_clock(self) -> None:
        """Advance the frequency sweep unit."""
        if self._sweep_reset:
            self._sweep.reset_counter()
            self._sweep_reset = False
            return
        self._sweep.clock()

    def output_sample(self) -> float:
        if self._is_muted():
            return 0.0
        return self._envelope.volume() * self._duty_level()

    def reset_envelope(self) -> None:
        """Restart the volume envelope on its next clock."""
        self._envelope.reset()

    def set_watchdog_timer(self, length: int) -> None:
        self._watchdog.set_period(length, True)

    def set_watchdog_timer_from_code(self, code: int) -> None:
        self._watchdog.set_period(self.length_from_code(code), True)

    def set_frequency_sweep(self, enabled: bool, period: int, negative: bool, shift: int) -> None:
        """Configure the sweep unit; it restarts on the next sweep clock."""
        self.sweep_enabled = enabled
        self._sweep.set_period(period & _BYTE, False)
        self.sweep_negative = negative
        self.sweep_shift = shift & _BYTE
        self._sweep_reset = True


class TriangleWave(Wave):
    """Triangle channel with length and linear counters."""

    SEQUENCE_TABLE = tuple(float(v) for v in range(15, -1, -1)) + tuple(
        float(v) for v in range(16)
    )

    def __init__(self) -> None:
        self.enabled = False
        self._sequence_pos = 0
        self._linear_reset = False
        self._watchdog = Sequencer(-1, False, self._halt_sequence)
        self._linear = Sequencer(-1, False, self._halt_sequence)
        self._tri = Sequencer(-1, True, self._advance_sequence)

    def _halt_sequence(self) -> None:
        self._tri.halted = True

    def _advance_sequence(self) -> None:
        self._sequence_pos = (self._sequence_pos + 1) % 32

    def _resume_if_audible(self) -> None:
        if self._tri.period >= 2:
            self._tri.halted = False

    @property
    def sequence_position(self) -> int:
        """Step within the 32-step triangle sequence."""
        return self._sequence_pos

    @property
    def period(self) -> int:
        return self._tri.period & _WORD

    @period.setter
    def period(self, value: int) -> None:
        value &= _WORD
        self._tri.set_period(value, False)
        if value < 2:
            # ultrasonic: silence the channel
            self._tri.halted = True

    @property
    def watchdog_timer(self) -> int:
        return self._watchdog.counter

    @property
    def linear_counter(self) -> int:
        return self._linear.counter

    def apu_clock(self) -> None:
        self._tri.clock()

    def watchdog_clock(self) -> None:
        if self.enabled:
            self._watchdog.clock()

    def linear_counter_clock(self) -> None:
        """Advance the linear counter, honouring a pending reload."""
        if self._linear_reset:
            self._linear.reset_counter()
            if not self._linear.halted:
                self._linear_reset = False
            return
        self._linear.clock()

    def output_sample(self) -> float:
        return self.SEQUENCE_TABLE[self._sequence_pos]

    def trigger_linear_reset(self) -> None:
        """Reload the linear counter on its next clock."""
        self._linear_reset = True

    def set_watchdog_timer(self, length: int) -> None:
        self._watchdog.set_period(length, True)
        if length > 0:
            self._resume_if_audible()

    def set_watchdog_timer_from_code(self, code: int) -> None:
        self._watchdog.set_period(self.length_from_code(code), True)
        self._resume_if_audible()

    def set_linear_counter(self, count_down: int) -> None:
        """Set the linear counter reload value."""
        count_down &= _BYTE
        self._linear.set_period(count_down, False)
        if count_down > 0:
            self._resume_if_audible()

    def set_halt_timers(self, halt: bool) -> None:
        """Stop or resume both the length and linear counters."""
        self._watchdog.halted = halt
        self._linear.halted = halt


class NoiseWave(Wave):
    """Noise channel driven by a 15-bit linear feedback shift register."""

    PERIOD_TABLE = (4, 8, 16, 32, 64, 96, 128, 160, 202, 254, 380, 508, 762, 1016, 2034, 4068)

    def __init__(self) -> None:
        self.enabled = False
        self.use_sixth_bit = False
        self.shift_register = 0
        self._envelope = VolumeEnvelope()
        self._watchdog = Sequencer(-1, False)
        self._noise = Sequencer(-1, True, self._shift)

    def _shift(self) -> None:
        tap = 6 if self.use_sixth_bit else 1
        reg = self.shift_register
        feedback = (reg & 1) ^ ((reg >> tap) & 1)
        reg >>= 1
        self.shift_register = (reg & 0x3FFF) | (feedback << 14)

    def _is_muted(self) -> bool:
        return not self.enabled or self._watchdog.counter <= 0

    @property
    def period(self) -> int:
        return self._noise.period & _WORD

    @property
    def watchdog_timer(self) -> int:
        return self._watchdog.counter

    @property
    def halt_watchdog(self) -> bool:
        return self._watchdog.halted

    @halt_watchdog.setter
    def halt_watchdog(self, value: bool) -> None:
        self._watchdog.halted = value
        self._envelope.looping = value

    @property
    def envelope_period(self) -> int:
        """Envelope period, or the fixed volume with constant volume on."""
        return self._envelope.period

    @envelope_period.setter
    def envelope_period(self, value: int) -> None:
        self._envelope.period = value

    @property
    def constant_volume(self) -> bool:
        return self._envelope.constant_volume

    @constant_volume.setter
    def constant_volume(self, value: bool) -> None:
        self._envelope.constant_volume = value

    def apu_clock(self) -> None:
        self._noise.clock()

    def watchdog_clock(self) -> None:
        self._watchdog.clock()

    def envelope_clock(self) -> None:
        """Advance the volume envelope."""
        self._envelope.clock()

    def reset_envelope(self) -> None:
        """Restart the volume envelope on its next clock."""
        self._envelope.reset()

    def output_sample(self) -> float:
        if self._is_muted():
            return 0.0
        level = 0.0 if self.shift_register & 1 else 1.0
        return level * self._envelope.volume()

    def set_watchdog_timer(self, length: int) -> None:
        self._watchdog.set_period(length, True)

    def set_watchdog_timer_from_code(self, code: int) -> None:
        self._watchdog.set_period(self.length_from_code(code), True)

    def set_period_from_table(self, index: int) -> None:
        """Set the timer period from the noise period table."""
        self._noise.set_period(_lookup(self.PERIOD_TABLE, index), True)