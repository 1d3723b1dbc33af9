"""Memory-mapped view of the audio unit that drives its channels."""

from __future__ import annotations

from typing import Callable, Dict

from nane.registers import REGISTER_END, REGISTER_START, ApuAddress, ApuRegisters
from nane.waves import NoiseWave, SquareWave, TriangleWave

JOYSTICK_STROBE_ADDRESS = 0x4016


class ApuMemoryMap:
    """Audio registers plus the channels that register writes configure."""

    start = REGISTER_START
    end = REGISTER_END
    cpu_clock_rate_hz = 1789773
    frame_counter_rate_hz = 240

    def __init__(self) -> None:
        self.registers = ApuRegisters()
        self.sq1 = SquareWave(False)
        self.sq2 = SquareWave(True)
        self.tri = TriangleWave()
        self.noise = NoiseWave()
        self.reset_frame_counter = False
        self.total_apu_cycles = 0
        self._handlers: Dict[int, Callable[[], None]] = {
            ApuAddress.SQ1_VOL: lambda: self._pulse_vol(self.sq1, self.registers.sq1),
            ApuAddress.SQ1_SWEEP: lambda: self._pulse_sweep(self.sq1, self.registers.sq1),
            ApuAddress.SQ1_LO: lambda: self._pulse_lo(self.sq1, self.registers.sq1),
            ApuAddress.SQ1_HI: lambda: self._pulse_hi(self.sq1, self.registers.sq1),
            ApuAddress.SQ2_VOL: lambda: self._pulse_vol(self.sq2, self.registers.sq2),
            ApuAddress.SQ2_SWEEP: lambda: self._pulse_sweep(self.sq2, self.registers.sq2),
            ApuAddress.SQ2_LO: lambda: self._pulse_lo(self.sq2, self.registers.sq2),
            ApuAddress.SQ2_HI: lambda: self._pulse_hi(self.sq2, self.registers.sq2),
            ApuAddress.TRI_LINEAR: self._tri_linear,
            ApuAddress.TRI_LO: self._tri_lo,
            ApuAddress.TRI_HI: self._tri_hi,
            ApuAddress.NOISE_VOL: self._noise_vol,
            ApuAddress.NOISE_PERIOD: self._noise_period,
            ApuAddress.NOISE_LENGTH_COUNTER: self._noise_length,
            ApuAddress.SND_CHN: self._channel_status,
            ApuAddress.FRAME_COUNTER: self._frame_counter,
        }

    def power_cycle(self) -> None:
        """Clear the registers and silence the pulse channels."""
        self.registers.power_cycle()
        self.sq1.set_watchdog_timer(0)
        self.sq2.set_watchdog_timer(0)

    def read(self, address: int) -> int:
        """Read a register byte."""
        return self.registers.read(address)

    def write(self, address: int, value: int) -> None:
        """Store a register byte and update the channel it controls."""
        self.registers.write(address, value)
        handler = self._handlers.get(address)
        if handler is not None:
            handler()

    def seek(self, address: int) -> int:
        """Look at a register byte without side effects."""
        return self.registers.seek(address)

    def contains(self, address: int) -> bool:
        """Whether the address belongs to the audio unit."""
        if address == JOYSTICK_STROBE_ADDRESS:
            return False
        return self.start <= address <= self.end

    @staticmethod
    def _pulse_vol(wave: SquareWave, regs) -> None:
        wave.duty_cycle = regs.duty
        wave.halt_watchdog = regs.length_counter_halt
        wave.constant_volume = regs.constant_volume
        wave.envelope_period = regs.volume
        wave.reset_envelope()

    @staticmethod
    def _pulse_sweep(wave: SquareWave, regs) -> None:
        wave.set_frequency_sweep(
            regs.sweep_enabled, regs.sweep_period, regs.sweep_negative, regs.sweep_shift
        )

    @staticmethod
    def _pulse_lo(wave: SquareWave, regs) -> None:
        wave.pulse_period = (wave.pulse_period & 0xFF00) | regs.lo

    @staticmethod
    def _pulse_hi(wave: SquareWave, regs) -> None:
        wave.pulse_period = (regs.timer_high << 8) | (wave.pulse_period & 0x00FF)
        wave.duty_cycle = 0
        wave.reset_envelope()
        wave.set_watchdog_timer_from_code(regs.length_counter)

    def _tri_linear(self) -> None:
        regs = self.registers.tri
        self.tri.set_linear_counter(regs.linear_counter)
        self.tri.set_halt_timers(regs.length_counter_halt)

    def _tri_lo(self) -> None:
        self.tri.period = (self.tri.period & 0xFF00) | self.registers.tri.lo

    def _tri_hi(self) -> None:
        regs = self.registers.tri
        self.tri.period = (regs.timer_high << 8) | (self.tri.period & 0x00FF)
        self.tri.set_watchdog_timer_from_code(regs.length_counter)
        self.tri.trigger_linear_reset()

    def _noise_vol(self) -> None:
        regs = self.registers.noise
        self.noise.envelope_period = regs.volume
        self.noise.constant_volume = regs.constant_volume
        self.noise.halt_watchdog = regs.length_counter_halt
        self.noise.reset_envelope()

    def _noise_period(self) -> None:
        regs = self.registers.noise
        self.noise.set_period_from_table(regs.noise_period)
        self.noise.use_sixth_bit = regs.loop_noise

    def _noise_length(self) -> None:
        self.noise.set_watchdog_timer_from_code(self.registers.noise.length_counter_load)
        self.noise.reset_envelope()

    def _channel_status(self) -> None:
        status = self.registers.channels
        for wave, enabled in (
            (self.sq1, status.pulse1),
            (self.sq2, status.pulse2),
            (self.tri, status.triangle),
        ):
            wave.enabled = enabled
            if not enabled:
                wave.set_watchdog_timer(0)
        self.noise.enabled = status.noise
        if status.noise:
            self.noise.set_watchdog_timer(0)

    def _frame_counter(self) -> None:
        self.registers.frame_counter_seq = 0
        self.reset_frame_counter = True