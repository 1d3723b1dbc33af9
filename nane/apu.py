"""Audio processing unit: clocks the channels and produces mixed samples."""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, Optional, Tuple

from nane.filters import FirstOrderFilter, HighPassFilter, LowPassFilter
from nane.memory_map import ApuMemoryMap

_FILTER_RATE_HZ = 1789773


class Apu:
    """Steps the audio channels once per CPU clock and queues output samples.

    ``on_irq`` is called with ``True`` when the four-step frame sequence
    raises its interrupt. Samples are appended to ``audio``, a bounded deque
    holding a fifth of a second; when it is full the oldest samples go.
    """

    def __init__(
        self,
        samples_per_second: int,
        memory: Optional[ApuMemoryMap] = None,
        on_irq: Optional[Callable[[bool], None]] = None,
    ) -> None:
        if samples_per_second <= 0:
            raise ValueError("samples_per_second must be positive")
        self.samples_per_second = samples_per_second
        self.memory = memory if memory is not None else ApuMemoryMap()
        self.on_irq = on_irq
        self.audio: Deque[float] = deque(maxlen=max(1, samples_per_second // 5))
        self.filters: Tuple[FirstOrderFilter, ...] = (
            HighPassFilter(90, _FILTER_RATE_HZ),
            HighPassFilter(440, _FILTER_RATE_HZ),
            LowPassFilter(14000, _FILTER_RATE_HZ),
        )

    def power_cycle(self) -> None:
        """Reset the audio registers and channels."""
        self.memory.power_cycle()

    def step(self) -> None:
        """Advance the unit by one CPU clock."""
        mem = self.memory
        cycle = mem.total_apu_cycles

        if mem.reset_frame_counter:
            # a write to the frame counter clocks the units immediately
            self.clock_channels(cycle)
            self.clock_watchdogs()
            self.clock_freq_sweeps()
            mem.reset_frame_counter = False

        self.clock_channels(cycle)
        self.clock_frame_counter(cycle)

        cycles_per_sample = mem.cpu_clock_rate_hz // self.samples_per_second
        if cycle % cycles_per_sample == 0:
            sample = self.mix_channels(
                mem.sq1.output_sample(),
                mem.sq2.output_sample(),
                mem.tri.output_sample(),
                mem.noise.output_sample(),
                0.0,
            )
            self.audio.append(self.filter(sample))

        mem.total_apu_cycles = cycle + 1

    def mix_channels(self, sq1: float, sq2: float, tri: float, noise: float, dmc: float) -> float:
        """Combine the channel levels with the non-linear mixer formula."""
        pulse_sum = sq1 + sq2
        pulse_out = (95.88 * pulse_sum) / (8128 + 100 * pulse_sum)
        tnd_sum = tri / 8227 + noise / 12241 + dmc / 22638
        tnd_out = (159.79 * tnd_sum) / (1 + 100 * tnd_sum)
        return pulse_out + tnd_out

    def filter(self, sample: float) -> float:
        """Run a sample through the high and low pass filter chain."""
        for stage in self.filters:
            sample = stage.process(sample)
        return sample

    def clock_frame_counter(self, cycle: int) -> None:
        """Step the frame sequencer when the cycle falls on its rate."""
        mem = self.memory
        cycles_per_tick = mem.cpu_clock_rate_hz // mem.frame_counter_rate_hz
        if cycle % cycles_per_tick != 0:
            return

        regs = mem.registers
        if regs.four_step_mode:
            position = regs.frame_counter_seq % 4
            quarter = True
            half = position in (1, 3)
            irq = position == 3
        else:
            position = regs.frame_counter_seq % 5
            quarter = position != 3
            half = position in (1, 4)
            irq = False

        if quarter:
            self.clock_envelopes()
        if half:
            self.clock_watchdogs()
            self.clock_freq_sweeps()
        if irq and not regs.irq_inhibit and self.on_irq is not None:
            self.on_irq(True)

        regs.frame_counter_seq += 1

    def clock_channels(self, cycle: int) -> None:
        """Clock the channel timers; all but the triangle run at half rate."""
        mem = self.memory
        if cycle % 2 == 0:
            mem.sq1.apu_clock()
            mem.sq2.apu_clock()
            mem.noise.apu_clock()
        mem.tri.apu_clock()

    def clock_envelopes(self) -> None:
        """Quarter-frame tick: envelopes and the triangle linear counter."""
        mem = self.memory
        mem.sq1.envelope_clock()
        mem.sq2.envelope_clock()
        mem.tri.linear_counter_clock()
        mem.noise.envelope_clock()

    def clock_watchdogs(self) -> None:
        """Half-frame tick of the length counters."""
        mem = self.memory
        mem.sq1.watchdog_clock()
        mem.sq1.watchdog_clock()
        mem.tri.watchdog_clock()
        mem.noise.watchdog_clock()

    def clock_freq_sweeps(self) -> None:
        """Half-frame tick of the pulse sweep units."""
        self.memory.sq1.sweep_clock()
        self.memory.sq2.sweep_clock()