import pytest

from nane.apu import Apu
from nane.memory_map import ApuMemoryMap


def test_rejects_non_positive_sample_rate():
    with pytest.raises(ValueError):
        Apu(0)


def test_power_cycle_clears_registers():
    apu = Apu(44100)
    apu.memory.write(0x4000, 0xFF)
    apu.power_cycle()
    assert apu.memory.read(0x4000) == 0


def test_mix_silence_is_zero():
    apu = Apu(44100)
    assert apu.mix_channels(0.0, 0.0, 0.0, 0.0, 0.0) == 0.0


def test_mix_pulse_channels_symmetric_and_increasing():
    apu = Apu(44100)
    assert apu.mix_channels(5.0, 0.0, 0.0, 0.0, 0.0) == apu.mix_channels(0.0, 5.0, 0.0, 0.0, 0.0)
    assert apu.mix_channels(10.0, 0.0, 0.0, 0.0, 0.0) > apu.mix_channels(5.0, 0.0, 0.0, 0.0, 0.0)
    assert apu.mix_channels(0.0, 0.0, 10.0, 0.0, 0.0) > apu.mix_channels(0.0, 0.0, 5.0, 0.0, 0.0)


def test_filter_zero_stays_zero():
    apu = Apu(44100)
    assert apu.filter(0.0) == 0.0


def test_filter_removes_constant_offset():
    apu = Apu(44100)
    first = apu.filter(1.0)
    for _ in range(200000):
        last = apu.filter(1.0)
    assert abs(last) < abs(first)


def test_step_advances_cycle_and_queues_sample():
    apu = Apu(44100)
    apu.step()
    assert apu.memory.total_apu_cycles == 1
    assert len(apu.audio) == 1
    apu.step()
    assert apu.memory.total_apu_cycles == 2
    assert len(apu.audio) == 1


def test_step_clears_frame_counter_reset():
    apu = Apu(44100)
    apu.memory.write(0x4017, 0)
    assert apu.memory.reset_frame_counter is True
    apu.step()
    assert apu.memory.reset_frame_counter is False


def test_frame_counter_advances_only_on_its_rate():
    apu = Apu(44100)
    regs = apu.memory.registers
    apu.clock_frame_counter(1)
    assert regs.frame_counter_seq == 0
    apu.clock_frame_counter(0)
    assert regs.frame_counter_seq == 1


def test_four_step_mode_raises_irq():
    raised = []
    apu = Apu(44100, ApuMemoryMap(), raised.append)
    regs = apu.memory.registers
    regs.four_step_mode = True
    regs.frame_counter_seq = 3
    apu.clock_frame_counter(0)
    assert raised == [True]


def test_irq_inhibit_suppresses_irq():
    raised = []
    apu = Apu(44100, on_irq=raised.append)
    regs = apu.memory.registers
    regs.four_step_mode = True
    regs.irq_inhibit = True
    regs.frame_counter_seq = 3
    apu.clock_frame_counter(0)
    assert raised == []


def test_five_step_mode_never_raises_irq():
    raised = []
    apu = Apu(44100, on_irq=raised.append)
    for _ in range(10):
        apu.clock_frame_counter(0)
    assert raised == []
    assert apu.memory.registers.frame_counter_seq == 10


def test_clock_channels_pulse_runs_at_half_rate():
    apu = Apu(44100)
    mem = apu.memory
    mem.sq1.pulse_period = 0
    mem.tri.period = 2
    apu.clock_channels(1)
    assert mem.sq1.sequence_position == 0
    assert mem.tri.sequence_position == 1
    apu.clock_channels(2)
    assert mem.sq1.sequence_position == 1