import pytest

from nane.registers import ApuAddress, ApuRegisters


def test_starts_cleared():
    regs = ApuRegisters()
    assert regs.raw == bytes(24)
    assert regs.frame_counter_seq == 0


def test_write_read_round_trip():
    regs = ApuRegisters()
    for offset, address in enumerate(range(0x4000, 0x4018)):
        regs.write(address, offset + 1)
    for offset, address in enumerate(range(0x4000, 0x4018)):
        assert regs.read(address) == offset + 1
        assert regs.seek(address) == offset + 1


def test_write_masks_to_byte():
    regs = ApuRegisters()
    regs.write(0x4002, 0x1AB)
    assert regs.read(0x4002) == 0xAB


@pytest.mark.parametrize("address", [0x3FFF, 0x4018, 0x0000])
def test_out_of_range_raises(address):
    regs = ApuRegisters()
    with pytest.raises(IndexError):
        regs.read(address)
    with pytest.raises(IndexError):
        regs.write(address, 1)


def test_full_byte_sets_widest_field_values():
    regs = ApuRegisters()
    regs.write(ApuAddress.SQ1_VOL, 0xFF)
    assert regs.sq1.volume == 15
    assert regs.sq1.duty == 3
    assert regs.sq1.constant_volume is True
    assert regs.sq1.length_counter_halt is True
    assert regs.sq2.vol == 0


def test_field_setters_are_independent():
    regs = ApuRegisters()
    regs.sq2.volume = 7
    regs.sq2.duty = 2
    regs.sq2.constant_volume = True
    assert regs.sq2.volume == 7
    assert regs.sq2.duty == 2
    assert regs.sq2.constant_volume is True
    assert regs.sq2.length_counter_halt is False
    assert regs.read(ApuAddress.SQ2_VOL) == regs.sq2.vol
    assert regs.sq1.vol == 0


def test_views_address_their_own_registers():
    regs = ApuRegisters()
    regs.write(ApuAddress.TRI_LO, 0x5A)
    regs.write(ApuAddress.NOISE_PERIOD, 0x8C)
    assert regs.tri.lo == 0x5A
    assert regs.noise.period == 0x8C
    assert regs.noise.loop_noise is True
    regs.channels.triangle = True
    assert regs.read(ApuAddress.SND_CHN) == regs.channels.value
    assert regs.channels.pulse1 is False


def test_frame_counter_flags():
    regs = ApuRegisters()
    regs.four_step_mode = True
    assert regs.four_step_mode is True
    assert regs.irq_inhibit is False
    regs.irq_inhibit = True
    assert regs.read(ApuAddress.FRAME_COUNTER) == regs.frame_counter
    assert regs.four_step_mode is True


def test_frame_counter_seq_wraps_as_byte():
    regs = ApuRegisters()
    regs.frame_counter_seq = 255
    regs.frame_counter_seq += 1
    assert regs.frame_counter_seq == 0


def test_power_cycle_clears():
    regs = ApuRegisters()
    regs.write(0x4010, 9)
    regs.frame_counter_seq = 3
    regs.power_cycle()
    assert regs.raw == bytes(24)
    assert regs.frame_counter_seq == 0