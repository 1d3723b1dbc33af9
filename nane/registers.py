"""Register file of the audio unit, mapped at 0x4000-0x4017."""

from __future__ import annotations

from enum import IntEnum

REGISTER_START = 0x4000
REGISTER_END = 0x4017
REGISTER_COUNT = REGISTER_END - REGISTER_START + 1


class ApuAddress(IntEnum):
    """Addresses of the registers the audio unit reacts to."""

    SQ1_VOL = 0x4000
    SQ1_SWEEP = 0x4001
    SQ1_LO = 0x4002
    SQ1_HI = 0x4003
    SQ2_VOL = 0x4004
    SQ2_SWEEP = 0x4005
    SQ2_LO = 0x4006
    SQ2_HI = 0x4007
    TRI_LINEAR = 0x4008
    TRI_LO = 0x400A
    TRI_HI = 0x400B
    NOISE_VOL = 0x400C
    NOISE_PERIOD = 0x400E
    NOISE_LENGTH_COUNTER = 0x400F
    SND_CHN = 0x4015
    FRAME_COUNTER = 0x4017


class _Field:
    """Unsigned bit field inside one byte of a register view."""

    def __init__(self, offset: int, shift: int = 0, width: int = 8) -> None:
        self.offset = offset
        self.shift = shift
        self.mask = (1 << width) - 1

    def __get__(self, obj, objtype=None):
        if obj is None:
            return self
        return (obj._raw[obj._base + self.offset] >> self.shift) & self.mask

    def __set__(self, obj, value) -> None:
        index = obj._base + self.offset
        cleared = obj._raw[index] & ~(self.mask << self.shift) & 0xFF
        obj._raw[index] = cleared | ((int(value) & self.mask) << self.shift)


class _Flag(_Field):
    """Single-bit field read as a bool."""

    def __init__(self, offset: int, bit: int) -> None:
        super().__init__(offset, bit, 1)

    def __get__(self, obj, objtype=None):
        if obj is None:
            return self
        return bool(super().__get__(obj, objtype))


class _RegisterView:
    """Named access to a slice of the shared register bytes."""

    def __init__(self, raw: bytearray, base: int) -> None:
        self._raw = raw
        self._base = base


class PulseRegisters(_RegisterView):
    """The four registers of a pulse channel."""

    vol = _Field(0)
    volume = _Field(0, 0, 4)
    constant_volume = _Flag(0, 4)
    length_counter_halt = _Flag(0, 5)
    duty = _Field(0, 6, 2)

    sweep = _Field(1)
    sweep_shift = _Field(1, 0, 3)
    sweep_negative = _Flag(1, 3)
    sweep_period = _Field(1, 4, 3)
    sweep_enabled = _Flag(1, 7)

    lo = _Field(2)

    hi = _Field(3)
    timer_high = _Field(3, 0, 3)
    length_counter = _Field(3, 3, 5)


class TriangleRegisters(_RegisterView):
    """The registers of the triangle channel."""

    linear = _Field(0)
    linear_counter = _Field(0, 0, 7)
    length_counter_halt = _Flag(0, 7)

    lo = _Field(2)

    hi = _Field(3)
    timer_high = _Field(3, 0, 3)
    length_counter = _Field(3, 3, 5)


class NoiseRegisters(_RegisterView):
    """The registers of the noise channel."""

    vol = _Field(0)
    volume = _Field(0, 0, 4)
    constant_volume = _Flag(0, 4)
    length_counter_halt = _Flag(0, 5)

    period = _Field(2)
    noise_period = _Field(2, 0, 4)
    loop_noise = _Flag(2, 7)

    length = _Field(3)
    length_counter_load = _Field(3, 3, 5)


class DmcRegisters(_RegisterView):
    """The registers of the delta modulation channel."""

    freq = _Field(0)
    raw = _Field(1)
    start = _Field(2)
    length = _Field(3)


class ChannelStatus(_RegisterView):
    """The channel enable and status register."""

    value = _Field(0)
    pulse1 = _Flag(0, 0)
    pulse2 = _Flag(0, 1)
    triangle = _Flag(0, 2)
    noise = _Flag(0, 3)
    dmc = _Flag(0, 4)
    frame_irq = _Flag(0, 6)
    dmc_irq = _Flag(0, 7)


class ApuRegisters(_RegisterView):
    """Twenty-four bytes of audio registers with named bit fields."""

    frame_counter = _Field(REGISTER_COUNT - 1)
    irq_inhibit = _Flag(REGISTER_COUNT - 1, 6)
    four_step_mode = _Flag(REGISTER_COUNT - 1, 7)

    def __init__(self) -> None:
        super().__init__(bytearray(REGISTER_COUNT), 0)
        self.sq1 = PulseRegisters(self._raw, 0)
        self.sq2 = PulseRegisters(self._raw, 4)
        self.tri = TriangleRegisters(self._raw, 8)
        self.noise = NoiseRegisters(self._raw, 12)
        self.dmc = DmcRegisters(self._raw, 16)
        self.channels = ChannelStatus(self._raw, 21)
        self._frame_counter_seq = 0
        self.power_cycle()

    @property
    def raw(self) -> bytes:
        """Copy of the register bytes."""
        return bytes(self._raw)

    @property
    def frame_counter_seq(self) -> int:
        """Current step of the frame counter sequence (a wrapping byte)."""
        return self._frame_counter_seq

    @frame_counter_seq.setter
    def frame_counter_seq(self, value: int) -> None:
        self._frame_counter_seq = value & 0xFF

    def power_cycle(self) -> None:
        """Clear every register."""
        self._raw[:] = bytes(REGISTER_COUNT)
        self._frame_counter_seq = 0

    @staticmethod
    def _index(address: int) -> int:
        if not REGISTER_START <= address <= REGISTER_END:
            raise IndexError(f"address {address:#06x} outside audio registers")
        return (address - REGISTER_START) % REGISTER_COUNT

    def read(self, address: int) -> int:
        """Read the byte at an address."""
        return self._raw[self._index(address)]

    def write(self, address: int, value: int) -> None:
        """Store a byte at an address."""
        self._raw[self._index(address)] = value & 0xFF

    def seek(self, address: int) -> int:
        """Look at the byte at an address without side effects."""
        return self._raw[self._index(address)]