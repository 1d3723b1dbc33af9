# nane

Pieces of a NES emulator written in Python:

- the audio processing unit (APU): square, triangle and noise channels,
  volume envelopes, sequencers, the frame counter, the channel mixer and a
  first-order high/low-pass filter chain;
- the APU register file and memory map at `0x4000`–`0x4017`;
- a network log server that receives an emulator's standard output and
  standard error over TCP, and the client side that redirects a process's
  output streams to it;
- a file-system helper for browsing directories and an FPS timer.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Producing audio

`nane.memory_map.ApuMemoryMap` holds the registers (`nane.registers.ApuRegisters`)
and the four channels. Writing a register updates the channel it controls:

```python
from nane.memory_map import ApuMemoryMap
from nane.registers import ApuAddress

memory = ApuMemoryMap()
memory.power_cycle()

# Enable pulse 1, constant volume 15, 50% duty, then set a period.
memory.write(ApuAddress.SND_CHN, 0x01)
memory.write(ApuAddress.SQ1_VOL, 0b1011_1111)
memory.write(ApuAddress.SQ1_LO, 0xFD)
memory.write(ApuAddress.SQ1_HI, 0x08)
```

`read()`, `seek()` and `write()` raise `IndexError` for an address outside
`0x4000`–`0x4017`; `contains()` reports whether an address belongs to the
audio unit (`0x4016`, the joystick strobe, does not).

`nane.apu.Apu` drives a memory map once per CPU cycle:

```python
from nane.apu import Apu

apu = Apu(44100, memory, on_irq=lambda raised: print("frame IRQ"))
for _ in range(100_000):
    apu.step()
samples = list(apu.audio)
```

Each `step()` clocks the channel timers and the frame counter and, at the
requested sample rate, mixes the channels with `mix_channels()`, passes the
result through `filter()` and appends it to `apu.audio`, a deque holding at
most a fifth of a second of samples (the oldest are dropped when it is full).
`on_irq` is called when the four-step frame sequence raises its interrupt and
`irq_inhibit` is clear.

The building blocks can be used on their own:

```python
from nane.sequencer import Sequencer
from nane.envelope import VolumeEnvelope
from nane.filters import LowPassFilter, HighPassFilter
from nane.waves import SquareWave, TriangleWave, NoiseWave
```

## Receiving logs over the network

The log server listens on two ports, 8067 for standard output and 8068 for
standard error, accepts one client on each and copies whatever it sends to
the matching local stream:

```
nane-logserver
nane-logserver --stdout-port 9067 --stderr-port 9068
```

`nane.logserver.LogServer` and `nane.logserver.serve()` give the same from
code.

On the emulator side, `nane.netlog.initialize(server_ip, stdout_fd, stderr_fd)`
connects to the server and redirects the given file descriptors to it,
returning the `LogConnection` objects; a connection that could not be made
leaves its descriptor alone and has `connected` false. An empty server
address disables network logging. `nane.netlog.close()` closes the
connections again.

## Utilities

- `nane.filesystem.FileSystem` keeps a current directory (`current_path`),
  lists a directory's entries, including `.` and `..`, with `list_files()`
  and writes text files into the current directory with `write_file()`;
  `combine_path()`, `is_dir()` and `default_path()` are plain functions.
- `nane.fps.FpsTimer.calc_fps()` counts a frame and returns the number of
  frames counted over the last full second.

## What this package does not do

There is no CPU, picture unit, cartridge loading or delta-modulation channel
here, so it cannot run a game. The audio unit produces samples into a deque
but does not play them on a sound device, and there is no window, menu or
keyboard input.