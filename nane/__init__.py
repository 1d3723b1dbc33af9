"""NES audio processing unit, network log server and emulator utilities."""

__version__ = "0.1.0"