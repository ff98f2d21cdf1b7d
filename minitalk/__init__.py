"""Text messaging between processes over SIGUSR1/SIGUSR2, with small string, buffer and printf helpers."""

__version__ = "0.1.0"