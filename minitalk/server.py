"""Receives messages one bit per signal and prints them as they arrive."""

from __future__ import annotations

import os
import signal
import sys
from typing import List, Optional

from minitalk.codec import BitDecoder
from minitalk.printf import printf


def _emit(byte: int) -> None:
    sys.stdout.flush()
    buffer = getattr(sys.stdout, "buffer", None)
    if buffer is None:
        sys.stdout.write(chr(byte))
        sys.stdout.flush()
        return
    buffer.write(bytes([byte]))
    buffer.flush()


def main(argv: Optional[List[str]] = None) -> int:
    """Print the process id, then print every byte received until interrupted.

    SIGUSR1 carries a 1 bit and SIGUSR2 a 0 bit.
    """
    decoder = BitDecoder()

    def handle(signum: int, frame: object) -> None:
        byte = decoder.feed(1 if signum == signal.SIGUSR1 else 0)
        if byte is not None:
            _emit(byte)

    pid = os.getpid()
    if pid <= 0:
        return 0
    printf("Server PID: %d\n", pid)
    signals = (signal.SIGUSR1, signal.SIGUSR2)
    previous = {signum: signal.signal(signum, handle) for signum in signals}
    try:
        while True:
            signal.pause()
    except KeyboardInterrupt:
        pass
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)
    return 0


if __name__ == "__main__":
    sys.exit(main())