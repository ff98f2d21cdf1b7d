"""Sends a message to a server process, one signal per bit."""

from __future__ import annotations

import os
import signal
import sys
import time
from typing import List, Optional, Union

from minitalk.codec import BITS_PER_BYTE, encode_bits
from minitalk.numbers import atoi
from minitalk.printf import printf

DEFAULT_DELAY = 250e-6


def send_message(
    pid: int,
    message: Optional[Union[str, bytes]],
    delay: float = DEFAULT_DELAY,
) -> None:
    """Signal each bit of ``message`` to ``pid``: SIGUSR1 for 1, SIGUSR2 for 0.

    Waits ``delay`` seconds after every bit and again after every byte.
    Does nothing when ``pid`` is 0 or ``message`` is None.
    """
    if not pid or message is None:
        return
    data = os.fsencode(message) if isinstance(message, str) else bytes(message)
    for index, bit in enumerate(encode_bits(data), 1):
        os.kill(pid, signal.SIGUSR1 if bit else signal.SIGUSR2)
        time.sleep(delay)
        if index % BITS_PER_BYTE == 0:
            time.sleep(delay)
    printf("Message sent\n")


def main(argv: Optional[List[str]] = None) -> int:
    """Parse ``PID MESSAGE`` from the command line and send the message."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        printf("Wrong parameters\n")
        printf("Usage: ./client [PID] [message]\n")
        return 0
    pid = atoi(args[0])
    if pid <= 0:
        printf("Invalid PID\n")
        return 0
    send_message(pid, args[1])
    return 0


if __name__ == "__main__":
    sys.exit(main())