"""Send a message to a receiving process one bit at a time as signals."""

from __future__ import annotations

import os
import signal
import sys
import time
from typing import Sequence

from minitalk.chars import atoi
from minitalk.formatting import printf
from minitalk.protocol import byte_to_bits, encode

DEFAULT_DELAY = 450e-6
"""Pause after each signal, in seconds, so the receiver can keep up."""


def _signal_for(bit: int) -> signal.Signals:
    return signal.SIGUSR1 if bit else signal.SIGUSR2


def _check_pid(pid: int) -> None:
    if pid <= 0:
        raise ValueError(f"process id must be positive, got {pid}")


def send_byte(pid: int, byte: int, delay: float = DEFAULT_DELAY) -> None:
    """Send the eight bits of byte to pid, least significant bit first."""
    _check_pid(pid)
    for bit in byte_to_bits(byte):
        os.kill(pid, _signal_for(bit))
        time.sleep(delay)


def send_message(pid: int, message: bytes | str, delay: float = DEFAULT_DELAY) -> None:
    """Send every byte of message to pid; text goes as UTF-8."""
    _check_pid(pid)
    for bit in encode(message):
        os.kill(pid, _signal_for(bit))
        time.sleep(delay)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: client PID MESSAGE."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        printf("Use 2 arguments")
        return 0
    pid = atoi(args[0])
    try:
        send_message(pid, args[1])
    except (ValueError, ProcessLookupError, PermissionError) as exc:
        print(f"client: {exc}", file=sys.stderr)
        return 1
    printf("\n\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())