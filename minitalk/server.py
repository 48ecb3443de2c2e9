"""Receive bytes sent one bit at a time as SIGUSR1 and SIGUSR2 signals."""

from __future__ import annotations

import os
import signal
import sys
from typing import BinaryIO, Optional, Sequence

from minitalk.formatting import printf
from minitalk.protocol import BitDecoder


class Receiver:
    """Turns incoming signals into bytes written to a binary stream.

    SIGUSR1 carries a one bit and SIGUSR2 a zero bit; each completed byte
    is written out at once.
    """

    def __init__(self, stream: Optional[BinaryIO] = None) -> None:
        self.stream = stream
        self.decoder = BitDecoder()

    def _output(self) -> BinaryIO:
        return sys.stdout.buffer if self.stream is None else self.stream

    def _take(self, bit: int) -> None:
        byte = self.decoder.feed(bit)
        if byte is not None:
            out = self._output()
            out.write(bytes([byte]))
            out.flush()

    def on_one(self, signum: int, frame: object) -> None:
        """Handle a signal carrying a one bit."""
        self._take(1)

    def on_zero(self, signum: int, frame: object) -> None:
        """Handle a signal carrying a zero bit."""
        self._take(0)

    def install(self) -> None:
        """Register the handlers for SIGUSR1 and SIGUSR2."""
        signal.signal(signal.SIGUSR1, self.on_one)
        signal.signal(signal.SIGUSR2, self.on_zero)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: print the process id and receive until interrupted."""
    printf("Server PID: %d\n", os.getpid())
    receiver = Receiver()
    receiver.install()
    try:
        while True:
            signal.pause()
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    raise SystemExit(main())