"""Server that prints messages received one signal per bit."""

from __future__ import annotations

import os
import signal
import sys
from typing import BinaryIO, Optional, Sequence

from sigtalk.protocol import ONE_SIGNAL, TERMINATOR, ZERO_SIGNAL, BitDecoder

__all__ = ["Server", "main"]


class Server:
    """Decodes incoming signals and writes each completed byte to a stream.

    The terminating zero byte of a message is written as a newline.
    """

    def __init__(self, stream: Optional[BinaryIO] = None) -> None:
        self.stream = sys.stdout.buffer if stream is None else stream
        self.decoder = BitDecoder()

    def _write(self, data: bytes) -> None:
        self.stream.write(data)
        self.stream.flush()

    def handle(self, signum, frame) -> None:
        """Signal handler: SIGUSR2 is a 1 bit, anything else a 0 bit."""
        byte = self.decoder.feed(1 if signum == ONE_SIGNAL else 0)
        if byte is None:
            return
        self._write(b"\n" if byte == TERMINATOR else bytes([byte]))

    def install(self) -> None:
        """Install handle for both user signals."""
        signal.signal(ZERO_SIGNAL, self.handle)
        signal.signal(ONE_SIGNAL, self.handle)

    def serve_forever(self) -> None:
        """Install handlers, announce the process id and wait for signals."""
        self.install()
        self._write(f"Process ID:  {os.getpid()}\n".encode("ascii"))
        while True:
            signal.pause()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the server until interrupted."""
    try:
        Server().serve_forever()
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())