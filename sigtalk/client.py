"""Command that sends a message to a server process one signal per bit."""

from __future__ import annotations

import os
import sys
import time
from typing import Optional, Sequence, Union

from sigtalk.ctext import atoi
from sigtalk.protocol import ONE_SIGNAL, ZERO_SIGNAL, encode_bits

__all__ = ["ClientError", "parse_pid", "send_message", "main"]

DEFAULT_DELAY = 0.0001
USAGE = "client want ID massage:"


class ClientError(Exception):
    """Raised for a bad process id, an empty message or a failed send."""


def parse_pid(text: str) -> int:
    """Parse a process id the way the command line gives it; 0 is an error."""
    pid = atoi(text)
    if not pid:
        raise ClientError(f"invalid process id: {text!r}")
    return pid


def send_message(
    pid: int, message: Union[str, bytes], delay: float = DEFAULT_DELAY
) -> int:
    """Send message to pid, pausing delay seconds after each signal.

    Returns the number of signals sent.
    """
    if not message:
        raise ClientError("message is empty")
    sent = 0
    for bit in encode_bits(message):
        try:
            os.kill(pid, ONE_SIGNAL if bit else ZERO_SIGNAL)
        except OSError as exc:
            raise ClientError(f"cannot signal process {pid}: {exc}") from exc
        sent += 1
        if delay:
            time.sleep(delay)
    return sent


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the client: ``client PID MESSAGE``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print(USAGE)
        return 0
    pid_text, message = args
    try:
        pid = parse_pid(pid_text)
        send_message(pid, os.fsencode(message))
    except ClientError:
        sys.stderr.write("Error\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())