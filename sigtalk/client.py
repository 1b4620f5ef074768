"""Command that sends a message to a listening server one signal per bit."""

from __future__ import annotations

import os
import sys
import time
from typing import Optional, Sequence, Union

from sigtalk.chars import atoi
from sigtalk.protocol import ONE_SIGNAL, ZERO_SIGNAL, encode_bits

DEFAULT_DELAY = 0.0005
USAGE = "Fail: ./client <server_pid> <message>\n"


def send_message(
    message: Union[str, bytes], server_pid: int, delay: float = DEFAULT_DELAY
) -> None:
    """Signal every bit of ``message`` to ``server_pid``, pausing ``delay`` seconds each."""
    for bit in encode_bits(message):
        os.kill(server_pid, ONE_SIGNAL if bit else ZERO_SIGNAL)
        time.sleep(delay)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse ``<server_pid> <message>`` and send the message."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        sys.stderr.write(USAGE)
        return 0
    server_pid = atoi(args[0])
    if server_pid == -1:
        sys.stdout.write("pid: can't be -1\n")
        return 0
    try:
        send_message(os.fsencode(args[1]), server_pid)
    except OSError as exc:
        sys.stderr.write(f"cannot signal process {server_pid}: {exc.strerror or exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())