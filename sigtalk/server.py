"""Command that prints messages received one signal per bit."""

from __future__ import annotations

import os
import signal
import sys
from typing import BinaryIO, Dict, Optional, Sequence

from sigtalk.chars import itoa
from sigtalk.protocol import ONE_SIGNAL, ZERO_SIGNAL, BitDecoder, render_byte


class Server:
    """Decodes bit signals into bytes and writes them to a binary stream."""

    def __init__(self, output: Optional[BinaryIO] = None) -> None:
        self.output = output if output is not None else sys.stdout.buffer
        self.decoder = BitDecoder()

    def handle_signal(self, signum: int, frame: object = None) -> None:
        """Take one bit: the one-signal sets it, anything else leaves it clear."""
        value = self.decoder.feed(1 if signum == ONE_SIGNAL else 0)
        if value is not None:
            self.output.write(render_byte(value))
            self.output.flush()

    def install(self) -> Dict[int, object]:
        """Install the handler for both signals; return the handlers it replaced."""
        return {
            signum: signal.signal(signum, self.handle_signal)
            for signum in (ZERO_SIGNAL, ONE_SIGNAL)
        }

    def run(self) -> None:
        """Announce the process id, then wait for signals until interrupted."""
        self.output.write(f"process id: {itoa(os.getpid())}\n".encode("ascii"))
        self.output.flush()
        previous = self.install()
        try:
            while True:
                signal.pause()
        finally:
            for signum, handler in previous.items():
                signal.signal(signum, handler)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the server until it is interrupted."""
    try:
        Server().run()
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())