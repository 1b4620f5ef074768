# sigtalk

`sigtalk` passes a text message from one process to another using nothing but
the POSIX signals `SIGUSR1` and `SIGUSR2`. Each byte of the message is sent as
eight signals, least significant bit first: `SIGUSR1` carries a 0 bit and
`SIGUSR2` carries a 1 bit. The receiving server puts the bits back together
and writes each finished byte to standard output. A received backslash (`\`)
is printed as a newline.

It runs on POSIX systems only.

## Installation

```
pip install .
```

## Usage

Start the server in one terminal. It prints its process id and then waits for
signals until it is interrupted (Ctrl-C):

```
$ sigtalk-server
process id: 41237
```

From another terminal, send it a message:

```
$ sigtalk-client 41237 "hello\there"
```

The server prints:

```
hello
there
```

The client takes exactly two arguments, the server's process id and the
message. Any other number of arguments prints a usage line to standard error.
The process id is read like C's `atoi`: leading blanks and one sign are
allowed, and reading stops at the first non-digit. A process id of `-1` is
refused. If the process cannot be signalled, the client reports the error on
standard error and exits with status 1. Between signals the client waits half
a millisecond so that the server can keep up. The message is sent up to, not
including, its first NUL byte.

## Library use

The encoding and decoding are available without sending any signals:

```python
from sigtalk.protocol import BitDecoder, encode_bits

decoder = BitDecoder()
received = bytearray()
for bit in encode_bits("hi"):
    byte = decoder.feed(bit)
    if byte is not None:
        received.append(byte)
assert received == b"hi"
```

- `sigtalk.protocol.encode_bits(message)` yields the bits of a `str` (encoded
  as UTF-8) or `bytes` message.
- `BitDecoder.feed(bit)` returns the finished byte after every eighth bit and
  `None` otherwise; `BitDecoder.reset()` drops a partly received byte.
- `render_byte(value)` gives the bytes the server writes for one received
  byte.
- `sigtalk.client.send_message(message, server_pid, delay)` sends a message to
  a running server.
- `sigtalk.server.Server(output)` is the receiving side, writing to a binary
  stream (standard output by default). `handle_signal(signum, frame)` takes one
  bit, `install()` registers the handler for both signals and returns the
  handlers it replaced, and `run()` prints the process id and waits for
  signals, putting the old handlers back when it stops.

The package also has small character and string helpers in `sigtalk.chars`
(`atoi`, `itoa`, `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`,
`toupper`, `tolower`) and `sigtalk.textops` (`split`, `strtrim`, `substr`,
`strnstr`, `strncmp`, `memcmp`, `memchr`, `strchr`, `strrchr`, `strlcpy`,
`strlcat`, `strmapi`). The search functions return an index, or `None` when
nothing is found; `strlcpy` and `strlcat` return the resulting text together
with the length they tried to create.

## What it does not do

There is no acknowledgement from the server, no framing of messages and no
error checking: a lost or late signal shifts every following bit, and the
server cannot tell one sender from another.

## Running the tests

```
pip install ".[test]"
pytest
```