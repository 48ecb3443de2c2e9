# minitalk

There are two small programs in this package. They talk to each other using
nothing but POSIX signals. The client sends each byte of a message to the
server as eight signals, least significant bit first. `SIGUSR1` carries a
1 bit and `SIGUSR2` carries a 0 bit. The server puts the bits back together.
Once all eight bits of a byte have arrived, it writes that byte to standard
output.

The package runs on POSIX systems only, because it needs `SIGUSR1`,
`SIGUSR2` and `signal.pause()`.

## Installation

```sh
pip install .
```

## Usage

Start the server in one terminal. It prints its process id and waits until
you stop it with Ctrl-C:

```sh
minitalk-server
# Server PID: 12345
```

From another terminal, send it a message:

```sh
minitalk-client 12345 "hello there"
```

The server prints `hello there`. Text is sent as UTF-8.

The client takes exactly two arguments: the server's PID and the message.
With any other number of arguments it prints `Use 2 arguments`, sends
nothing and exits with status 0. The PID is read the way C's `atoi` reads a
number: leading whitespace and one sign are allowed, and reading stops at
the first non-digit. The client fails with an error on standard error and
exit status 1 in these cases:

- the PID is not positive
- no process has that PID
- the client may not signal that process

The client pauses 450 microseconds after each signal so that the server
can keep up.

## Limitations

- The server does not acknowledge anything. The client cannot tell whether
  a byte arrived, so bits can be lost if the server falls behind.
- The server adds no separator between messages. It writes each byte the
  moment it is complete.

## Using it as a library

The bit encoding can be used without sending any signals:

```python
from minitalk.protocol import BitDecoder, byte_to_bits, decode, encode

byte_to_bits(0x41)               # [1, 0, 0, 0, 0, 0, 1, 0]
bits = list(encode(b"hi"))       # 16 bits, least significant bit first
assert decode(bits) == b"hi"     # an incomplete trailing byte is dropped

decoder = BitDecoder()
for bit in bits[:8]:
    byte = decoder.feed(bit)     # None until the eighth bit, then the byte
```

Use these functions to send signals from Python:

- `minitalk.client.send_message(pid, message, delay=DEFAULT_DELAY)` sends a
  whole message. Text goes as UTF-8; `bytes` go as they are.
- `minitalk.client.send_byte(pid, byte, delay=DEFAULT_DELAY)` sends a single
  byte.

To receive in your own process, create a `minitalk.server.Receiver` and call
its `install()` method. It then handles `SIGUSR1` and `SIGUSR2` and writes
each completed byte to the binary stream you gave it. Without a stream, it
writes to standard output.

The package also has a few helper modules that the programs use:

- `minitalk.formatting`: a small `printf`-style formatter, through
  `format_string` and `printf`. It supports `%c %s %d %i %u %x %X %p %%`.
- `minitalk.chars`: character classification, `atoi` and `itoa`.
- `minitalk.strings`: searching, splitting, trimming and joining text.
- `minitalk.memory`: operations on `bytearray` buffers.
- `minitalk.linkedlist`: `LinkedList` and `Node`, for a singly linked list.
- `minitalk.output`: writing characters, text and numbers to streams.

## Running the tests

```sh
pip install ".[test]"
pytest
```