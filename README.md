# minitalk

Two small commands that pass a text message from one process to another
using only two POSIX signals. Each byte of the message goes out as eight
signals, most significant bit first: `SIGUSR1` for a 1 bit, `SIGUSR2` for a
0 bit. The server puts the bits back together and writes each byte to
standard output as soon as it is complete.

Only POSIX systems have these signals.

## Installing

```
pip install .
```

## Usage

Start the server in one terminal. It prints its process id and then waits
until it is interrupted (Ctrl-C):

```
$ minitalk-server
Server PID: 4242
```

From another terminal, send it a message:

```
$ minitalk-client 4242 "hello there"
Message sent
```

The server's terminal then shows `hello there`.

The client needs exactly two arguments. With any other number it prints
`Wrong parameters` and a usage line. The process id is read like C's `atoi`
(leading whitespace and one sign allowed, parsing stops at the first
non-digit); if the result is not positive, it prints `Invalid PID`.

The client waits 250 microseconds after every signal and once more after
every byte, so that the server can keep up.

## What it does not do

- The server sends nothing back: the client cannot tell whether a message
  arrived, and `Message sent` only means every signal was sent.
- The server keeps one decoder for all senders, so messages sent by two
  clients at the same time get mixed together.
- Signals sent faster than the server handles them can be lost, which
  shifts every later bit of that message.

## Using it from Python

The bit encoding is in `minitalk.codec`:

```python
from minitalk.codec import encode_bits, BitDecoder

bits = list(encode_bits("hi"))   # 16 bits, most significant bit first
decoder = BitDecoder()
received = bytes(b for b in map(decoder.feed, bits) if b is not None)
assert received == b"hi"
```

`encode_bits` takes a `str` (encoded as UTF-8) or bytes. `BitDecoder.feed`
takes a 0 or 1 and returns the completed byte as an int after every eighth
bit, `None` before that; anything other than 0 or 1 raises `ValueError`.

`minitalk.client.send_message(pid, message, delay=250e-6)` sends a message to
a running server from your own code. It does nothing when `pid` is 0 or
`message` is `None`. `minitalk.server.main()` and `minitalk.client.main(argv)`
are the functions behind the two commands.

## Helpers

The package also has the small routines the commands are built on:

- `minitalk.charclass`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_lower`, `to_upper`, for an int code or a one-character string
- `minitalk.memory`: `memset`, `bzero`, `calloc`, `memcpy`, `memmove`
  (within one buffer, by offsets), `memchr`, `memcmp`
- `minitalk.strings`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strlcpy`, `strlcat`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi`,
  `striteri`; searches return an index or `None`
- `minitalk.numbers`: `atoi` (wraps to 32-bit signed) and `itoa` (raises
  `OverflowError` outside the 32-bit signed range)
- `minitalk.linkedlist`: a singly linked `LinkedList` of `Node`s, with
  `push_front`, `push_back`, `last`, `clear`, `iterate`, `map`, `len()` and
  iteration
- `minitalk.fdio`: `put_char_fd`, `put_str_fd`, `put_endl_fd`, `put_nbr_fd`
  write to a file descriptor
- `minitalk.printf`: `render(fmt, *args)` returns the formatted text and
  `printf(fmt, *args)` writes it to standard output and returns its length;
  they handle `%c %s %p %d %i %u %x %X %%`, drop unknown conversions and raise
  `TypeError` when arguments run out

## Running the tests

```
pip install ".[test]"
pytest
```