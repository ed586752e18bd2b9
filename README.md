# sigtalk

A tiny messaging pair for POSIX systems. A server process waits for signals;
a client sends it a message one bit at a time, using `SIGUSR1` for a 0 bit
and `SIGUSR2` for a 1 bit. Every byte is sent as eight bits, most significant
first, and a message ends with a zero byte, which the server prints as a
newline.

## Installation

```
pip install .
```

## Usage

Start the server in one terminal. It prints its process ID and then waits
until interrupted with Ctrl-C:

```
$ sigtalk-server
Process ID:  4242
```

From another terminal, send it a message:

```
$ sigtalk-client 4242 "hello there"
```

The server prints `hello there` followed by a newline. Each received byte is
written to standard output as soon as its eighth bit arrives.

The client takes exactly two arguments, the server's process ID and the
message. With any other number of arguments it prints the line
`client want ID massage:` and exits with status 0. It writes `Error` to
standard error and exits with status 1 if the process ID does not parse to a
non-zero number, if the message is empty, or if a signal cannot be delivered.
The message is sent as the bytes of the command-line argument, with a pause
of 0.0001 seconds after each signal.

## Library

The package can be used without the commands.

### `sigtalk.protocol`

- `encode_bits(message)` yields the bits a `str` (encoded as UTF-8) or
  `bytes` message is sent as, most significant bit first, with the
  terminating zero byte included.
- `BitDecoder` collects bits: `feed(bit)` takes 0 or 1 and returns the
  finished byte after every eighth bit, otherwise `None`; `pending` is the
  number of bits received towards the current byte.
- `BITS_PER_BYTE`, `TERMINATOR`, `ZERO_SIGNAL` (`SIGUSR1`) and
  `ONE_SIGNAL` (`SIGUSR2`) describe the wire format.

### `sigtalk.client`

- `parse_pid(text)` reads a process ID with `atoi` rules and raises
  `ClientError` when the result is 0.
- `send_message(pid, message, delay=0.0001)` signals each bit to `pid`,
  sleeping `delay` seconds after each signal, and returns the number of
  signals sent. It raises `ClientError` for an empty message or when a
  signal cannot be sent.
- `main(argv=None)` runs the `sigtalk-client` command.

### `sigtalk.server`

- `Server(stream=None)` writes received bytes to a binary stream (standard
  output by default). `handle(signum, frame)` is the signal handler,
  `install()` registers it for both user signals, and `serve_forever()`
  installs the handlers, prints the process ID and waits for signals.
- `main(argv=None)` runs the `sigtalk-server` command.

### `sigtalk.printf`

- `sprintf(fmt, *args)` returns the formatted text; `printf(fmt, *args,
  stream=None)` writes it to `stream` (standard output by default) and
  returns the number of characters written.
- Supported conversions are `%c %s %p %d %i %u %x %X %%`. Integers are
  treated as 32-bit values (`%p` as 64-bit); `%s` of `None` gives `(null)`.
- `FormatError` is raised for an unknown conversion, a trailing lone `%`, or
  too few arguments.

### `sigtalk.ctext`

String and character helpers with C-library semantics: `atoi`, `itoa`,
`split`, `strtrim`, `substr`, `strnstr`, `strncmp`, `strchr`, `strrchr`,
`strmapi`, `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
`to_lower` and `to_upper`. Characters may be given as one-character strings
or integer codes; search functions return an index, or `None` when nothing
is found.

## Limitations

- Only POSIX systems are supported, since delivery relies on `SIGUSR1`,
  `SIGUSR2` and `signal.pause()`.
- The server sends no acknowledgement; the client relies on its fixed pause
  between signals, so signals may be lost if the server is slow.
- The server handles one stream of bits at a time and does not tell
  senders apart.

## Running the tests

```
pip install ".[test]"
pytest
```