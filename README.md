# ircchat

A small TCP chat pair: a server that waits for one client and prints the
first message it receives, and a client that connects, reads one line
from standard input and sends it.

Both sides use IPv4 and TCP. Each step (creating the socket, binding,
listening, accepting, converting the server address, connecting) is
reported on standard output. The progress and error messages are in
Korean.

## Installation

```
pip install .
```

## Usage

Start the server in one terminal:

```
ircchat-server [--host HOST] [--port PORT]
```

By default it listens on every interface (`--host ""`) on port 5150.

Then start the client in another terminal, type a line and press Enter:

```
ircchat-client [--host HOST] [--port PORT] [--delay SECONDS]
```

The client waits `--delay` seconds (default 1.0), connects to `--host`
(default `127.0.0.1`) on `--port` (default 5150), reads one line from
standard input and sends it followed by a NUL byte. `--host` must be a
dotted IPv4 address; host names are rejected at the address conversion
step.

The server receives a single chunk of at most 100 bytes, prints the
text before the first NUL byte, closes its sockets and exits.

When creating, binding, listening, accepting, converting the address or
connecting fails, the error is written to standard error and `main`
returns `ABORTED` (`-1`), so the command exits with a non-zero status.
A failure while sending or receiving the message is logged, and the
program still closes its sockets and returns `0`.

## Error descriptions

A failure log line has the form
`<description>\terror #<code>\t<name>`, built by
`ircchat.logmessages.get_wsa_error_log`. The `<name>` part is the first
line (at most 63 characters) of the file `<code>.txt` in the directory
`ircchat.logmessages.ERROR_INFO_PATH`, a path relative to the working
directory. When that file cannot be opened, a notice is written to
standard error and the name is left empty.
`ircchat.logmessages.read_error_message(error_code, error_dir)` reads
such a file directly.

## Using it as a library

```python
from ircchat.server import make_server_listen_socket, accept_client_connection
from ircchat.netutil import recv_string, close_all

listen_sock = make_server_listen_socket("127.0.0.1", 5150)
conn = accept_client_connection(listen_sock)
print(recv_string(conn))
close_all(listen_sock, conn)
```

```python
from ircchat.client import make_connect_socket
from ircchat.netutil import send_string, close_all

sock = make_connect_socket("127.0.0.1", 5150)
send_string(sock, "hello")
close_all(sock)
```

`make_server_listen_socket`, `accept_client_connection` and
`make_connect_socket` log each step and re-raise the `OSError` of a
failed step after closing the socket. In `ircchat.netutil`:

- `make_address(port, host="")` returns `(host, port)` and raises
  `OverflowError` for a port outside 0-65535.
- `send_string(sock, message)` sends the UTF-8 text plus a NUL byte and
  returns the number of bytes sent.
- `recv_string(sock)` returns the text before the first NUL in one
  received chunk of up to 100 bytes, or `""` when the peer has closed.
- `close_all(*socks)` closes every socket given, skipping `None`, and
  prints a cleanup message.

The defaults `SERVER_IP` and `SERVER_PORT` are defined there as well.

## What it does not do

This is a one-shot exchange, not a chat service. The server accepts a
single client, reads a single message and exits; the client sends a
single line and exits. There are no nicknames, channels, replies,
multiple clients or IRC protocol commands, and no message longer than
one 100-byte receive is read in full.

## Running the tests

```
pip install .[test]
pytest
```