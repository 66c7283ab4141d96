# tcpchat

A minimal interactive chat over TCP/IPv4. One side runs the server and the
other runs the client. The two sides take turns: the client sends a line,
the server replies with a line, and so on.

## Installation

```
pip install .
```

## Usage

Start the server on an address and port:

```
tcpchat-server 127.0.0.1 5000
```

Then connect a client to it from another terminal:

```
tcpchat-client 127.0.0.1 5000
```

Both commands take exactly two arguments: an IPv4 address in dotted form and
a port number from 0 to 65535. With any other number of arguments, or with an
address or port that does not parse, they print usage help and exit with
status 1. If the socket cannot be created, bound or connected, the command
prints the error and exits with status 1.

### Conversation flow

- The client asks for a line, sends it, then waits for the server's reply and
  prints it.
- The server waits for a client message, prints it, asks for a reply line and
  sends it back.
- Only the first 1023 characters of an input line are kept; the rest of the
  line is dropped. On the wire a message is its UTF-8 text, cut to at most
  1023 bytes, followed by one null byte. Received text is read up to its
  first null byte; bytes that are not valid UTF-8 are shown as replacement
  characters.
- When standard input is at its end, an empty message (just the null byte)
  is sent.
- When the client closes the connection, the server closes its side and goes
  back to waiting for a new connection. The server prints each client's
  address and port as it connects.
- When the server closes the connection, the client reports it, closes its
  socket and exits with status 0.

## Using it from Python

The pieces behind the commands can also be used directly.

`tcpchat.common`:

```python
from tcpchat.common import encode_message, decode_message

data = encode_message("hello")   # b"hello\x00"
decode_message(data)             # "hello"
```

- `read_message(stream, size=1024)` reads one line and keeps at most
  `size - 1` characters; `size` outside 1..1024 raises `ValueError`.
- `usage_text(program, role)` returns the usage message for the `"client"` or
  `"server"` role; any other role raises `ValueError`.
- The limits `MAX_MSG_SIZE` (1024), `MIN_MSG_SIZE` (1) and `MAX_TEXT_LEN`
  (1023) are module constants.

`tcpchat.client`:

- `parse_address(argv)` turns `[address, port]` into `(host, port)` and
  raises `ValueError` for anything else.
- `send_and_recv(sock, out, stdin)` runs the client side of the chat on a
  socket that is already connected, reading lines from `stdin` and writing
  to `out`.
- `main(argv=None)` is the `tcpchat-client` command and returns its exit
  status.

`tcpchat.server`:

- `create_listener(host, port)` returns a listening socket with
  `SO_REUSEADDR` set; failures raise `OSError` saying which step failed.
- `recv_and_send(conn, out, stdin)` runs the server side of the chat on one
  accepted connection and closes it when done.
- `serve(listener, out, stdin, max_connections=None)` accepts clients one at
  a time and chats with each; it runs forever unless `max_connections` is
  given, and returns the number of connections handled.
- `main(argv=None)` is the `tcpchat-server` command and returns its exit
  status.

## What it does not do

- The server talks to one client at a time; other clients wait in the
  listen queue until the current conversation ends.
- Only IPv4 addresses are accepted; there is no host-name lookup.
- Traffic is plain text with no encryption or authentication.
- Each side must wait for its turn: a message is read from the socket only
  after the previous one was answered.

## Running the tests

```
pip install .[test]
pytest
```