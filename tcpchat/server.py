"""Interactive TCP chat server: wait for a line, then answer it."""

from __future__ import annotations

import os
import socket
import sys
from typing import Sequence, TextIO

from tcpchat.client import parse_address
from tcpchat.common import (
    MAX_MSG_SIZE,
    MAX_TEXT_LEN,
    decode_message,
    encode_message,
    read_message,
    usage_text,
)

_BACKLOG = 5


def _say(out: TextIO, text: str) -> None:
    out.write(text)
    out.flush()


def _reason(exc: OSError) -> str:
    return exc.strerror or str(exc)


def _failure(exc: OSError, what: str) -> OSError:
    return OSError(exc.errno, f"{what}: {_reason(exc)}")


def create_listener(host: str, port: int) -> socket.socket:
    """Return a listening socket bound to ``(host, port)`` with SO_REUSEADDR set."""
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    except OSError as exc:
        raise _failure(exc, "Could not create socket") from exc

    try:
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        except OSError as exc:
            raise _failure(exc, "Could not set SO_REUSEADDR on the socket") from exc
        try:
            sock.bind((host, port))
        except OSError as exc:
            raise _failure(
                exc, "Could not bind the server's address to the socket"
            ) from exc
        try:
            sock.listen(_BACKLOG)
        except OSError as exc:
            raise _failure(exc, "listen() call failed") from exc
    except OSError:
        sock.close()
        raise
    return sock


def recv_and_send(conn: socket.socket, out: TextIO, stdin: TextIO) -> None:
    """Answer each message from the client with a line from ``stdin``.

    The connection is closed when the client goes away or an error occurs.
    """
    _say(out, "\nWaiting for a message from the client...\n")
    with conn:
        while True:
            error: OSError | None = None
            try:
                data = conn.recv(MAX_MSG_SIZE)
            except OSError as exc:
                data, error = b"", exc

            _say(out, f"\nMessage received from the client: {decode_message(data)}\n")

            if error is not None:
                _say(
                    out,
                    f"\nError: recv() returned error: {_reason(error)}. Closing the"
                    " server socket.\n",
                )
                return
            if not data:
                _say(
                    out,
                    "\nError: Client socket is closed. Closing the server socket.\n",
                )
                return

            _say(
                out,
                f"\nPlease input a message to send to the client(max {MAX_TEXT_LEN}"
                " characters else the input message will be truncated to"
                f" {MAX_TEXT_LEN} characters): ",
            )
            text = read_message(stdin)
            try:
                conn.sendall(encode_message(text))
            except OSError as exc:
                _say(
                    out,
                    f"\nError: send() returned error: {_reason(exc)}. Closing the"
                    " server socket.\n",
                )
                return

            _say(
                out,
                "\nMessage sent to the client. Waiting for a message from"
                " the client...\n",
            )


def serve(
    listener: socket.socket,
    out: TextIO,
    stdin: TextIO,
    max_connections: int | None = None,
) -> int:
    """Accept clients one at a time and chat with each.

    Runs forever unless ``max_connections`` is given; returns the number of
    connections handled.
    """
    handled = 0
    while max_connections is None or handled < max_connections:
        _say(out, "\nWaiting for a new connection...\n")
        try:
            conn, address = listener.accept()
        except OSError as exc:
            raise _failure(exc, "accept() call failed") from exc

        _say(out, "\nGot a new connection.\n")
        client_host, client_port = address[0], address[1]
        _say(out, f"\nClient's IPv4 address: {client_host}\n")
        _say(out, f"Client's port number: {client_port}\n")

        recv_and_send(conn, out, stdin)
        handled += 1
    return handled


def main(argv: Sequence[str] | None = None) -> int:
    """Listen on the address named on the command line and chat with clients."""
    out = sys.stdout
    args = sys.argv[1:] if argv is None else list(argv)
    program = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "tcpchat-server"

    try:
        host, port = parse_address(args)
    except ValueError:
        _say(out, usage_text(program, "server"))
        return 1

    try:
        listener = create_listener(host, port)
        with listener:
            serve(listener, out, sys.stdin)
    except OSError as exc:
        _say(out, f"\nError: {_reason(exc)}. Exiting..\n\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())