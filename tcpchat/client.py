"""Interactive TCP chat client: send a line, then wait for the reply."""

from __future__ import annotations

import ipaddress
import os
import socket
import sys
from typing import Sequence, TextIO

from tcpchat.common import (
    MAX_MSG_SIZE,
    MAX_TEXT_LEN,
    decode_message,
    encode_message,
    read_message,
    usage_text,
)


def _say(out: TextIO, text: str) -> None:
    out.write(text)
    out.flush()


def _reason(exc: OSError) -> str:
    return exc.strerror or str(exc)


def parse_address(argv: Sequence[str]) -> tuple[str, int]:
    """Return ``(host, port)`` from an IPv4 address and a port number."""
    if len(argv) != 2:
        raise ValueError("expected server_ipv4_address and server_port_number")
    host, port_text = argv
    try:
        ipaddress.IPv4Address(host)
    except ValueError:
        raise ValueError(f"invalid IPv4 address: {host!r}") from None
    try:
        port = int(port_text)
    except ValueError:
        raise ValueError(f"invalid port number: {port_text!r}") from None
    if not 0 <= port <= 0xFFFF:
        raise ValueError(f"port number out of range: {port}")
    return host, port


def send_and_recv(sock: socket.socket, out: TextIO, stdin: TextIO) -> None:
    """Alternate between sending a line from ``stdin`` and printing the reply."""
    while True:
        _say(
            out,
            f"\nPlease input a message to send to the server(max {MAX_TEXT_LEN}"
            " characters else the input message will be truncated to"
            f" {MAX_TEXT_LEN} characters): ",
        )
        text = read_message(stdin)
        try:
            sock.sendall(encode_message(text))
        except OSError as exc:
            _say(out, f"\nError: send() returned error: {_reason(exc)}.\n")
            return

        _say(
            out,
            "\nMessage sent to the server. Waiting for a message from"
            " the server...\n",
        )

        error: OSError | None = None
        try:
            data = sock.recv(MAX_MSG_SIZE)
        except OSError as exc:
            data, error = b"", exc

        _say(out, f"\nMessage received from the server: {decode_message(data)}\n")

        if error is not None:
            _say(out, f"\nError: recv() returned error: {_reason(error)}.\n")
            return
        if not data:
            _say(out, "\nError: Server socket is closed.\n")
            return


def main(argv: Sequence[str] | None = None) -> int:
    """Connect to the server named on the command line and chat with it."""
    out = sys.stdout
    args = sys.argv[1:] if argv is None else list(argv)
    program = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "tcpchat-client"

    try:
        host, port = parse_address(args)
    except ValueError:
        _say(out, usage_text(program, "client"))
        return 1

    _say(out, "\n")

    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    except OSError as exc:
        _say(out, f"\nError: Could not create socket: {_reason(exc)}. Exiting..\n\n")
        return 1

    with sock:
        _say(out, "Initiating connection with the server...\n")
        try:
            sock.connect((host, port))
        except OSError as exc:
            _say(
                out,
                f"\nError: Could not connect to server: {_reason(exc)}. Exiting..\n\n",
            )
            return 1

        _say(out, "\nConnected with the server...\n")
        send_and_recv(sock, out, sys.stdin)
        _say(out, "\nClosing the client socket.\n\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())