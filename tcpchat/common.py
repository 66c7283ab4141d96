"""Message limits and helpers shared by the chat client and server."""

from __future__ import annotations

from typing import TextIO

IPV4_ADDR_LEN = 16  # includes the terminating NUL
MAX_MSG_SIZE = 1024  # includes the terminating NUL
MIN_MSG_SIZE = 1  # includes the terminating NUL
MAX_TEXT_LEN = MAX_MSG_SIZE - 1

_ROLE_PORT_PHRASES = {
    "client": ("IPV4", "is listening"),
    "server": ("IPv4", "will listen"),
}


def read_message(stream: TextIO, size: int = MAX_MSG_SIZE) -> str:
    """Read one line from ``stream`` and keep at most ``size - 1`` characters.

    The rest of the line, including its newline, is consumed and discarded.
    At end of input an empty string is returned.
    """
    if not MIN_MSG_SIZE <= size <= MAX_MSG_SIZE:
        raise ValueError(
            f"size must be between {MIN_MSG_SIZE} and {MAX_MSG_SIZE}, got {size}"
        )
    line = stream.readline()
    if line.endswith("\n"):
        line = line[:-1]
    return line[: size - 1]


def encode_message(text: str) -> bytes:
    """Return the wire form of ``text``: UTF-8 bytes followed by one NUL."""
    text = text.split("\0", 1)[0]
    data = text.encode("utf-8")[:MAX_TEXT_LEN]
    # Drop a multi-byte character that the length limit may have cut in two.
    data = data.decode("utf-8", "ignore").encode("utf-8")
    return data + b"\0"


def decode_message(data: bytes) -> str:
    """Return the text of a received buffer, up to its first NUL."""
    payload = bytes(data[:MAX_TEXT_LEN]).split(b"\0", 1)[0]
    return payload.decode("utf-8", "replace")


def usage_text(program: str, role: str) -> str:
    """Return the usage message for the ``client`` or ``server`` command."""
    try:
        ipv4_word, listen_phrase = _ROLE_PORT_PHRASES[role]
    except KeyError:
        raise ValueError(f"unknown role: {role!r}") from None
    return (
        "\nError: Incorrect usage.\n\n"
        f"USAGE: {program} server_ipv4_address server_port_number\n\n"
        "This program takes two arguments. The first is the TCP"
        f" server's {ipv4_word} address and the second is the port number"
        f" on which the TCP server {listen_phrase} for new"
        " connections.\n\n"
        "This program doesn't check the validity of the arguments."
        " So, please give valid arguments else this program may"
        " behave in unexpected manner and it may crash also.\n\n"
        "Please try again. Exiting..\n\n"
    )