import io
import socket
import sys
import threading

import pytest

from tcpchat import client
from tcpchat.common import MAX_MSG_SIZE


def _free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as probe:
        probe.bind(("127.0.0.1", 0))
        return probe.getsockname()[1]


def test_parse_address_valid():
    assert client.parse_address(["127.0.0.1", "8080"]) == ("127.0.0.1", 8080)


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["127.0.0.1"],
        ["127.0.0.1", "80", "extra"],
        ["not-an-ip", "80"],
        ["127.0.0.1", "port"],
        ["127.0.0.1", "70000"],
        ["127.0.0.1", "-1"],
    ],
)
def test_parse_address_rejects(argv):
    with pytest.raises(ValueError):
        client.parse_address(argv)


def test_send_and_recv_until_server_closes():
    sock, peer = socket.socketpair()
    with sock, peer:
        peer.sendall(b"pong\0")
        peer.shutdown(socket.SHUT_WR)
        out = io.StringIO()
        client.send_and_recv(sock, out, io.StringIO("ping\nsecond\n"))
        sock.shutdown(socket.SHUT_WR)
        sent = b""
        while chunk := peer.recv(4096):
            sent += chunk
    text = out.getvalue()
    assert sent == b"ping\0second\0"
    assert "Message received from the server: pong" in text
    assert text.endswith("\nError: Server socket is closed.\n")
    assert text.count("Please input a message to send to the server") == 2


def test_send_and_recv_truncates_long_input():
    sock, peer = socket.socketpair()
    with sock, peer:
        peer.shutdown(socket.SHUT_WR)
        client.send_and_recv(sock, io.StringIO(), io.StringIO("q" * 3000 + "\n"))
        sock.shutdown(socket.SHUT_WR)
        sent = b""
        while chunk := peer.recv(4096):
            sent += chunk
    assert len(sent) == MAX_MSG_SIZE
    assert sent.endswith(b"\0")


def test_main_without_arguments_prints_usage(capsys):
    assert client.main([]) == 1
    assert "server_ipv4_address server_port_number" in capsys.readouterr().out


def test_main_reports_refused_connection(capsys):
    port = _free_port()
    assert client.main(["127.0.0.1", str(port)]) == 1
    assert "Error: Could not connect to server" in capsys.readouterr().out


def test_main_exchanges_with_server(monkeypatch, capsys):
    listener = socket.create_server(("127.0.0.1", 0))
    port = listener.getsockname()[1]
    received = []

    def serve_once():
        conn, _ = listener.accept()
        with conn:
            received.append(conn.recv(MAX_MSG_SIZE))
            conn.sendall(b"pong\0")

    worker = threading.Thread(target=serve_once)
    worker.start()
    monkeypatch.setattr(sys, "stdin", io.StringIO("ping\n"))
    try:
        code = client.main(["127.0.0.1", str(port)])
    finally:
        worker.join(5)
        listener.close()
    output = capsys.readouterr().out
    assert code == 0
    assert received == [b"ping\0"]
    assert "Message received from the server: pong" in output
    assert output.endswith("\nClosing the client socket.\n\n")