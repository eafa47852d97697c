import socket
import threading
import time

import pytest

from minihttpd.errors import ConnectionRefusedError_
from minihttpd.server import RESPONSE, Server, main


def _client(port, payload, received):
    deadline = time.monotonic() + 5
    while True:
        try:
            conn = socket.create_connection(("127.0.0.1", port), timeout=5)
            break
        except ConnectionRefusedError:
            if time.monotonic() > deadline:
                raise
            time.sleep(0.02)
    with conn:
        conn.sendall(payload)
        chunks = []
        while chunk := conn.recv(4096):
            chunks.append(chunk)
    received.append(b"".join(chunks))


def _exchange(server, payload):
    received = []
    thread = threading.Thread(target=_client, args=(server.port, payload, received))
    thread.start()
    request = server.serve_once()
    thread.join(timeout=10)
    return request, received[0]


def test_serve_once_replies_and_parses(capsys):
    payload = b"GET /hello HTTP/1.1\r\nHost: localhost\r\n\r\n"
    with Server(0) as server:
        request, reply = _exchange(server, payload)
    assert reply == RESPONSE
    assert request.path == "/hello"
    assert request.headers == {"Host": "localhost"}
    out = capsys.readouterr().out
    assert "New client connected successfully." in out
    assert f"Number of received bytes: {len(payload)}" in out
    assert request.to_string() in out
    assert out.rstrip().endswith("Client disconnected successfully.")


def test_malformed_request_still_answered():
    with Server(0) as server:
        request, reply = _exchange(server, b"garbage")
    assert request is None
    assert reply == RESPONSE


def test_response_content_length_matches_body():
    head, body = RESPONSE.split(b"\r\n\r\n", 1)
    assert f"Content-Length: {len(body)}".encode() in head.split(b"\r\n")


def test_bind_failure_raises():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as taken:
        taken.bind(("", 0))
        taken.listen(1)
        port = taken.getsockname()[1]
        with pytest.raises(RuntimeError, match="Failed to bind"):
            Server(port)


def test_closed_server_refuses():
    with Server(0) as server:
        pass
    with pytest.raises(ConnectionRefusedError_):
        server.serve_once()


def test_main_reports_init_failure(capsys):
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as taken:
        taken.bind(("", 0))
        taken.listen(1)
        port = taken.getsockname()[1]
        status = main(["--port", str(port)])
    assert status == 1
    assert "Failed Server Init: Failed to bind" in capsys.readouterr().err