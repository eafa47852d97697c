"""A minimal TCP server answering every HTTP request with a fixed reply."""

import argparse
import socket
import sys

from .errors import ConnectionFailedError, ConnectionRefusedError_
from .messages import HttpRequest
from .parser import parse_request

BUFFER_SIZE = 1024 * 1024
BACKLOG = 100
DEFAULT_PORT = 7777

RESPONSE = (
    b"HTTP/1.1 200 OK\r\n"
    b"Content-Type: text/plain\r\n"
    b"Content-Length: 12\r\n"
    b"\r\n"
    b"Hello World!"
)


class Server:
    """A blocking server bound to all IPv4 addresses on one port."""

    def __init__(self, port: int) -> None:
        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        except OSError as exc:
            raise RuntimeError("Failed to create the socket.") from exc
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.bind(("", port))
        except OSError as exc:
            sock.close()
            raise RuntimeError(
                "Failed to bind the IP address and the port to the socket."
            ) from exc
        self._socket = sock
        self._listening = False
        self.port: int = sock.getsockname()[1]

    def _ensure_listening(self) -> None:
        if self._listening:
            return
        try:
            self._socket.listen(BACKLOG)
        except OSError as exc:
            raise ConnectionRefusedError_("Request Queue is Full.") from exc
        self._listening = True

    def serve_once(self) -> HttpRequest | None:
        """Accept one client, answer it and return its parsed request."""
        self._ensure_listening()
        try:
            client, _ = self._socket.accept()
        except OSError as exc:
            raise ConnectionRefusedError_("Client failed to connect to server.") from exc

        with client:
            print("New client connected successfully.")
            data = client.recv(BUFFER_SIZE)
            if data:
                print(f"Number of received bytes: {len(data)}")

            request = None
            try:
                request = parse_request(data)
            except ValueError as exc:
                print(f"Malformed request: {exc}", file=sys.stderr)
            else:
                print(request.to_string(), end="")

            client.sendall(RESPONSE)
            print("Client disconnected successfully.")
        return request

    def run(self) -> None:
        """Serve clients one after another until an error stops the loop."""
        self._ensure_listening()
        while True:
            self.serve_once()

    def close(self) -> None:
        """Close the listening socket."""
        self._socket.close()

    def __enter__(self) -> "Server":
        return self

    def __exit__(self, *args) -> None:
        self.close()


def main(argv: list[str] | None = None) -> int:
    """Start the server and return the process exit status."""
    parser = argparse.ArgumentParser(description="Serve a fixed HTTP reply.")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    try:
        with Server(args.port) as server:
            server.run()
    except ConnectionFailedError as exc:
        print(f"New Connection Failed:{exc}", file=sys.stderr)
    except ConnectionRefusedError_ as exc:
        print(f"New Connection Refused:{exc}", file=sys.stderr)
    except RuntimeError as exc:
        print(f"Failed Server Init: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())