"""Server that prints log streams sent over TCP by the emulator."""

from __future__ import annotations

import argparse
import codecs
import logging
import socket
import sys
import threading
from enum import Enum
from typing import Optional, TextIO

from nane.netlog import STDERR_PORT, STDOUT_PORT

_log = logging.getLogger(__name__)

_RECEIVE_SIZE = 256


class StreamKind(Enum):
    """Which local stream a received log is written to."""

    STDOUT = "stdout"
    STDERR = "stderr"


class LogServer:
    """Listens on a port and receives text from one client."""

    def __init__(self, port: int, host: str = "") -> None:
        self.port = port
        self.connected = False
        self._client: Optional[socket.socket] = None
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

        _log.info("creating socket")
        self._socket = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            reuse = getattr(socket, "SO_REUSEPORT", socket.SO_REUSEADDR)
            try:
                self._socket.setsockopt(socket.SOL_SOCKET, reuse, 1)
            except OSError as exc:
                _log.info("failed to set socket options: %s", exc)
            _log.info("starting to bind to port: %d", port)
            self._socket.bind((host, port))
            self._socket.listen(1)
        except OSError:
            self._socket.close()
            raise
        self.connected = True
        _log.info("successfully started listening on port: %d", self.address[1])

    @property
    def address(self):
        """Address the server is listening on."""
        return self._socket.getsockname()

    def wait_for_connection(self) -> socket.socket:
        """Block until a client connects and return its socket."""
        _log.info("waiting to accept")
        try:
            client, _ = self._socket.accept()
        except OSError:
            self.connected = False
            raise
        self._client = client
        _log.info("accepted client on socket: %d", client.fileno())
        return client

    def receive(self) -> str:
        """Receive the next chunk of text; empty once the client has gone."""
        if self._client is None:
            self.connected = False
            return ""
        try:
            data = self._client.recv(_RECEIVE_SIZE)
        except OSError:
            data = b""
        if not data:
            self.connected = False
            return self._decoder.decode(b"", final=True)
        return self._decoder.decode(data)

    def close(self) -> None:
        """Close the listening and client sockets."""
        self._socket.close()
        if self._client is not None:
            self._client.close()
            self._client = None
        self.connected = False

    def __enter__(self) -> "LogServer":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def serve(kind: StreamKind, port: int, out: Optional[TextIO] = None) -> None:
    """Accept one client on a port and copy what it sends to a stream."""
    if out is None:
        out = sys.stdout if kind is StreamKind.STDOUT else sys.stderr
    try:
        server = LogServer(port)
    except OSError as exc:
        print(f"failed to listen on port: {port} ({exc})")
        return
    with server:
        try:
            server.wait_for_connection()
        except OSError:
            print(f"failed to read client on port: {port}")
        print("--------")
        while server.connected:
            message = server.receive()
            if message:
                out.write(message)
                out.flush()


def main(argv=None) -> int:
    """Serve the standard output and standard error log streams."""
    parser = argparse.ArgumentParser(description="Receive emulator logs over the network.")
    parser.add_argument("--stdout-port", type=int, default=STDOUT_PORT)
    parser.add_argument("--stderr-port", type=int, default=STDERR_PORT)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    threads = [
        threading.Thread(target=serve, args=(StreamKind.STDOUT, args.stdout_port), daemon=True),
        threading.Thread(target=serve, args=(StreamKind.STDERR, args.stderr_port), daemon=True),
    ]
    for thread in threads:
        thread.start()
    try:
        for thread in threads:
            thread.join()
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())