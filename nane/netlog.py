"""Redirects the process's output streams to a network log server."""

from __future__ import annotations

import os
import socket
from typing import List, Optional, Tuple

STDOUT_PORT = 8067
STDERR_PORT = 8068

STDOUT_FILENO = 1
STDERR_FILENO = 2

_active: List["LogConnection"] = []


class LogConnection:
    """A TCP connection to the log server that replaces a file descriptor.

    If the connection cannot be made the descriptor is left alone and
    ``connected`` is false.
    """

    def __init__(self, fd: int, port: int, server_ip: str) -> None:
        self.fd = fd
        self.port = port
        self.socket: Optional[socket.socket] = None
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            sock.connect((server_ip, port))
        except OSError:
            sock.close()
            return
        os.dup2(sock.fileno(), fd)
        self.socket = sock

    @property
    def connected(self) -> bool:
        """Whether the descriptor was redirected to the server."""
        return self.socket is not None

    def close(self) -> None:
        """Close the connection's own socket."""
        if self.socket is not None:
            print(f"closing socket: {self.socket.fileno()}")
            self.socket.close()
            self.socket = None

    def __enter__(self) -> "LogConnection":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def initialize(
    server_ip: str,
    stdout_fd: int = STDOUT_FILENO,
    stderr_fd: int = STDERR_FILENO,
) -> Tuple[LogConnection, ...]:
    """Send standard output and error to the log server at ``server_ip``.

    An empty address disables network logging and returns no connections.
    """
    if not server_ip:
        print("no server ip address provided. sending logs over network has been disabled")
        return ()
    print(f"sending logs over network to ip: {server_ip}")
    connections = (
        LogConnection(stdout_fd, STDOUT_PORT, server_ip),
        LogConnection(stderr_fd, STDERR_PORT, server_ip),
    )
    _active.extend(connections)
    return connections


def close() -> None:
    """Close every connection opened by :func:`initialize`."""
    for connection in _active:
        connection.close()
    _active.clear()