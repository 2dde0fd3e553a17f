"""Socket helpers shared by the chat server and client."""

from __future__ import annotations

import socket

from ircchat.logmessages import WSA_CLEANUP_LOG

SERVER_IP = "127.0.0.1"
SERVER_PORT = 5150

_MAX_BUF_SIZE = 100
_ENCODING = "utf-8"


def make_address(port: int, host: str = "") -> tuple[str, int]:
    """Build an IPv4 ``(host, port)`` address; an empty host means any interface."""
    if not 0 <= port <= 0xFFFF:
        raise OverflowError(f"port must be 0-65535, got {port}")
    return host, port


def send_string(sock: socket.socket, message: str) -> int:
    """Send ``message`` followed by a NUL terminator; return the bytes sent."""
    data = message.encode(_ENCODING) + b"\0"
    sock.sendall(data)
    return len(data)


def recv_string(sock: socket.socket) -> str:
    """Receive one chunk of at most 100 bytes and return the text before any NUL.

    An empty string is returned when the peer has closed the connection.
    """
    data = sock.recv(_MAX_BUF_SIZE)
    if not data:
        return ""
    return data.split(b"\0", 1)[0].decode(_ENCODING, errors="replace")


def close_all(*socks: socket.socket | None) -> None:
    """Close every given socket, skipping ``None``, and report the cleanup."""
    for sock in socks:
        if sock is not None:
            sock.close()
    print(WSA_CLEANUP_LOG)