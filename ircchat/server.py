"""Chat server: accept one client and print the message it sends."""

from __future__ import annotations

import argparse
import socket
import sys

from ircchat import logmessages as lm
from ircchat.netutil import SERVER_PORT, close_all, make_address, recv_string


def _fail(message: str, exc: OSError) -> None:
    print(lm.get_wsa_error_log(message, exc.errno or 0), file=sys.stderr)


def make_server_listen_socket(host: str = "", port: int = SERVER_PORT) -> socket.socket:
    """Create an IPv4 TCP socket bound to ``host``/``port`` and listening.

    Failures are logged and the original ``OSError`` is raised.
    """
    try:
        listen_sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM, socket.IPPROTO_TCP)
    except OSError as exc:
        _fail(lm.FAIL_TO_CREATE_SOCKET_LOG, exc)
        close_all()
        raise
    print(lm.SUCCESS_TO_CREATE_SOCKET_LOG)

    steps = (
        (lambda: listen_sock.bind(make_address(port, host)),
         lm.FAIL_TO_BIND_SOCKET_LOG, lm.SUCCESS_TO_BIND_SOCKET_LOG),
        (lambda: listen_sock.listen(socket.SOMAXCONN),
         lm.FAIL_TO_LISTEN_SOCKET_LOG, lm.SUCCESS_TO_LISTEN_SOCKET_LOG),
    )
    for action, failure, success in steps:
        try:
            action()
        except OSError as exc:
            _fail(failure, exc)
            close_all(listen_sock)
            raise
        print(success)
    return listen_sock


def accept_client_connection(listen_sock: socket.socket) -> socket.socket:
    """Accept one pending connection; on failure close the listener and raise."""
    try:
        connect_sock, _ = listen_sock.accept()
    except OSError as exc:
        _fail(lm.FAIL_TO_ACCEPT_CONNECT_LOG, exc)
        close_all(listen_sock)
        raise
    print(lm.SUCCESS_TO_ACCEPT_CONNECT_LOG)
    return connect_sock


def main(argv: list[str] | None = None) -> int:
    """Run the server: accept one client, print its message and exit."""
    parser = argparse.ArgumentParser(prog="ircchat-server")
    parser.add_argument("--host", default="")
    parser.add_argument("--port", type=int, default=SERVER_PORT)
    args = parser.parse_args(argv)

    print("서버 프로그램 가동 . . .")
    try:
        listen_sock = make_server_listen_socket(args.host, args.port)
    except OSError:
        return lm.ABORTED
    print("서버 실행중 . . .")
    try:
        connect_sock = accept_client_connection(listen_sock)
    except OSError:
        return lm.ABORTED

    try:
        print(recv_string(connect_sock))
    except OSError as exc:
        _fail(lm.FAIL_TO_RECV_LOG, exc)
    close_all(listen_sock, connect_sock)
    return 0


if __name__ == "__main__":
    sys.exit(main())