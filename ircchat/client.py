"""Chat client: connect to the server and send one line from stdin."""

from __future__ import annotations

import argparse
import socket
import sys
import time

from ircchat import logmessages as lm
from ircchat.netutil import SERVER_IP, SERVER_PORT, close_all, send_string


def make_connect_socket(host: str = SERVER_IP, port: int = SERVER_PORT) -> socket.socket:
    """Create an IPv4 TCP socket connected to ``host``:``port``.

    ``host`` must be a dotted IPv4 address. Failures are logged and the
    original ``OSError`` is raised.
    """
    try:
        connect_sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM, socket.IPPROTO_TCP)
    except OSError as exc:
        print(lm.get_wsa_error_log(lm.FAIL_TO_CREATE_SOCKET_LOG, exc.errno or 0), file=sys.stderr)
        close_all()
        raise
    print(lm.SUCCESS_TO_CREATE_SOCKET_LOG)

    try:
        socket.inet_pton(socket.AF_INET, host)
    except OSError:
        print(f"{lm.FAIL_TO_CONVERT_SERVER_ADDRESS}{lm.ERROR_PRES}0", file=sys.stderr)
        close_all(connect_sock)
        raise
    print(lm.SUCCESS_TO_CONVERT_SERVER_ADDRESS)

    try:
        connect_sock.connect((host, port))
    except OSError as exc:
        print(lm.get_wsa_error_log(lm.FAIL_TO_CONNECT, exc.errno or 0), file=sys.stderr)
        close_all(connect_sock)
        raise
    print(lm.SUCCESS_TO_CONNECT)
    return connect_sock


def main(argv: list[str] | None = None) -> int:
    """Run the client: wait, connect, send one line read from stdin."""
    parser = argparse.ArgumentParser(prog="ircchat-client")
    parser.add_argument("--host", default=SERVER_IP)
    parser.add_argument("--port", type=int, default=SERVER_PORT)
    parser.add_argument("--delay", type=float, default=1.0,
                        help="seconds to wait before connecting")
    args = parser.parse_args(argv)

    time.sleep(args.delay)
    print("IRC Chat 클라이언트 프로그램을 구동합니다 . . .")
    try:
        connect_sock = make_connect_socket(args.host, args.port)
    except OSError:
        return lm.ABORTED

    message = sys.stdin.readline().rstrip("\n")
    try:
        send_string(connect_sock, message)
    except OSError as exc:
        print(lm.get_wsa_error_log(lm.FAIL_TO_SEND_LOG, exc.errno or 0), file=sys.stderr)
    close_all(connect_sock)
    return 0


if __name__ == "__main__":
    sys.exit(main())