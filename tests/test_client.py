import io
import socket

import pytest

from ircchat import client
from ircchat import logmessages as lm


@pytest.fixture
def listener():
    sock = socket.socket()
    sock.bind(("127.0.0.1", 0))
    sock.listen(1)
    sock.settimeout(5)
    yield sock
    sock.close()


def _free_port():
    with socket.socket() as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


def _read_all(conn):
    chunks = []
    while True:
        data = conn.recv(100)
        if not data:
            return b"".join(chunks)
        chunks.append(data)


def test_make_connect_socket_connects(listener, capsys):
    port = listener.getsockname()[1]
    sock = client.make_connect_socket("127.0.0.1", port)
    conn, _ = listener.accept()
    try:
        assert sock.getpeername() == ("127.0.0.1", port)
    finally:
        sock.close()
        conn.close()
    out = capsys.readouterr().out
    assert lm.SUCCESS_TO_CONVERT_SERVER_ADDRESS in out
    assert lm.SUCCESS_TO_CONNECT in out


def test_invalid_address_raises(capsys):
    with pytest.raises(OSError):
        client.make_connect_socket("not-an-ip", 5150)
    err = capsys.readouterr().err
    assert lm.FAIL_TO_CONVERT_SERVER_ADDRESS + lm.ERROR_PRES + "0" in err


def test_connection_refused_raises(capsys):
    port = _free_port()
    with pytest.raises(OSError):
        client.make_connect_socket("127.0.0.1", port)
    assert lm.FAIL_TO_CONNECT + lm.ERROR_PRES in capsys.readouterr().err


def test_main_sends_stdin_line(listener, monkeypatch):
    port = listener.getsockname()[1]
    monkeypatch.setattr("sys.stdin", io.StringIO("hello server\nignored\n"))
    code = client.main(["--host", "127.0.0.1", "--port", str(port), "--delay", "0"])
    assert code == 0
    conn, _ = listener.accept()
    with conn:
        assert _read_all(conn) == b"hello server\x00"


def test_main_aborts_without_server(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("x\n"))
    port = _free_port()
    code = client.main(["--host", "127.0.0.1", "--port", str(port), "--delay", "0"])
    assert code == lm.ABORTED