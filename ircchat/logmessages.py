"""Log messages and socket error reporting helpers."""

from __future__ import annotations

import sys
from pathlib import Path

ABORTED = -1

ERROR_INFO_PATH = "../IRCCore/error_info/"
ERROR_PRES = "\terror #"
TXT = ".txt"

# common
WSA_INIT_FAILURE_LOG = "WinSock2 라이브러리 초기화에 실패했습니다. with error = #"
WSA_INIT_SUCCESS_LOG = "WinSock2 라이브러리 초기화 완료 . . ."
WSA_CLEANUP_LOG = "WinSock2 라이브러리를 종료합니다."
SUCCESS_TO_CREATE_SOCKET_LOG = "소켓 생성 성공 . . ."
FAIL_TO_CREATE_SOCKET_LOG = "소켓 생성에 실패했습니다."
SUCCESS_TO_SEND_LOG = "메세지를 보내는 데 성공했습니다."
FAIL_TO_SEND_LOG = "메세지를 보내는 데 실패했습니다."
SUCCESS_TO_RECV_LOG = "메세지를 받는 데 성공했습니다."
FAIL_TO_RECV_LOG = "메세지를 받는 데 실패했습니다."
CONNECTION_CLOSED_LOG = "연결이 종료되었습니다."

# server only
SUCCESS_TO_BIND_SOCKET_LOG = "소켓에 성공적으로 주소 정보를 바인딩 . . ."
FAIL_TO_BIND_SOCKET_LOG = "소켓 바인딩에 실패했습니다."
SUCCESS_TO_LISTEN_SOCKET_LOG = "소켓을 성공적으로 수신 대기 상태에 배치 . . ."
FAIL_TO_LISTEN_SOCKET_LOG = "소켓을 수신 대기 상태로 배치하는데 실패했습니다."
SUCCESS_TO_ACCEPT_CONNECT_LOG = "클라이언트의 연결 요청을 수용합니다."
FAIL_TO_ACCEPT_CONNECT_LOG = "클라이언트와의 연결에 실패했습니다."

# client only
SUCCESS_TO_CONVERT_SERVER_ADDRESS = "서버 주소 변환 성공 . . ."
FAIL_TO_CONVERT_SERVER_ADDRESS = "서버 주소를 변환하는데 실패했습니다."
SUCCESS_TO_CONNECT = "서버 연결 성공 . . ."
FAIL_TO_CONNECT = "서버와의 연결에 실패했습니다."

FAIL_TO_FIND_ERROR_FILE = "에러 파일을 찾는데 실패했습니다."

_ERROR_NAME_MAX_LEN = 64


def read_error_message(error_code: int, error_dir: str | Path = ERROR_INFO_PATH) -> str:
    """Return the first line of ``<error_dir>/<error_code>.txt``.

    The line is cut to at most 63 characters. When the file cannot be
    opened a notice is written to stderr and an empty string is returned.
    """
    path = Path(error_dir) / f"{error_code}{TXT}"
    try:
        with path.open(encoding="utf-8", errors="replace") as file:
            line = file.readline()
    except OSError:
        print(FAIL_TO_FIND_ERROR_FILE, end="\t", file=sys.stderr)
        return ""
    return line.rstrip("\r\n")[: _ERROR_NAME_MAX_LEN - 1]


def get_wsa_error_log(
    error_message: str = "",
    error_code: int = 0,
    error_dir: str | Path = ERROR_INFO_PATH,
) -> str:
    """Combine a failure description, its error code and the code's name."""
    log = f"{error_message}{ERROR_PRES}{error_code}\t"
    return log + read_error_message(error_code, error_dir)