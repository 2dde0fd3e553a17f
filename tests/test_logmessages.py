import pytest

from ircchat import logmessages as lm


def test_error_log_uses_source_prefix(tmp_path):
    (tmp_path / "42.txt").write_text("NAME\n", encoding="utf-8")
    log = lm.get_wsa_error_log("fail", 42, tmp_path)
    assert log == "fail\terror #42\tNAME"
    assert log == "fail" + lm.ERROR_PRES + "42\tNAME"


def test_read_error_message_first_line(tmp_path):
    (tmp_path / "10061.txt").write_text("WSAECONNREFUSED\nsecond line\n", encoding="utf-8")
    assert lm.read_error_message(10061, tmp_path) == "WSAECONNREFUSED"


def test_read_error_message_truncates_long_line(tmp_path):
    long_name = "X" * 200
    (tmp_path / "5.txt").write_text(long_name, encoding="utf-8")
    result = lm.read_error_message(5, tmp_path)
    assert len(result) == 63
    assert long_name.startswith(result)


def test_read_error_message_missing_file(tmp_path, capsys):
    assert lm.read_error_message(1234, tmp_path) == ""
    assert lm.FAIL_TO_FIND_ERROR_FILE + "\t" in capsys.readouterr().err


def test_get_wsa_error_log_with_file(tmp_path):
    (tmp_path / "10048.txt").write_text("WSAEADDRINUSE\n", encoding="utf-8")
    log = lm.get_wsa_error_log(lm.FAIL_TO_BIND_SOCKET_LOG, 10048, tmp_path)
    assert log == lm.FAIL_TO_BIND_SOCKET_LOG + "\terror #10048\tWSAEADDRINUSE"


def test_get_wsa_error_log_without_file(tmp_path, capsys):
    log = lm.get_wsa_error_log("boom", 7, tmp_path)
    assert log.startswith("boom" + lm.ERROR_PRES)
    assert log.endswith("\t")
    assert lm.FAIL_TO_FIND_ERROR_FILE in capsys.readouterr().err


@pytest.mark.parametrize("code", [0, 1, 10061])
def test_get_wsa_error_log_contains_code(tmp_path, code):
    log = lm.get_wsa_error_log("", code, tmp_path)
    assert log.split("#", 1)[1].split("\t", 1)[0] == str(code)