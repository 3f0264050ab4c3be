import io

import pytest

from textutils.commands.head import HeadOptions, parse_count, run
from textutils.errors import UsageError


def _head(options: HeadOptions) -> tuple[str, str]:
    out, err = io.StringIO(), io.StringIO()
    run(options, out, err)
    return out.getvalue(), err.getvalue()


@pytest.mark.parametrize("value, expected", [("0", 0), ("3", 3), ("0010", 10)])
def test_parse_count_accepts_non_negative(value: str, expected: int) -> None:
    assert parse_count(value, "line") == expected


@pytest.mark.parametrize("value", ["-1", "foo", "3.5", ""])
def test_parse_count_rejects_invalid(value: str) -> None:
    with pytest.raises(UsageError) as exc_info:
        parse_count(value, "byte")
    assert str(exc_info.value) == f"illegal byte count -- {value}"


def test_default_ten_lines(write_file) -> None:
    path = write_file("twelve.txt", "".join(f"{i}\n" for i in range(12)))
    out, _ = _head(HeadOptions(files=[path]))
    assert out == "".join(f"{i}\n" for i in range(10))


def test_lines_keep_crlf(write_file) -> None:
    path = write_file("crlf.txt", "one\r\ntwo\r\nthree\r\n")
    out, _ = _head(HeadOptions(files=[path], lines=2))
    assert out == "one\r\ntwo\r\n"


def test_zero_lines(ten_lines: str) -> None:
    out, _ = _head(HeadOptions(files=[ten_lines], lines=0))
    assert out == ""


def test_bytes(write_file) -> None:
    path = write_file("one.txt", "Öne line, four words.\n")
    out, _ = _head(HeadOptions(files=[path], bytes=4))
    assert out == "Öne"


def test_bytes_split_multibyte_char_is_lossy(write_file) -> None:
    path = write_file("one.txt", "Öne\n")
    out, _ = _head(HeadOptions(files=[path], bytes=1))
    assert out == "�"


def test_multiple_files_have_headers(write_file) -> None:
    one = write_file("one.txt", "1\n")
    two = write_file("two.txt", "2\n")
    out, _ = _head(HeadOptions(files=[one, two], lines=1))
    assert out == f"==> {one} <==\n1\n\n==> {two} <==\n2\n"


def test_missing_file_reported(ten_lines: str, missing_file: str) -> None:
    out, err = _head(HeadOptions(files=[missing_file, ten_lines], lines=1))
    assert err == f"{missing_file}: No such file or directory\n"
    assert out == f"\n==> {ten_lines} <==\nline 1\n"
