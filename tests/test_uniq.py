import io
from pathlib import Path

import pytest

from textutils.commands.uniq import UniqOptions, format_group, group_lines, run
from textutils.errors import InputError


def test_group_lines_adjacent_only() -> None:
    lines = ["a\n", "a\n", "b\n", "a\n"]
    assert list(group_lines(lines)) == [(2, "a\n"), (1, "b\n"), (1, "a\n")]


def test_group_lines_ignores_trailing_whitespace() -> None:
    lines = ["a\n", "a  \n", "a"]
    assert list(group_lines(lines)) == [(3, "a\n")]


def test_group_lines_empty() -> None:
    assert list(group_lines([])) == []


def test_format_group() -> None:
    assert format_group(3, "a\n", show_count=True) == "   3 a\n"
    assert format_group(3, "a\n", show_count=False) == "a\n"


def test_run_to_stdout(write_file) -> None:
    path = write_file("in.txt", "x\nx\ny\n")
    out = io.StringIO()
    run(UniqOptions(in_file=path, count=True), out)
    assert out.getvalue() == "   2 x\n   1 y\n"


def test_run_to_out_file(write_file, tmp_path: Path) -> None:
    path = write_file("in.txt", "x\nx\ny\n")
    target = tmp_path / "out.txt"
    out = io.StringIO()
    run(UniqOptions(in_file=path, out_file=str(target)), out)
    assert out.getvalue() == ""
    assert target.read_text() == "x\ny\n"


def test_missing_input_is_fatal(missing_file: str) -> None:
    with pytest.raises(InputError):
        run(UniqOptions(in_file=missing_file), io.StringIO())


def test_unwritable_output_is_fatal(write_file, tmp_path: Path) -> None:
    path = write_file("in.txt", "x\n")
    with pytest.raises(InputError):
        run(UniqOptions(in_file=path, out_file=str(tmp_path / "no" / "dir" / "out.txt")))
