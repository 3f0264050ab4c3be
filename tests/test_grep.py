import io
from pathlib import Path

import pytest

from textutils.commands.grep import GrepOptions, compile_pattern, find_files, find_lines, run
from textutils.errors import InputError, PatternError

BUSTLE = "The bustle in a house\nThe morning after death\nIs solemnest of industries\n"


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    root = tmp_path / "inputs"
    (root / "nested").mkdir(parents=True)
    (root / "bustle.txt").write_text(BUSTLE)
    (root / "nested" / "fox.txt").write_text("The quick brown fox\n")
    return root


def _grep(options: GrepOptions) -> tuple[str, str]:
    out, err = io.StringIO(), io.StringIO()
    run(options, out, err)
    return out.getvalue(), err.getvalue()


def test_compile_pattern_invalid() -> None:
    with pytest.raises(PatternError, match=r'Invalid pattern "\*foo"'):
        compile_pattern("*foo")


def test_compile_pattern_insensitive() -> None:
    assert compile_pattern("the", insensitive=True).search("THE")


def test_find_lines() -> None:
    lines = ["Lorem\n", "Ipsum\n", "DOLOR\n"]
    pattern = compile_pattern("or")
    assert find_lines(lines, pattern, invert=False) == ["Lorem\n"]
    assert find_lines(lines, pattern, invert=True) == ["Ipsum\n", "DOLOR\n"]
    assert find_lines(lines, compile_pattern("or", insensitive=True), invert=False) == [
        "Lorem\n",
        "DOLOR\n",
    ]


def test_find_files_without_recursion(tree: Path, missing_file: str) -> None:
    results = list(find_files([str(tree / "bustle.txt"), str(tree), missing_file], recursive=False))
    assert results[0] == str(tree / "bustle.txt")
    assert isinstance(results[1], InputError)
    assert results[1].reason == "Is a directory"
    assert isinstance(results[2], InputError)
    assert str(results[2]) == f"{missing_file}: No such file or directory"


def test_find_files_recursive(tree: Path) -> None:
    assert list(find_files([str(tree)], recursive=True)) == [
        str(tree / "bustle.txt"),
        str(tree / "nested" / "fox.txt"),
    ]


def test_find_files_passes_stdin() -> None:
    assert list(find_files(["-"], recursive=True)) == ["-"]


def test_single_file_matches(tree: Path) -> None:
    out, _ = _grep(GrepOptions(pattern=compile_pattern("The"), files=[str(tree / "bustle.txt")]))
    assert out == "The bustle in a house\nThe morning after death\n"


def test_count_inverted(tree: Path) -> None:
    options = GrepOptions(
        pattern=compile_pattern("The"),
        files=[str(tree / "bustle.txt")],
        count=True,
        invert_match=True,
    )
    out, _ = _grep(options)
    assert out == "1\n"


def test_recursive_prefixes_names(tree: Path) -> None:
    out, _ = _grep(GrepOptions(pattern=compile_pattern("fox|house"), files=[str(tree)], recursive=True))
    assert out == (
        f"{tree / 'bustle.txt'}:The bustle in a house\n"
        f"{tree / 'nested' / 'fox.txt'}:The quick brown fox\n"
    )


def test_directory_without_recursion_reported(tree: Path) -> None:
    out, err = _grep(GrepOptions(pattern=compile_pattern("fox"), files=[str(tree)]))
    assert out == ""
    assert err == f"{tree} is a directory\n"


def test_bare_carriage_return_does_not_split_line(write_file) -> None:
    path = write_file("cr.txt", b"foo\rbar\nbaz\n")
    out, _ = _grep(GrepOptions(pattern=compile_pattern("bar"), files=[path]))
    assert out == "foo\rbar\n"


def test_recursive_skips_directory_symlinks(tree: Path) -> None:
    (tree / "loop").symlink_to(tree / "nested", target_is_directory=True)
    out, err = _grep(GrepOptions(pattern=compile_pattern("fox"), files=[str(tree)], recursive=True))
    assert out == f"{tree / 'nested' / 'fox.txt'}:The quick brown fox\n"
    assert err == ""
