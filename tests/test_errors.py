import pytest

from textutils.errors import (
    ConfigError,
    InputError,
    PatternError,
    PositionError,
    TextUtilsError,
    UsageError,
)


def test_base_error_message_and_code() -> None:
    err = TextUtilsError("boom", code=2)
    assert str(err) == "boom"
    assert err.message == "boom"
    assert err.code == 2


def test_default_exit_code_is_one() -> None:
    assert UsageError("bad").code == 1


def test_input_error_uses_strerror() -> None:
    try:
        open("/definitely/not/here.txt", "rb")
    except OSError as exc:
        err = InputError("here.txt", exc)
    assert str(err) == "here.txt: No such file or directory"
    assert err.filename == "here.txt"
    assert isinstance(err.original_error, FileNotFoundError)


def test_input_error_with_explicit_reason() -> None:
    err = InputError("dir", reason="Is a directory")
    assert str(err) == "dir: Is a directory"
    assert err.original_error is None


def test_pattern_error_wraps_exception() -> None:
    try:
        raise ValueError("bad regex")
    except ValueError as e:
        err = PatternError('Invalid pattern "*"', original_error=e)
    assert isinstance(err, UsageError)
    assert isinstance(err.original_error, ValueError)


@pytest.mark.parametrize("error_type", [UsageError, PositionError, PatternError, InputError, ConfigError])
def test_all_errors_share_base(error_type: type[TextUtilsError]) -> None:
    assert issubclass(error_type, TextUtilsError)
