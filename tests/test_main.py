from pathlib import Path

import pytest

from textutils.__main__ import run
from textutils.commands import cat as cat_cmd

pytestmark = pytest.mark.usefixtures("no_user_config")


def test_keyboard_interrupt_exits_zero(monkeypatch: pytest.MonkeyPatch) -> None:
    def interrupted(*args, **kwargs) -> None:
        raise KeyboardInterrupt

    monkeypatch.setattr(cat_cmd, "run", interrupted)
    assert run(["cat"]) == 0


def test_success_returns_zero(capsys: pytest.CaptureFixture[str]) -> None:
    assert run(["echo", "hi"]) == 0
    assert capsys.readouterr().out == "hi\n"


def test_fatal_error_returns_its_code(tmp_path: Path) -> None:
    assert run(["--config", str(tmp_path / "nope.yaml"), "echo", "hi"]) == 1


def test_usage_error_returns_two() -> None:
    assert run(["no-such-command"]) == 2
