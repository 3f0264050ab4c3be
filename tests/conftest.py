from pathlib import Path

import pytest

from textutils.settings.user import UserSettings


@pytest.fixture
def write_file(tmp_path: Path):
    """Write ``content`` (str or bytes) under tmp_path and return the path as str."""

    def _write(name: str, content: str | bytes) -> str:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode("utf-8"))
        return str(path)

    return _write


@pytest.fixture
def ten_lines(write_file) -> str:
    return write_file("ten.txt", "".join(f"line {i}\n" for i in range(1, 11)))


@pytest.fixture
def missing_file(tmp_path: Path) -> str:
    return str(tmp_path / "does-not-exist.txt")


@pytest.fixture
def fortune_dir(tmp_path: Path) -> Path:
    root = tmp_path / "fortunes"
    root.mkdir()
    (root / "jokes").write_text(
        "Q. What do you call a head of lettuce in a shirt and tie?\n"
        "A. Collared greens.\n"
        "%\n"
        "Q: Why did the gardener quit?\n"
        "A: His celery wasn't high enough.\n"
        "%\n",
        encoding="utf-8",
    )
    (root / "jokes.dat").write_bytes(b"\x00\x00\x00\x02")
    (root / "quotes").write_text(
        "You can observe a lot just by watching.\n"
        "-- Yogi Berra\n"
        "%\n"
        "\n"
        "%\n"
        "It is difficult to get a man to understand something\n"
        "when his salary depends on his not understanding it.\n"
        "-- Upton Sinclair\n",
        encoding="utf-8",
    )
    return root


@pytest.fixture
def no_user_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's own config out of CLI runs."""
    monkeypatch.delenv("TEXTUTILS_CONFIG", raising=False)
    monkeypatch.setattr(UserSettings, "DEFAULT_CONFIG_PATHS", [tmp_path / "absent.yaml"])
