import pytest

from mdtouch.core.build_info import DEFAULT_BUILD_DATETIME
from mdtouch.core.build_info import BuildInfo


def test_banner() -> None:
    lines = BuildInfo().banner().splitlines()
    assert lines == [
        f"mdtouch  {DEFAULT_BUILD_DATETIME}",
        "A tool to update file timestamps or create empty files, mimicking the Unix touch command.",
    ]


def test_from_env_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BUILD_DATETIME", raising=False)
    assert BuildInfo.from_env().build_datetime == DEFAULT_BUILD_DATETIME


def test_from_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BUILD_DATETIME", "2030-01-01 00:00:00")
    info = BuildInfo.from_env()
    assert info.build_datetime == "2030-01-01 00:00:00"
    assert info.banner().startswith("mdtouch  2030-01-01 00:00:00\n")
