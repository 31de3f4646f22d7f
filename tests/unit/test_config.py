"""Unit tests for config constants and path helpers."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from tsconfig_aliases.config import (
    TSCONFIG_FILENAME,
    default_config_path,
    resolve_path,
    strip_wildcard,
    working_directory,
)


def test_working_directory_defaults_to_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert working_directory() == Path(os.getcwd())


def test_working_directory_override_is_absolute(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert working_directory("sub") == Path(os.getcwd()) / "sub"
    assert working_directory(tmp_path) == tmp_path


def test_resolve_path_is_lexical(tmp_path: Path) -> None:
    assert resolve_path(tmp_path, "a/./b/../c/") == tmp_path / "a" / "c"
    assert resolve_path(tmp_path, ".") == tmp_path
    assert resolve_path(tmp_path, "") == tmp_path


def test_resolve_path_absolute_segment_wins(tmp_path: Path) -> None:
    other = tmp_path / "other"
    assert resolve_path(tmp_path / "base", str(other)) == other


@pytest.mark.skipif(os.name == "nt", reason="POSIX double-slash rule")
def test_resolve_path_collapses_leading_double_slash(tmp_path: Path) -> None:
    assert resolve_path(tmp_path, "//abs/x") == Path("/abs/x")
    assert str(resolve_path("//root", "a")) == "/root/a"


def test_default_config_path(tmp_path: Path) -> None:
    assert default_config_path(tmp_path) == tmp_path / TSCONFIG_FILENAME
    assert TSCONFIG_FILENAME == "tsconfig.json"


@pytest.mark.parametrize(
    ("pattern", "expected"),
    [
        ("@/*", "@"),
        ("./src/*", "./src"),
        ("utils", "utils"),
        ("*", "*"),
        ("a/*/b", "a/*/b"),
        ("a/*/*", "a/*"),
    ],
)
def test_strip_wildcard(pattern: str, expected: str) -> None:
    assert strip_wildcard(pattern) == expected
