"""Exceptions raised while loading a tsconfig file."""

from __future__ import annotations

from pathlib import Path


class TsconfigError(Exception):
    """Base class for errors raised by tsconfig_aliases."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class ReadError(TsconfigError, OSError):
    """The config file does not exist or cannot be read."""


class ParseError(TsconfigError, ValueError):
    """The config text is not valid JSON once comments are stripped."""
