"""Load a tsconfig: from a file path, from an already-parsed object, or auto-detected in the working directory."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol, Union, runtime_checkable

from tsconfig_aliases.config import ENCODING, default_config_path, resolve_path
from tsconfig_aliases.config import working_directory as get_working_directory
from tsconfig_aliases.errors import ParseError, ReadError
from tsconfig_aliases.jsonc import CommentStripper

logger = logging.getLogger(__name__)


@runtime_checkable
class FileReader(Protocol):
    """Capability for reading a config file's text."""

    def read_text(self, path: Path) -> str:
        """Return the decoded contents of path. Raise OSError if it cannot be read."""
        ...


@runtime_checkable
class TextPreprocessor(Protocol):
    """Capability for turning JSON-with-comments into strict JSON."""

    def strip_comments(self, text: str) -> str:
        """Return text with comments removed or blanked."""
        ...


class LocalFileReader:
    """FileReader for the local filesystem."""

    def read_text(self, path: Path) -> str:
        return Path(path).read_text(encoding=ENCODING)


# --- source variants ---


@dataclass(frozen=True)
class FilePath:
    """Read the config from this path (relative paths resolve against the working directory)."""

    path: Path | str


@dataclass(frozen=True)
class ParsedConfig:
    """Use an already-parsed config object as is."""

    config: Any


@dataclass(frozen=True)
class AutoDetect:
    """Read tsconfig.json from the working directory."""


ConfigSource = Union[FilePath, ParsedConfig, AutoDetect]
RawSource = Union[ConfigSource, str, os.PathLike, Mapping[str, Any], None]


def as_source(source: RawSource = None) -> ConfigSource:
    """
    Convert caller input into a ConfigSource.

    None and "" mean AutoDetect; str and os.PathLike mean FilePath; a variant is
    returned unchanged; anything else is treated as a parsed config object.
    """
    if isinstance(source, (FilePath, ParsedConfig, AutoDetect)):
        return source
    if source is None or source == "":
        return AutoDetect()
    if isinstance(source, (str, os.PathLike)):
        return FilePath(source)
    return ParsedConfig(source)


class ConfigLoader:
    """Loads tsconfig objects using injected file-read and comment-strip collaborators."""

    def __init__(
        self,
        reader: FileReader | None = None,
        preprocessor: TextPreprocessor | None = None,
        working_directory: Path | str | None = None,
    ) -> None:
        self._reader = reader if reader is not None else LocalFileReader()
        self._preprocessor = preprocessor
        self._working_directory = working_directory

    def load(self, source: RawSource = None) -> Any:
        """
        Load a tsconfig object.

        1. FilePath (or a non-empty str / path-like): read, strip comments, parse.
        2. ParsedConfig (or any other object): returned itself, no I/O.
        3. AutoDetect (or None / ""): read <working directory>/tsconfig.json.

        Raises:
            ReadError: If the file is missing or unreadable.
            ParseError: If the text is not valid JSON after stripping comments.
        """
        variant = as_source(source)
        if isinstance(variant, ParsedConfig):
            return variant.config
        cwd = get_working_directory(self._working_directory)
        if isinstance(variant, FilePath):
            path = resolve_path(cwd, os.fspath(variant.path))
        else:
            path = default_config_path(cwd)
        return self._read_and_parse(path)

    def _read_and_parse(self, path: Path) -> Any:
        logger.debug("Reading tsconfig %s", path)
        try:
            text = self._reader.read_text(path)
        except (ReadError, ParseError):
            raise
        except UnicodeDecodeError as e:
            raise ParseError(f"{path} is not valid UTF-8: {e}", path) from e
        except OSError as e:
            raise ReadError(f"Cannot read {path}: {e.strerror or e}", path) from e
        if self._preprocessor is None:
            self._preprocessor = CommentStripper()
        cleaned = self._preprocessor.strip_comments(text)
        try:
            return json.loads(cleaned)
        except (ValueError, RecursionError) as e:
            # ValueError also covers int literals over the digit limit
            raise ParseError(f"Invalid JSON in {path}: {e}", path) from e


def load_config(
    source: RawSource = None,
    *,
    working_directory: Path | str | None = None,
    reader: FileReader | None = None,
    preprocessor: TextPreprocessor | None = None,
) -> Any:
    """Load a tsconfig object from a path, an object, or <cwd>/tsconfig.json (see ConfigLoader.load)."""
    loader = ConfigLoader(reader=reader, preprocessor=preprocessor, working_directory=working_directory)
    return loader.load(source)
