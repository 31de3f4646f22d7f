"""Configuration: default file name, constants, and working-directory path helpers."""

from __future__ import annotations

import os
from pathlib import Path

# File looked up in the working directory when no source is given
TSCONFIG_FILENAME = "tsconfig.json"

# Trailing marker of a prefix-match alias ("@/*")
WILDCARD_SUFFIX = "/*"

# UTF-8, tolerating a leading byte order mark
ENCODING = "utf-8-sig"


def working_directory(override: Path | str | None = None) -> Path:
    """Return override as an absolute path, or the process working directory if None."""
    if override is None:
        return Path(os.getcwd())
    return Path(os.path.abspath(override))


def resolve_path(base: Path | str, *segments: str) -> Path:
    """
    Join segments onto base and normalize lexically.

    Absolute segments replace everything before them; '.' and '..' collapse and
    trailing separators are dropped. Symlinks are not followed. A leading "//"
    collapses to "/" on POSIX, like Node's path.resolve.
    """
    joined = os.path.normpath(os.path.join(base, *segments))
    if os.name != "nt" and joined.startswith("//"):
        joined = joined[1:]
    return Path(joined)


def default_config_path(cwd: Path | str) -> Path:
    """Path to the auto-detected config (<cwd>/tsconfig.json)."""
    return resolve_path(cwd, TSCONFIG_FILENAME)


def strip_wildcard(pattern: str) -> str:
    """Remove one trailing '/*' from an alias or target pattern; other patterns pass through."""
    if pattern.endswith(WILDCARD_SUFFIX):
        return pattern[: -len(WILDCARD_SUFFIX)]
    return pattern
