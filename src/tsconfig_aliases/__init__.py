"""Resolve tsconfig.json path aliases into absolute directories for build tools."""

from tsconfig_aliases.api import resolve_aliases
from tsconfig_aliases.errors import ParseError, ReadError, TsconfigError
from tsconfig_aliases.jsonc import CommentStripper, strip_comments
from tsconfig_aliases.loader import (
    AutoDetect,
    ConfigLoader,
    FilePath,
    ParsedConfig,
    as_source,
    load_config,
)
from tsconfig_aliases.resolver import resolve_aliases_from_options

__version__ = "0.1.0"

__all__ = [
    "AutoDetect",
    "CommentStripper",
    "ConfigLoader",
    "FilePath",
    "ParseError",
    "ParsedConfig",
    "ReadError",
    "TsconfigError",
    "__version__",
    "as_source",
    "load_config",
    "resolve_aliases",
    "resolve_aliases_from_options",
    "strip_comments",
]
