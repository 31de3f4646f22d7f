"""Public entry point: load a tsconfig and resolve its path aliases."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from tsconfig_aliases.config import working_directory as get_working_directory
from tsconfig_aliases.loader import RawSource, load_config
from tsconfig_aliases.resolver import AliasMap, resolve_aliases_from_options


def resolve_aliases(
    source: RawSource = None,
    *,
    working_directory: Path | str | None = None,
) -> AliasMap:
    """
    Parse path aliases from a tsconfig into a map from alias pattern to absolute path,
    ready to hand to a bundler or test runner alias option.

    Args:
        source: Path to a tsconfig file, an already-parsed tsconfig object, or None
            to read tsconfig.json from the working directory.
        working_directory: Directory used for relative paths and baseUrl
            (default: the process working directory at call time).

    Returns:
        Mapping such as {"@components": "/abs/path/to/src/components"}.

    Raises:
        ReadError: If the tsconfig file cannot be read.
        ParseError: If the tsconfig file is not valid JSON after stripping comments.
    """
    cwd = get_working_directory(working_directory)
    config = load_config(source, working_directory=cwd)
    options = config.get("compilerOptions") if isinstance(config, Mapping) else None
    return resolve_aliases_from_options(options, working_directory=cwd)
