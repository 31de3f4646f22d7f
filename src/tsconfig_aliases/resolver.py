"""Turn compilerOptions.paths / baseUrl into a map from alias prefix to absolute directory."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, List, TypedDict

from tsconfig_aliases.config import resolve_path, strip_wildcard
from tsconfig_aliases.config import working_directory as get_working_directory

logger = logging.getLogger(__name__)

AliasMap = Dict[str, str]


class CompilerOptions(TypedDict, total=False):
    """The subset of compilerOptions used for alias resolution."""

    baseUrl: str
    paths: Dict[str, List[str]]


def _first_target(alias: str, targets: Any) -> str | None:
    """Return the first target of an alias entry, or None if it has none usable."""
    if isinstance(targets, str):
        targets = [targets]
    if not isinstance(targets, (list, tuple)):
        logger.warning("Skipping alias %r: targets is %s, not a list", alias, type(targets).__name__)
        return None
    if not targets:
        return None
    first = targets[0]
    if not isinstance(first, str):
        logger.warning("Skipping alias %r: first target %r is not a string", alias, first)
        return None
    return first


def resolve_aliases_from_options(
    options: CompilerOptions | Mapping[str, Any] | None = None,
    *,
    working_directory: Path | str | None = None,
) -> AliasMap:
    """
    Parse path mappings from tsconfig compilerOptions into absolute path aliases.

    - baseUrl is resolved against the working directory (not the tsconfig's own
      directory); without one, targets resolve against the working directory.
    - A trailing '/*' is removed from both the alias and its target.
    - Aliases with an empty target list are skipped.
    - When an alias has several targets, only the first one is used.

    Never raises: unusable entries are skipped and missing options give {}.

    Example:
        {"baseUrl": ".", "paths": {"@/*": ["./src/*"]}} -> {"@": "<cwd>/src"}
    """
    if not isinstance(options, Mapping):
        return {}
    paths = options.get("paths")
    if not paths or not isinstance(paths, Mapping):
        return {}

    cwd = get_working_directory(working_directory)
    base_url = options.get("baseUrl")
    base = resolve_path(cwd, base_url) if base_url and isinstance(base_url, str) else cwd
    logger.debug("Resolving %d alias(es) against %s", len(paths), base)

    aliases: AliasMap = {}
    for alias, targets in paths.items():
        target = _first_target(alias, targets)
        if target is None:
            continue
        key = strip_wildcard(str(alias))
        aliases[key] = str(resolve_path(base, strip_wildcard(target)))
        logger.debug("Alias %s -> %s", key, aliases[key])
    return aliases
