"""
Command building for the staged-file formatting hook.

Given the staged paths a hook runner matched against the configured glob,
drop everything inside an excluded directory and produce the format-fix and
check-write invocations for the rest. Nothing here runs a process.
"""
from __future__ import annotations

import logging
from typing import Iterable, List

from Stagefmt.core.config import DEFAULT_CONFIG, HookConfig
from Stagefmt.core.filters import partition_paths
from Stagefmt.core.result import FilterResult, HookCommand

logger = logging.getLogger(__name__)

_STEP_NAMES = ("format", "check")


def evaluate(
    paths: Iterable[str],
    config: HookConfig = DEFAULT_CONFIG,
) -> FilterResult:
    """
    Filter 'paths' and build the commands for the survivors.

    Args:
        paths: Staged file paths, already matched against config.pattern
        config: Hook settings

    Returns:
        FilterResult with kept and excluded paths and the commands

    Raises:
        TypeError: if 'paths' is a bare string or holds a non-string
    """
    kept, excluded = partition_paths(paths, config.excluded_dirs)

    # An empty file list would make the formatter process the whole tree.
    if not kept:
        return FilterResult(files=kept, excluded=excluded)

    commands = [
        HookCommand(name=name, argv=tuple(template) + tuple(kept))
        for name, template in zip(_STEP_NAMES, config.command_templates)
    ]
    for command in commands:
        logger.debug("Built %s command: %s", command.name, command.to_string())
    return FilterResult(files=kept, excluded=excluded, commands=commands)


def build_commands(
    paths: Iterable[str],
    config: HookConfig = DEFAULT_CONFIG,
) -> List[HookCommand]:
    """Return the commands for 'paths' as argv-carrying HookCommands."""
    return evaluate(paths, config).commands


def compute_commands(
    paths: Iterable[str],
    config: HookConfig = DEFAULT_CONFIG,
) -> List[str]:
    """
    Return the command strings for 'paths'.

    Each string is the command prefix followed by the kept paths joined with
    single spaces, the form lint-staged splits into arguments itself. Use
    build_commands for argv lists that need no quoting.

    Example:
        >>> compute_commands(["a.ts", ".vscode/settings.json", "b.json"])
        ['npx biome format --fix a.ts b.json', 'npx biome check --write a.ts b.json']
    """
    return [c.to_string() for c in build_commands(paths, config)]


__all__ = ["HookCommand", "build_commands", "compute_commands", "evaluate"]
