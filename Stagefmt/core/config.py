from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = "**/*.{js,ts,cjs,mjs,cts,mts,json,jsonc}"

# Editor configuration directories never handed to the formatter.
DEFAULT_EXCLUDED_DIRS: Tuple[str, ...] = (".vscode",)

FORMAT_FIX_COMMAND: Tuple[str, ...] = ("npx", "biome", "format", "--fix")
CHECK_WRITE_COMMAND: Tuple[str, ...] = ("npx", "biome", "check", "--write")

DEFAULT_IGNORE_FILE = ".stagefmtignore"


@dataclass(frozen=True)
class HookConfig:
    """
    Settings for one hook invocation.

    Attributes:
        pattern: Glob the hook runner matches staged files against
        excluded_dirs: Directory names whose contents are never formatted
        format_command: argv prefix of the format-fix invocation
        check_command: argv prefix of the check-write invocation
    """
    pattern: str = DEFAULT_PATTERN
    excluded_dirs: Tuple[str, ...] = DEFAULT_EXCLUDED_DIRS
    format_command: Tuple[str, ...] = FORMAT_FIX_COMMAND
    check_command: Tuple[str, ...] = CHECK_WRITE_COMMAND

    def with_excluded_dirs(self, names: Iterable[str]) -> "HookConfig":
        """Return a copy with additional excluded directory names."""
        merged = list(self.excluded_dirs)
        for name in names:
            name = name.strip().strip("/\\")
            if name and name not in merged:
                merged.append(name)
        return replace(self, excluded_dirs=tuple(merged))

    @property
    def command_templates(self) -> Tuple[Tuple[str, ...], ...]:
        """Command prefixes in the order they run."""
        return (self.format_command, self.check_command)


DEFAULT_CONFIG = HookConfig()


def _read_ignore_file(path: Path) -> list[str]:
    out: List[str] = []
    for line in path.read_text(encoding="utf-8", errors="ignore").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        out.append(line.rstrip("/"))
    return out


def load_config(
    root: Path,
    ignore_file: Optional[Path] = None,
    base: HookConfig = DEFAULT_CONFIG,
) -> HookConfig:
    """
    Build a HookConfig for the repository at 'root'.

    - ignore_file: if given it must be readable; its OSError propagates
    - otherwise '.stagefmtignore' at root is used when present, and an
      unreadable default file falls back to 'base'

    Each non-comment line names one more directory to exclude.
    """
    if ignore_file is not None:
        names = _read_ignore_file(ignore_file)
        logger.debug("Loaded %d exclusions from %s", len(names), ignore_file)
        return base.with_excluded_dirs(names)

    default_file = root / DEFAULT_IGNORE_FILE
    if not default_file.exists():
        return base
    try:
        names = _read_ignore_file(default_file)
    except OSError as e:
        logger.warning("Cannot read %s: %s", default_file, e)
        return base
    logger.debug("Loaded %d exclusions from %s", len(names), default_file)
    return base.with_excluded_dirs(names)


__all__ = [
    "CHECK_WRITE_COMMAND",
    "DEFAULT_CONFIG",
    "DEFAULT_EXCLUDED_DIRS",
    "DEFAULT_IGNORE_FILE",
    "DEFAULT_PATTERN",
    "FORMAT_FIX_COMMAND",
    "HookConfig",
    "load_config",
]
