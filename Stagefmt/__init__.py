"""
Stagefmt - staged file filtering for pre-commit formatting hooks.
"""
from __future__ import annotations

__version__ = "0.1.0"

from Stagefmt.core.commands import (
    HookCommand,
    build_commands,
    compute_commands,
    evaluate,
)
from Stagefmt.core.config import DEFAULT_CONFIG, HookConfig, load_config
from Stagefmt.core.filters import filter_paths, is_excluded_path

__all__ = [
    "__version__",
    "DEFAULT_CONFIG",
    "HookCommand",
    "HookConfig",
    "build_commands",
    "compute_commands",
    "evaluate",
    "filter_paths",
    "is_excluded_path",
    "load_config",
]
