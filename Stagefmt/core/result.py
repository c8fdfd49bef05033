from __future__ import annotations

import shlex
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple


@dataclass(frozen=True)
class HookCommand:
    """
    A single formatter invocation.

    Attributes:
        name: Short label for the step (e.g. "format", "check")
        argv: Full argument vector, paths included, ready for a process API
    """
    name: str
    argv: Tuple[str, ...]

    def to_string(self) -> str:
        """Join argv with single spaces, without quoting."""
        return " ".join(self.argv)

    def to_shell(self) -> str:
        """Render argv as one shell-quoted command string."""
        return shlex.join(self.argv)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "argv": list(self.argv)}

    def __str__(self) -> str:
        return self.to_string()


@dataclass
class FilterResult:
    """
    Outcome of filtering one batch of staged paths.

    Attributes:
        files: Paths that survived filtering, in input order
        excluded: Paths dropped because they live in an excluded directory
        commands: Commands to run over 'files' (empty when 'files' is)
    """
    files: List[str]
    excluded: List[str] = field(default_factory=list)
    commands: List[HookCommand] = field(default_factory=list)

    @property
    def has_work(self) -> bool:
        """True when at least one command should run."""
        return len(self.commands) > 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to a dictionary"""
        return {
            "files": list(self.files),
            "excluded": list(self.excluded),
            "commands": [list(c.argv) for c in self.commands],
        }

    def __str__(self) -> str:
        return (
            f"{len(self.files)} files kept, {len(self.excluded)} excluded, "
            f"{len(self.commands)} commands"
        )


__all__ = ["FilterResult", "HookCommand"]
