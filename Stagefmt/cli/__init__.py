"""
Command-line interface for Stagefmt.
"""
from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from Stagefmt.core.commands import evaluate
from Stagefmt.core.config import HookConfig, load_config
from Stagefmt.core.filters import select_paths
from Stagefmt.core.result import FilterResult

app = typer.Typer(
    name="stagefmt",
    help="Stagefmt - filter staged files and build formatter commands",
    add_completion=False,
)
console = Console()
error_console = Console(stderr=True)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v",
        help="Log filtering decisions to stderr"
    ),
) -> None:
    """Filter staged files and build formatter commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_path=False)],
        force=True,
    )


def _collect_paths(paths: Optional[List[str]], from_stdin: bool) -> List[str]:
    collected = list(paths or [])
    if from_stdin:
        for line in sys.stdin.read().splitlines():
            if line.strip():
                collected.append(line)
    return collected


def _resolve_config(
    root: Path,
    ignore_file: Optional[Path],
    exclude_dirs: Optional[List[str]],
) -> HookConfig:
    try:
        config = load_config(root, ignore_file=ignore_file)
    except OSError as e:
        error_console.print(f"[red]✗[/red] Cannot read ignore file {ignore_file}: {e}")
        raise typer.Exit(code=2)
    if exclude_dirs:
        config = config.with_excluded_dirs(exclude_dirs)
    return config


def _prepare(
    paths: Optional[List[str]],
    from_stdin: bool,
    match: bool,
    root: Path,
    ignore_file: Optional[Path],
    exclude_dirs: Optional[List[str]],
) -> FilterResult:
    config = _resolve_config(root, ignore_file, exclude_dirs)
    candidates = _collect_paths(paths, from_stdin)
    if match:
        candidates = select_paths(candidates, config.pattern)
    return evaluate(candidates, config)


_PATHS_ARG = typer.Argument(None, help="Staged file paths")
_STDIN_OPT = typer.Option(
    False, "--stdin",
    help="Also read newline-separated paths from stdin"
)
_MATCH_OPT = typer.Option(
    False, "--match",
    help="Keep only paths matching the configured glob first"
)
_ROOT_OPT = typer.Option(
    Path("."), "--root",
    help="Repository root where .stagefmtignore is looked up"
)
_IGNORE_FILE_OPT = typer.Option(
    None, "--ignore-file",
    help="Read extra excluded directory names from this file"
)
_EXCLUDE_DIR_OPT = typer.Option(
    None, "--exclude-dir",
    help="Extra directory name to exclude (repeatable)"
)


@app.command()
def commands(
    paths: Optional[List[str]] = _PATHS_ARG,
    from_stdin: bool = _STDIN_OPT,
    match: bool = _MATCH_OPT,
    root: Path = _ROOT_OPT,
    ignore_file: Optional[Path] = _IGNORE_FILE_OPT,
    exclude_dir: Optional[List[str]] = _EXCLUDE_DIR_OPT,
    json_output: bool = typer.Option(False, "--json", help="Output result as JSON"),
) -> None:
    """
    Print the formatter commands for the given staged files.

    Examples:

        # Commands for two files, one per line
        stagefmt commands src/app.ts package.json

        # Feed the staged file list from git
        git diff --cached --name-only | stagefmt commands --stdin --match

        # Argument vectors as JSON
        stagefmt commands src/app.ts --json
    """
    result = _prepare(paths, from_stdin, match, root, ignore_file, exclude_dir)

    if json_output:
        print(json.dumps(result.to_dict(), indent=2))
        raise typer.Exit(code=0)

    if not result.has_work:
        error_console.print("[cyan]ℹ[/cyan] No files left to format")
        raise typer.Exit(code=0)

    for command in result.commands:
        typer.echo(command.to_string())


@app.command("filter")
def filter_(
    paths: Optional[List[str]] = _PATHS_ARG,
    from_stdin: bool = _STDIN_OPT,
    match: bool = _MATCH_OPT,
    root: Path = _ROOT_OPT,
    ignore_file: Optional[Path] = _IGNORE_FILE_OPT,
    exclude_dir: Optional[List[str]] = _EXCLUDE_DIR_OPT,
) -> None:
    """Print the staged files that survive filtering, one per line."""
    result = _prepare(paths, from_stdin, match, root, ignore_file, exclude_dir)
    for path in result.files:
        typer.echo(path)


@app.command()
def version() -> None:
    """Display version information."""
    from Stagefmt import __version__
    console.print(f"Stagefmt version {__version__}")


def main() -> None:
    """Main entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
