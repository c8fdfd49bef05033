"""Tests for the CLI module."""
from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from Stagefmt.cli import app

runner = CliRunner()


def test_cli_commands_prints_both_commands(tmp_path: Path) -> None:
    result = runner.invoke(
        app,
        ["commands", "a.ts", ".vscode/settings.json", "b.json", "--root", str(tmp_path)],
    )

    assert result.exit_code == 0
    lines = result.stdout.strip().splitlines()
    assert lines == [
        "npx biome format --fix a.ts b.json",
        "npx biome check --write a.ts b.json",
    ]


def test_cli_commands_nothing_to_do(tmp_path: Path) -> None:
    result = runner.invoke(
        app, ["commands", ".vscode/settings.json", "--root", str(tmp_path)]
    )

    assert result.exit_code == 0
    assert "npx" not in result.output
    assert "No files left" in result.output


def test_cli_commands_json(tmp_path: Path) -> None:
    result = runner.invoke(
        app,
        ["commands", "a.ts", "sub/.vscode/x.json", "--json", "--root", str(tmp_path)],
    )

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["files"] == ["a.ts"]
    assert data["excluded"] == ["sub/.vscode/x.json"]
    assert data["commands"][0] == ["npx", "biome", "format", "--fix", "a.ts"]
    assert data["commands"][1] == ["npx", "biome", "check", "--write", "a.ts"]


def test_cli_commands_from_stdin_with_match(tmp_path: Path) -> None:
    staged = "src/app.ts\nREADME.md\n.vscode/settings.json\n\npackage.json\n"

    result = runner.invoke(
        app,
        ["commands", "--stdin", "--match", "--root", str(tmp_path)],
        input=staged,
    )

    assert result.exit_code == 0
    assert "npx biome format --fix src/app.ts package.json" in result.stdout


def test_cli_filter(tmp_path: Path) -> None:
    result = runner.invoke(
        app,
        ["filter", "a.ts", ".vscode/x.json", "dist/b.js", "--exclude-dir", "dist",
         "--root", str(tmp_path)],
    )

    assert result.exit_code == 0
    assert result.stdout.strip().splitlines() == ["a.ts"]


def test_cli_reads_ignore_file_from_root(tmp_path: Path) -> None:
    (tmp_path / ".stagefmtignore").write_text("generated\n", encoding="utf-8")

    result = runner.invoke(
        app, ["filter", "generated/a.ts", "b.ts", "--root", str(tmp_path)]
    )

    assert result.exit_code == 0
    assert result.stdout.strip().splitlines() == ["b.ts"]


def test_cli_missing_ignore_file(tmp_path: Path) -> None:
    result = runner.invoke(
        app,
        ["commands", "a.ts", "--ignore-file", str(tmp_path / "missing.ignore")],
    )

    # Exit code 2 = configuration error
    assert result.exit_code == 2
    assert "cannot read" in result.output.lower()


def test_cli_version() -> None:
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert "version" in result.stdout.lower()


def test_cli_stdin_keeps_surrounding_whitespace(tmp_path: Path) -> None:
    staged = " lead.ts\ntrail.ts \r\n\n   \n"

    result = runner.invoke(
        app, ["filter", "--stdin", "--root", str(tmp_path)], input=staged
    )

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [" lead.ts", "trail.ts "]


def test_cli_verbose_logs_to_stderr(tmp_path: Path) -> None:
    result = runner.invoke(
        app,
        ["--verbose", "commands", "a.ts", ".vscode/x.json", "--root", str(tmp_path)],
    )

    assert result.exit_code == 0
    assert "Excluding .vscode/x.json" in result.stderr
    assert "Excluding" not in result.stdout
    assert result.stdout.strip().splitlines() == [
        "npx biome format --fix a.ts",
        "npx biome check --write a.ts",
    ]
