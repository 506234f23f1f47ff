"""Tests for the specref CLI (specref.app)."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Callable

import pytest
from typer.testing import CliRunner

from specref import __version__
from specref.app import app
from specref.exit_codes import (
    EXIT_FILESYSTEM_ERROR,
    EXIT_INVALID_USAGE,
    EXIT_SPEC_PARSE_ERROR,
    EXIT_SUCCESS,
)

CliArgs = Callable[..., list[str]]

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def _strip_ansi(text: str) -> str:
    return _ANSI_RE.sub("", text)


class TestUsage:
    """Argument handling."""

    @pytest.mark.parametrize("count", [0, 1, 2, 3])
    def test_missing_positionals_is_usage_error(
        self, cli_runner: CliRunner, cli_args: CliArgs, count: int
    ) -> None:
        result = cli_runner.invoke(app, cli_args("widgets.yaml", "out")[:count])
        assert result.exit_code == EXIT_INVALID_USAGE
        output = _strip_ansi(result.output)
        assert "Usage" in output
        assert "SPEC_PATH" in output

    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == EXIT_SUCCESS
        assert f"specref {__version__}" in result.output

    def test_help_lists_arguments(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--help"])
        assert result.exit_code == EXIT_SUCCESS
        output = _strip_ansi(result.output)
        for name in ("SPEC_PATH", "OUT_DIR", "SOURCE_URL", "GENERATED_AT", "TITLE"):
            assert name in output
        assert "{spec_path}" not in output


class TestGenerate:
    """Successful runs."""

    def test_writes_reference(
        self, cli_runner: CliRunner, cli_args: CliArgs, tmp_path: Path
    ) -> None:
        out = tmp_path / "docs"
        result = cli_runner.invoke(app, cli_args("widgets.yaml", out))
        assert result.exit_code == EXIT_SUCCESS, result.output
        assert (out / "index.md").is_file()
        page = (out / "groups" / "widgets.md").read_text(encoding="utf-8")
        assert "## listWidgets\n`GET /widgets`\n" in page
        assert "- `200`: OK\n" in page

    def test_title_argument(
        self, cli_runner: CliRunner, cli_args: CliArgs, tmp_path: Path
    ) -> None:
        out = tmp_path / "docs"
        result = cli_runner.invoke(app, cli_args("petstore.json", out, "Pets"))
        assert result.exit_code == EXIT_SUCCESS, result.output
        assert (out / "index.md").read_text(encoding="utf-8").startswith("# Pets\n")

    def test_summary_message(
        self, cli_runner: CliRunner, cli_args: CliArgs, tmp_path: Path
    ) -> None:
        result = cli_runner.invoke(
            app, ["--no-color", *cli_args("assistants.yaml", tmp_path / "docs")]
        )
        assert result.exit_code == EXIT_SUCCESS, result.output
        assert "Wrote 6 operations in 4 groups" in result.output

    def test_quiet_prints_nothing(
        self, cli_runner: CliRunner, cli_args: CliArgs, tmp_path: Path
    ) -> None:
        result = cli_runner.invoke(
            app, ["--quiet", *cli_args("widgets.yaml", tmp_path / "docs")]
        )
        assert result.exit_code == EXIT_SUCCESS
        assert result.output == ""

    def test_rerun_is_idempotent(
        self, cli_runner: CliRunner, cli_args: CliArgs, tmp_path: Path
    ) -> None:
        args = cli_args("widgets.yaml", tmp_path / "docs")
        first = cli_runner.invoke(app, args)
        before = (tmp_path / "docs" / "index.md").read_text(encoding="utf-8")
        second = cli_runner.invoke(app, args)
        assert first.exit_code == second.exit_code == EXIT_SUCCESS
        assert (tmp_path / "docs" / "index.md").read_text(encoding="utf-8") == before


class TestFailures:
    """Errors map to distinct exit codes."""

    def test_missing_input_file(
        self, cli_runner: CliRunner, cli_args: CliArgs, tmp_path: Path
    ) -> None:
        result = cli_runner.invoke(
            app, ["--no-color", *cli_args(tmp_path / "nope.yaml", tmp_path / "out")]
        )
        assert result.exit_code == EXIT_FILESYSTEM_ERROR
        assert "Error: Spec file not found" in result.output

    def test_disallowed_tag(
        self, cli_runner: CliRunner, cli_args: CliArgs, tmp_path: Path
    ) -> None:
        result = cli_runner.invoke(
            app, ["--no-color", *cli_args("unsafe_tag.yaml", tmp_path / "out")]
        )
        assert result.exit_code == EXIT_SPEC_PARSE_ERROR
        assert "Failed to parse spec" in result.output
        assert not (tmp_path / "out").exists()

    def test_unwritable_output(
        self, cli_runner: CliRunner, cli_args: CliArgs, tmp_path: Path
    ) -> None:
        blocker = tmp_path / "out"
        blocker.write_text("not a directory", encoding="utf-8")
        result = cli_runner.invoke(app, cli_args("widgets.yaml", blocker))
        assert result.exit_code == EXIT_FILESYSTEM_ERROR
