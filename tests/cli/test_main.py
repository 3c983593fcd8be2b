# topmark:header:start
#
#   project      : AnnoJSON
#   file         : test_main.py
#   file_relpath : tests/cli/test_main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for the command group: help, version, verbosity and color flags."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from annojson.cli.errors import AnnojsonUsageError
from annojson.cli.options import ColorMode, resolve_color_mode, resolve_verbosity
from annojson.config.logging import TRACE_LEVEL
from annojson.constants import ANNOJSON_VERSION
from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli
from tests.conftest import mark_cli, parametrize

if TYPE_CHECKING:
    from click.testing import Result


@mark_cli
def test_no_command_prints_help() -> None:
    """It should print a hint and the group help when no command is given."""
    result: Result = run_cli([])
    assert_SUCCESS(result)
    assert "Hint: use 'annojson transcode [INPUT]'" in result.stdout
    assert "transcode" in result.stdout
    assert "version" in result.stdout


@mark_cli
def test_version_outputs_bare_version() -> None:
    """It should print only the version string by default."""
    result: Result = run_cli(["--no-color", "version"])
    assert_SUCCESS(result)
    assert result.stdout.strip() == ANNOJSON_VERSION


@mark_cli
def test_version_verbose_prints_heading() -> None:
    """It should print a heading before the version with -v."""
    result: Result = run_cli(["-v", "--no-color", "version"])
    assert_SUCCESS(result)
    lines: list[str] = result.stdout.splitlines()
    assert lines[0] == "AnnoJSON version:"
    assert lines[1].strip() == ANNOJSON_VERSION


@mark_cli
def test_verbose_and_quiet_flags_parse() -> None:
    """It should accept verbosity and quietness flags and exit with code 0."""
    for args in (["-v", "version"], ["-vvv", "version"], ["-q", "version"], ["-qq", "version"]):
        result: Result = run_cli(args)
        assert_SUCCESS(result)


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    """It should exit with USAGE_ERROR when -v and -q are combined."""
    result: Result = run_cli(["-v", "-q", "version"])
    assert_USAGE_ERROR(result)
    assert "mutually exclusive" in result.stderr


@mark_cli
def test_color_flags_parse() -> None:
    """It should accept every color mode and --no-color."""
    for args in (["--color", "always"], ["--color", "NEVER"], ["--no-color"]):
        result: Result = run_cli([*args, "version"])
        assert_SUCCESS(result)


@mark_cli
def test_logs_go_to_stderr(monkeypatch: pytest.MonkeyPatch) -> None:
    """It should keep log records out of the rendered document."""
    monkeypatch.setenv("ANNOJSON_LOG_LEVEL", "DEBUG")
    result: Result = run_cli(["transcode", "--no-config"], input_text="[1]")
    assert_SUCCESS(result)
    assert result.stdout == "[\n  1\n]\n"
    assert "render: root=sequence" in result.stderr


@parametrize(
    "verbose, quiet, level",
    [
        (0, 0, logging.WARNING),
        (1, 0, logging.INFO),
        (2, 0, logging.DEBUG),
        (3, 0, TRACE_LEVEL),
        (5, 0, TRACE_LEVEL),
        (0, 1, logging.ERROR),
        (0, 2, logging.ERROR),
    ],
)
def test_resolve_verbosity(verbose: int, quiet: int, level: int) -> None:
    """It should map -v/-q counts onto logging levels."""
    assert resolve_verbosity(verbose, quiet) == level


def test_resolve_verbosity_conflict() -> None:
    """It should raise a usage error when both counts are positive."""
    with pytest.raises(AnnojsonUsageError):
        resolve_verbosity(1, 1)


def test_resolve_color_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    """It should honor explicit modes, then FORCE_COLOR/NO_COLOR, then the TTY."""
    assert resolve_color_mode(cli_mode=ColorMode.ALWAYS, stdout_isatty=False)
    assert not resolve_color_mode(cli_mode=ColorMode.NEVER, stdout_isatty=True)
    assert resolve_color_mode(cli_mode=ColorMode.AUTO, stdout_isatty=True)
    assert not resolve_color_mode(cli_mode=None, stdout_isatty=False)

    monkeypatch.setenv("NO_COLOR", "1")
    assert not resolve_color_mode(cli_mode=ColorMode.AUTO, stdout_isatty=True)
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert resolve_color_mode(cli_mode=ColorMode.AUTO, stdout_isatty=False)
    monkeypatch.setenv("FORCE_COLOR", "0")
    assert not resolve_color_mode(cli_mode=ColorMode.AUTO, stdout_isatty=True)
