# topmark:header:start
#
#   project      : AnnoJSON
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running AnnoJSON in a controlled working directory.

`run_cli_in()` changes the process working directory before invoking the
Click CLI, so config discovery (``annojson.toml``, ``pyproject.toml``) and
relative input paths resolve against the test's temporary directory.

Both helpers restore the suite's TRACE logging afterwards: the CLI reconfigures
the root logger with a handler bound to the runner's (temporary) stderr.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from annojson.cli.exit_codes import ExitCode
from annojson.cli.main import cli
from annojson.config.logging import TRACE_LEVEL, setup_logging

if TYPE_CHECKING:
    from pathlib import Path


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the command invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g.
            ``["transcode", "data.json"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        res = run_cli_in(tmp_path, ["transcode", "data.json"])
        assert res.exit_code == ExitCode.SUCCESS
        ```
    """
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return run_cli(argv, input_text=input_text)
    finally:
        os.chdir(cwd)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper when the test does not depend on files in the working
    directory (e.g. ``--help`` or ``version``) or when every path is absolute.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    try:
        return runner.invoke(cli, argv, input=input_text)
    finally:
        setup_logging(level=TRACE_LEVEL)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 2)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_INPUT_ERROR(result: Result) -> None:
    """Assert that the command exited with INPUT_ERROR (code 4)."""
    assert result.exit_code == ExitCode.INPUT_ERROR, result.output
