# topmark:header:start
#
#   project      : AnnoJSON
#   file         : options.py
#   file_relpath : src/annojson/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, dialect selection)
and their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from annojson.cli.cli_types import EnumChoiceParam
from annojson.cli.errors import AnnojsonUsageError
from annojson.config.logging import TRACE_LEVEL
from annojson.config.types import Dialect

P = ParamSpec("P")
R = TypeVar("R")

#: Click context settings shared by all commands.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from the ``-v`` and ``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int: The logging level.

    Raises:
        AnnojsonUsageError: If both ``-v`` and ``-q`` are used.

    Behavior:
        Three or more ``-v`` select TRACE, two DEBUG, one INFO.
        One or more ``-q`` select ERROR. The default is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise AnnojsonUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO
    if quiet_count >= 1:  # -q
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` (counted) to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report errors.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode (ColorMode | None): Explicit color mode from the CLI.
        stdout_isatty (bool | None): Whether stdout is a TTY; auto-detected if None.

    Returns:
        bool: True if color output should be enabled.

    Behavior:
        ``--color always``/``never`` win. Otherwise ``FORCE_COLOR`` (non-zero)
        enables and ``NO_COLOR`` disables color; the default follows whether
        stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            # Detached or closed stream.
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_dialect_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--dialect`` and ``--config`` to a command."""
    f = click.option(
        "--dialect",
        "dialect",
        type=EnumChoiceParam(Dialect),
        default=None,
        help=(
            f"Output dialect ({', '.join(d.value for d in Dialect)}). "
            "Defaults to the config file's 'dialect', else json."
        ),
    )(f)
    f = click.option(
        "--config",
        "config_path",
        type=click.Path(exists=True, dir_okay=False),
        default=None,
        help=(
            "Read settings from this TOML file instead of discovering "
            "annojson.toml or [tool.annojson] in pyproject.toml."
        ),
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore discovered config files.",
    )(f)
    return f
