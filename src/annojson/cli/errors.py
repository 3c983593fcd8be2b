# topmark:header:start
#
#   project      : AnnoJSON
#   file         : errors.py
#   file_relpath : src/annojson/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the AnnoJSON CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if one is stored on the Click
    context (see `show()`); otherwise Click's default error display is used.
"""

from __future__ import annotations

from typing import IO, Any

import click

from annojson.cli.exit_codes import ExitCode


class AnnojsonCliError(click.ClickException):
    """Base class for all AnnoJSON CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class AnnojsonUsageError(AnnojsonCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class AnnojsonConfigError(AnnojsonCliError):
    """Error for configuration errors (invalid settings or values)."""

    exit_code = ExitCode.CONFIG_ERROR


class AnnojsonInputError(AnnojsonCliError):
    """Error for unreadable input or input that is not valid JSON."""

    exit_code = ExitCode.INPUT_ERROR


class AnnojsonStructureError(AnnojsonCliError):
    """Error for document trees the emitter rejects."""

    exit_code = ExitCode.STRUCTURE_ERROR
