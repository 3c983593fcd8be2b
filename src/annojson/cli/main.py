# topmark:header:start
#
#   project      : AnnoJSON
#   file         : main.py
#   file_relpath : src/annojson/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AnnoJSON command line entry point.

Key ideas:
- Group-level options (verbosity, color) are initialized once and placed into
  ``ctx.obj`` together with the console.
- Subcommands read shared state from ``ctx.obj`` and stay thin.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from annojson.cli.commands.config import config_command
from annojson.cli.commands.transcode import transcode_command
from annojson.cli.commands.version import version_command
from annojson.cli.console import ClickConsole
from annojson.cli.options import (
    CONTEXT_SETTINGS,
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from annojson.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from annojson.cli.console import ConsoleLike
    from annojson.config.logging import AnnojsonLogger

logger: AnnojsonLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = level_cli

    effective_color_mode: ColorMode = (
        ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    )
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    # ANNOJSON_LOG_LEVEL wins over -v/-q for diagnostics.
    level_env: int | None = resolve_env_log_level()
    log_level: int = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level, color=enable_color)

    console = ClickConsole(enable_color=enable_color)
    ctx.obj["console"] = console


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="AnnoJSON: render annotated documents as JSON, JSON5 or Hjson.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the AnnoJSON CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'annojson transcode [INPUT]' to render a JSON file.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(transcode_command)

cli.add_command(config_command)

if __name__ == "__main__":
    cli()
