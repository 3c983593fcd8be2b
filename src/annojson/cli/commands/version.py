# topmark:header:start
#
#   project      : AnnoJSON
#   file         : version.py
#   file_relpath : src/annojson/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AnnoJSON `version` command.

Prints the AnnoJSON version installed in the active Python environment.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from annojson.constants import ANNOJSON_VERSION

if TYPE_CHECKING:
    from annojson.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of AnnoJSON.",
)
def version_command() -> None:
    """Show the current version of AnnoJSON.

    With ``-v`` a heading precedes the bare version string.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    verbosity: int = ctx.obj.get("verbosity_level", logging.WARNING)

    if verbosity <= logging.INFO:
        console.print(console.styled("AnnoJSON version:", bold=True, underline=True))
        console.print(f"    {console.styled(ANNOJSON_VERSION, bold=True)}")
    else:
        console.print(console.styled(ANNOJSON_VERSION, bold=True))
