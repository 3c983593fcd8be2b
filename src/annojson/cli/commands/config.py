# topmark:header:start
#
#   project      : AnnoJSON
#   file         : config.py
#   file_relpath : src/annojson/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AnnoJSON `config` command group.

  * ``annojson config dump``: show the effective dialect configuration as TOML.

The dump is wrapped between ``# === BEGIN ===`` and ``# === END ===`` markers
so tests and tools can extract it; the TOML between them can be fed back via
``--config``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from annojson.cli.config_resolver import ResolvedConfig, resolve_dialect_config
from annojson.cli.options import CONTEXT_SETTINGS, common_dialect_options
from annojson.config.io import to_toml
from annojson.config.keys import Toml
from annojson.config.types import Dialect

if TYPE_CHECKING:
    from annojson.cli.console import ConsoleLike
    from annojson.config.io import TomlTable

BEGIN_MARKER: str = "# === BEGIN ==="
END_MARKER: str = "# === END ==="


@click.group(
    name="config",
    help="Inspect AnnoJSON configuration.",
    context_settings=CONTEXT_SETTINGS,
)
def config_command() -> None:
    """Group for configuration-related subcommands."""
    # No-op: behavior is provided by subcommands only.


@click.command(
    name="dump",
    help="Dump the effective dialect configuration as TOML.",
    context_settings=CONTEXT_SETTINGS,
)
@common_dialect_options
def config_dump_command(
    *,
    dialect: Dialect | None,
    config_path: str | None,
    no_config: bool,
) -> None:
    """Print the configuration resolved from preset and config file as TOML."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    resolved: ResolvedConfig = resolve_dialect_config(
        dialect=dialect,
        config_path=config_path,
        no_config=no_config,
        overrides={},
    )
    table: TomlTable = {Toml.KEY_DIALECT: resolved.dialect.value}
    table.update(resolved.config.to_toml_dict())

    if resolved.source is not None:
        console.print(f"# Source: {resolved.source}")
    console.print(BEGIN_MARKER)
    console.print(to_toml(table), nl=False)
    console.print(END_MARKER)


config_command.add_command(config_dump_command)
