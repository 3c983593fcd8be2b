# topmark:header:start
#
#   project      : AnnoJSON
#   file         : transcode.py
#   file_relpath : src/annojson/cli/commands/transcode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AnnoJSON `transcode` command.

Reads strict JSON (from a file or STDIN), converts it into a document tree and
renders it in the selected dialect.

Input modes:
  * ``annojson transcode data.json``: read a file.
  * ``annojson transcode -`` (or no argument): read from STDIN.

Output goes to stdout unless ``--output FILE`` is given. Color is applied only
when writing to stdout and color is enabled (see ``--color``).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from annojson.cli.cli_types import EnumChoiceParam
from annojson.cli.config_resolver import ResolvedConfig, resolve_dialect_config
from annojson.cli.errors import AnnojsonCliError, AnnojsonInputError, AnnojsonStructureError
from annojson.cli.options import CONTEXT_SETTINGS, common_dialect_options
from annojson.config.logging import get_logger
from annojson.config.types import Dialect, Multiline
from annojson.core.errors import AnnojsonError
from annojson.document.builders import from_value
from annojson.rendering.api import render
from annojson.rendering.color import ColorProfile

if TYPE_CHECKING:
    from annojson.cli.console import ConsoleLike
    from annojson.config.logging import AnnojsonLogger
    from annojson.document.model import Document

logger: AnnojsonLogger = get_logger(__name__)


def read_json_input(input_path: str) -> Any:
    """Read and decode JSON from ``input_path`` (``-`` for STDIN).

    Raises:
        AnnojsonInputError: If the input cannot be read or is not valid JSON.
    """
    name: str = "<stdin>" if input_path == "-" else input_path
    try:
        if input_path == "-":
            text: str = click.get_text_stream("stdin").read()
        else:
            text = Path(input_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise AnnojsonInputError(f"Cannot read {name}: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise AnnojsonInputError(
            f"{name}:{exc.lineno}:{exc.colno}: invalid JSON: {exc.msg}"
        ) from exc


@click.command(
    name="transcode",
    help="Render JSON input as JSON, JSON5 or Hjson.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument(
    "input_path",
    metavar="[INPUT]",
    type=click.Path(dir_okay=False, allow_dash=True),
    default="-",
)
@common_dialect_options
@click.option(
    "--indent",
    type=click.IntRange(min=0),
    default=None,
    help="Spaces per nesting level.",
)
@click.option(
    "--compact/--no-compact",
    "compact",
    default=None,
    help="Render on a single line without comments.",
)
@click.option(
    "--bare-keys/--no-bare-keys",
    "bare_keys",
    default=None,
    help="Allow unquoted mapping keys when they are legal identifiers.",
)
@click.option(
    "--strict-limits/--no-strict-limits",
    "strict_numeric_limits",
    default=None,
    help="Quote integers larger than 2^53 in magnitude.",
)
@click.option(
    "--multiline",
    "multiline",
    type=EnumChoiceParam(Multiline),
    default=None,
    help=f"Multiline string style ({', '.join(m.value for m in Multiline)}).",
)
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the result to this file instead of stdout.",
)
def transcode_command(
    *,
    input_path: str,
    dialect: Dialect | None,
    config_path: str | None,
    no_config: bool,
    indent: int | None,
    compact: bool | None,
    bare_keys: bool | None,
    strict_numeric_limits: bool | None,
    multiline: Multiline | None,
    output_path: str | None,
) -> None:
    """Render JSON input in the selected dialect.

    Args:
        input_path (str): Input file, or ``-`` for STDIN.
        dialect (Dialect | None): Dialect preset.
        config_path (str | None): Explicit config file.
        no_config (bool): Skip config file discovery.
        indent (int | None): Indent override.
        compact (bool | None): Compact mode override.
        bare_keys (bool | None): Bare key override.
        strict_numeric_limits (bool | None): Strict numeric limits override.
        multiline (Multiline | None): Multiline style override.
        output_path (str | None): Output file; stdout when None.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    resolved: ResolvedConfig = resolve_dialect_config(
        dialect=dialect,
        config_path=config_path,
        no_config=no_config,
        overrides={
            "indent": indent,
            "compact": compact,
            "bare_keys": bare_keys,
            "strict_numeric_limits": strict_numeric_limits,
            "multiline": multiline,
        },
    )

    data: Any = read_json_input(input_path)
    document: Document = from_value(data)

    use_color: bool = bool(ctx.obj.get("color_enabled")) and output_path is None
    try:
        text: str = render(
            document,
            resolved.config,
            color=ColorProfile.basic() if use_color else None,
        )
    except AnnojsonError as exc:
        raise AnnojsonStructureError(str(exc)) from exc

    logger.info(
        "Rendered %s as %s (%d characters)",
        input_path,
        resolved.dialect.value,
        len(text),
    )

    if output_path is None:
        console.print(text)
        return
    try:
        Path(output_path).write_text(f"{text}\n", encoding="utf-8")
    except OSError as exc:
        raise AnnojsonCliError(f"Cannot write {output_path}: {exc}") from exc
