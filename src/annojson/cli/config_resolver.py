# topmark:header:start
#
#   project      : AnnoJSON
#   file         : config_resolver.py
#   file_relpath : src/annojson/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve the effective dialect configuration from Click parameters.

Resolution order (lowest → highest precedence):
  1. **Dialect preset**: ``--dialect``, else the config file's ``dialect``
     key, else strict JSON.
  2. **Config file**: ``--config FILE``, else the nearest ``annojson.toml``
     (or ``pyproject.toml`` with a ``[tool.annojson]`` table) found from the
     current directory upwards, unless ``--no-config`` is set.
  3. **CLI overrides** (``--indent``, ``--compact``, ...), applied last.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from annojson.cli.errors import AnnojsonConfigError
from annojson.config.io import discover_config_file, get_enum_value_or_none, load_config_table
from annojson.config.keys import Toml
from annojson.config.logging import get_logger
from annojson.config.presets import for_dialect
from annojson.config.types import Dialect

if TYPE_CHECKING:
    from annojson.config.io import TomlTable
    from annojson.config.logging import AnnojsonLogger
    from annojson.config.model import ArgsLike, DialectConfig, MutableDialectConfig

logger: AnnojsonLogger = get_logger(__name__)


@dataclass(frozen=True)
class ResolvedConfig:
    """Outcome of configuration resolution.

    Attributes:
        dialect (Dialect): The preset the configuration started from.
        config (DialectConfig): The frozen configuration.
        source (Path | None): The config file applied, if any.
    """

    dialect: Dialect
    config: DialectConfig
    source: Path | None


def resolve_dialect_config(
    *,
    dialect: Dialect | None,
    config_path: str | None,
    no_config: bool,
    overrides: ArgsLike,
    cwd: Path | None = None,
) -> ResolvedConfig:
    """Build the effective `DialectConfig` for a CLI invocation.

    Args:
        dialect (Dialect | None): Dialect from ``--dialect``.
        config_path (str | None): Explicit config file from ``--config``.
        no_config (bool): Skip config file discovery.
        overrides (ArgsLike): CLI overrides, see `MutableDialectConfig.apply_cli_args`.
        cwd (Path | None): Directory to start discovery from (defaults to the
            current working directory).

    Returns:
        ResolvedConfig: The frozen configuration and where it came from.

    Raises:
        AnnojsonConfigError: If the layered settings are invalid.
    """
    source: Path | None = None
    if config_path is not None:
        source = Path(config_path)
    elif not no_config:
        source = discover_config_file(cwd or Path.cwd())

    table: TomlTable = load_config_table(source) if source is not None else {}
    file_dialect: Dialect | None = get_enum_value_or_none(table, Toml.KEY_DIALECT, Dialect)
    effective: Dialect = dialect or file_dialect or Dialect.JSON
    logger.debug("Resolving config: dialect=%s source=%s", effective.value, source)

    builder: MutableDialectConfig = for_dialect(effective)
    builder.apply_toml_dict(table)
    try:
        builder.apply_cli_args(overrides)
        config: DialectConfig = builder.freeze()
    except ValueError as exc:
        raise AnnojsonConfigError(str(exc)) from exc
    logger.trace("Effective config: %s", config)
    return ResolvedConfig(dialect=effective, config=config, source=source)
