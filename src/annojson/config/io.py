# topmark:header:start
#
#   project      : AnnoJSON
#   file         : io.py
#   file_relpath : src/annojson/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O and value getters for AnnoJSON configuration.

This module reads configuration from ``annojson.toml`` or the
``[tool.annojson]`` table of ``pyproject.toml``, and renders configuration
snapshots back to TOML. Parsing and rendering use `tomlkit`; results are plain
``dict`` structures.

Getters validate the expected shape of each value. A value of the wrong shape
is logged as a warning and treated as absent, so user mistakes are surfaced
without changing defaulting behavior.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from annojson.config.logging import get_logger
from annojson.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_SECTION

if TYPE_CHECKING:
    from annojson.config.logging import AnnojsonLogger

TomlTable = dict[str, Any]

E = TypeVar("E", bound=Enum)

logger: AnnojsonLogger = get_logger(__name__)


# --- TOML file I/O ---


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content; an empty dict if the file cannot be
            read or parsed (the failure is logged).
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as exc:
        logger.error("Cannot read config file %s: %s", path, exc)
        return {}
    except TomlkitParseError as exc:
        logger.error("Invalid TOML in %s: %s", path, exc)
        return {}
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_config_table(path: Path) -> TomlTable:
    """Return the AnnoJSON table from a config file.

    For ``pyproject.toml`` the ``[tool.annojson]`` table is extracted; any other
    file is taken as a whole.

    Args:
        path (Path): Path to ``annojson.toml``, ``pyproject.toml`` or another TOML file.

    Returns:
        TomlTable: The AnnoJSON settings (possibly empty).
    """
    data: TomlTable = load_toml_dict(path)
    if path.name != PYPROJECT_FILE_NAME:
        return data
    table: Any = data
    for part in PYPROJECT_SECTION.split("."):
        table = table.get(part, {}) if isinstance(table, dict) else {}
    return cast("TomlTable", table) if isinstance(table, dict) else {}


def discover_config_file(start: Path) -> Path | None:
    """Find the nearest config file in ``start`` or its parents.

    In each directory ``annojson.toml`` wins over ``pyproject.toml``; a
    ``pyproject.toml`` only counts when it carries a ``[tool.annojson]`` table.

    Args:
        start (Path): Directory to start searching from.

    Returns:
        Path | None: The config file found, or None.
    """
    for directory in (start, *start.parents):
        candidate: Path = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            logger.debug("Discovered config file %s", candidate)
            return candidate
        pyproject: Path = directory / PYPROJECT_FILE_NAME
        if pyproject.is_file() and load_config_table(pyproject):
            logger.debug("Discovered config section in %s", pyproject)
            return pyproject
    return None


def to_toml(table: TomlTable) -> str:
    """Render a plain dict as TOML text."""
    return tomlkit.dumps(table)


# --- Value getters ---


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table; missing or non-table values yield an empty dict."""
    value: Any | None = table.get(key)
    if value is None:
        return {}
    if isinstance(value, dict):
        return cast("TomlTable", value)
    logger.warning("Ignoring [%s]: expected a table, got %r", key, value)
    return {}


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table."""
    value: Any | None = table.get(key)
    if value is None or isinstance(value, str):
        return value
    logger.warning("Ignoring %s: expected a string, got %r", key, value)
    return None


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean value from a TOML table."""
    value: Any | None = table.get(key)
    if value is None or isinstance(value, bool):
        return value
    logger.warning("Ignoring %s: expected a boolean, got %r", key, value)
    return None


def get_int_value_or_none(table: TomlTable, key: str) -> int | None:
    """Extract an optional non-negative integer value from a TOML table."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return value
    logger.warning("Ignoring %s: expected a non-negative integer, got %r", key, value)
    return None


def _lookup_enum(enum_cls: type[E], raw: Any, *, by_name: bool) -> E | None:
    if not isinstance(raw, str):
        return None
    key: str = raw.strip().lower()
    for member in enum_cls:
        candidate: str = member.name.lower() if by_name else str(member.value).lower()
        if candidate == key:
            return member
    return None


def get_enum_value_or_none(
    table: TomlTable,
    key: str,
    enum_cls: type[E],
    *,
    by_name: bool = False,
) -> E | None:
    """Extract an optional enum member from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        enum_cls (type[E]): Enum class to convert to.
        by_name (bool): Match member names instead of values (case-insensitive).

    Returns:
        E | None: The matching member, or None when absent or unrecognized.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    member: E | None = _lookup_enum(enum_cls, value, by_name=by_name)
    if member is None:
        logger.warning("Ignoring %s: unknown %s %r", key, enum_cls.__name__, value)
    return member


def get_enum_list_or_none(
    table: TomlTable,
    key: str,
    enum_cls: type[E],
    *,
    by_name: bool = False,
) -> list[E] | None:
    """Extract an optional list of enum members from a TOML table.

    Unrecognized items are logged and skipped; a non-list value is ignored.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        enum_cls (type[E]): Enum class to convert to.
        by_name (bool): Match member names instead of values (case-insensitive).

    Returns:
        list[E] | None: The recognized members, or None when the key is absent
            or not a list.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        logger.warning("Ignoring %s: expected a list, got %r", key, value)
        return None
    members: list[E] = []
    for item in cast("list[Any]", value):
        member: E | None = _lookup_enum(enum_cls, item, by_name=by_name)
        if member is None:
            logger.warning("Ignoring %s item: unknown %s %r", key, enum_cls.__name__, item)
            continue
        members.append(member)
    return members
