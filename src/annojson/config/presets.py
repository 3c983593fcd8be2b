# topmark:header:start
#
#   project      : AnnoJSON
#   file         : presets.py
#   file_relpath : src/annojson/config/presets.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dialect presets.

Each preset returns a fresh `MutableDialectConfig` so callers can customize
it further before freezing:

    >>> json5().with_indent(4).freeze().indent
    4

- `strict`: strict JSON (quoted keys, no comments, decimal only, strict
  numeric limits).
- `json5`: adds ``/* */`` and ``//`` comments, hex literals, backslash
  continued multiline strings and bare keys.
- `hjson`: adds ``/* */``, ``#`` and ``//`` comments (``#`` standard),
  ``'''`` multiline strings and bare keys.
"""

from __future__ import annotations

from annojson.config.model import MutableDialectConfig
from annojson.config.types import Dialect, Multiline
from annojson.document.integer import Base
from annojson.document.model import CommentFormat


def strict() -> MutableDialectConfig:
    """Return the strict JSON baseline."""
    return MutableDialectConfig()


def json5() -> MutableDialectConfig:
    """Return the JSON5 preset."""
    return (
        strict()
        .with_comments(CommentFormat.BLOCK, CommentFormat.SLASH_SLASH)
        .with_literals(Base.HEX)
        .with_multiline(Multiline.JSON5)
        .with_bare_keys(True)
    )


def hjson() -> MutableDialectConfig:
    """Return the Hjson preset."""
    return (
        strict()
        .with_comments(CommentFormat.BLOCK, CommentFormat.HASH, CommentFormat.SLASH_SLASH)
        .with_standard_comment(CommentFormat.HASH)
        .with_multiline(Multiline.HJSON)
        .with_bare_keys(True)
    )


_PRESETS = {
    Dialect.JSON: strict,
    Dialect.JSON5: json5,
    Dialect.HJSON: hjson,
}


def for_dialect(dialect: Dialect) -> MutableDialectConfig:
    """Return the preset builder for ``dialect``."""
    return _PRESETS[dialect]()
