# topmark:header:start
#
#   project      : AnnoJSON
#   file         : __init__.py
#   file_relpath : src/annojson/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for AnnoJSON.

This package defines the immutable `DialectConfig` snapshot consumed by the
emitter, its `MutableDialectConfig` builder, the dialect presets, TOML loading
via tomlkit, and the project logging setup.
"""

from __future__ import annotations

from annojson.config.model import DialectConfig, MutableDialectConfig
from annojson.config.presets import for_dialect, hjson, json5, strict
from annojson.config.types import Dialect, Multiline

__all__ = [
    "Dialect",
    "DialectConfig",
    "Multiline",
    "MutableDialectConfig",
    "for_dialect",
    "hjson",
    "json5",
    "strict",
]
