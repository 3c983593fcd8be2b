# topmark:header:start
#
#   project      : AnnoJSON
#   file         : types.py
#   file_relpath : src/annojson/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Enumerations shared by the configuration layer and the emitter."""

from __future__ import annotations

from enum import Enum


class Multiline(str, Enum):
    """Multiline string style to use in rendered documents.

    Attributes:
        NONE: Multiline strings are escaped like any other string.
        JSON5: Line feeds become a backslash line continuation.
        HJSON: Strings are written as indented ``'''`` blocks.
    """

    NONE = "none"
    JSON5 = "json5"
    HJSON = "hjson"


class Dialect(str, Enum):
    """Named dialect presets."""

    JSON = "json"
    JSON5 = "json5"
    HJSON = "hjson"
