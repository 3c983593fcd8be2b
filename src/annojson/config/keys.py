# topmark:header:start
#
#   project      : AnnoJSON
#   file         : keys.py
#   file_relpath : src/annojson/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for AnnoJSON configuration.

Keys defined here are the external configuration API used in ``annojson.toml``
and in ``[tool.annojson]`` inside ``pyproject.toml``. Renaming or removing a
key is a breaking change. CLI option names are defined by the commands.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by AnnoJSON configuration."""

    # Root
    KEY_DIALECT: Final[str] = "dialect"

    # [format]
    SECTION_FORMAT: Final[str] = "format"

    KEY_INDENT: Final[str] = "indent"
    KEY_COMPACT: Final[str] = "compact"
    KEY_BARE_KEYS: Final[str] = "bare_keys"
    KEY_MULTILINE: Final[str] = "multiline"

    # [comments]
    SECTION_COMMENTS: Final[str] = "comments"

    KEY_ACCEPT: Final[str] = "accept"
    KEY_STANDARD: Final[str] = "standard"

    # [numbers]
    SECTION_NUMBERS: Final[str] = "numbers"

    KEY_BASES: Final[str] = "bases"
    KEY_LITERALS: Final[str] = "literals"
    KEY_STRICT_LIMITS: Final[str] = "strict_limits"
