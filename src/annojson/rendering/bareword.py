# topmark:header:start
#
#   project      : AnnoJSON
#   file         : bareword.py
#   file_relpath : src/annojson/rendering/bareword.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decide whether a mapping key may be written without quotes.

The identifier alphabet is stricter than JavaScript's: ASCII letters, digits,
``_`` and ``$`` only.
"""

from __future__ import annotations

import re
from typing import Final

# JavaScript keywords and future reserved words, plus literals that would
# change meaning if left bare.
RESERVED_WORDS: Final[frozenset[str]] = frozenset(
    {
        "break",
        "do",
        "instanceof",
        "typeof",
        "case",
        "else",
        "new",
        "var",
        "catch",
        "finally",
        "return",
        "void",
        "continue",
        "for",
        "switch",
        "while",
        "debugger",
        "function",
        "this",
        "with",
        "default",
        "if",
        "throw",
        "",
        "delete",
        "in",
        "try",
        "class",
        "enum",
        "extends",
        "super",
        "const",
        "export",
        "import",
        "implements",
        "let",
        "private",
        "public",
        "yield",
        "interface",
        "package",
        "protected",
        "static",
        "null",
        "true",
        "false",
    }
)

_IDENTIFIER_RE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")


def is_reserved_word(word: str) -> bool:
    """Return True if ``word`` is reserved and must be quoted."""
    return word in RESERVED_WORDS


def is_legal_bareword(word: str) -> bool:
    """Return True if ``word`` can be written as an unquoted key.

    Args:
        word (str): Key text.

    Returns:
        bool: True when ``word`` is non-empty, does not start with a digit,
            uses only ``[A-Za-z0-9_$]`` and is not a reserved word.
    """
    return _IDENTIFIER_RE.fullmatch(word) is not None and not is_reserved_word(word)
