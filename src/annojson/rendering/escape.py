# topmark:header:start
#
#   project      : AnnoJSON
#   file         : escape.py
#   file_relpath : src/annojson/rendering/escape.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lookup table of JSON string escapes.

``ESCAPE[b]`` is the escape class for byte value ``b``:

- ``""``: not escaped.
- ``"u"``: written as a six-character ``\\u00XX`` escape.
- any other character ``x``: written as the two-character escape ``\\x``.

Only the control range, the double quote and the backslash are escaped; every
other byte (including all non-ASCII code points) passes through unchanged.
"""

from __future__ import annotations

from typing import Final

BB: Final[str] = "b"  # \x08
TT: Final[str] = "t"  # \x09
NN: Final[str] = "n"  # \x0A
FF: Final[str] = "f"  # \x0C
RR: Final[str] = "r"  # \x0D
QU: Final[str] = '"'  # \x22
BS: Final[str] = "\\"  # \x5C
UU: Final[str] = "u"  # \x00...\x1F except the ones above
__: Final[str] = ""

# fmt: off
ESCAPE: Final[tuple[str, ...]] = (
    #   1   2   3   4   5   6   7   8   9   A   B   C   D   E   F
    UU, UU, UU, UU, UU, UU, UU, UU, BB, TT, NN, UU, FF, RR, UU, UU,  # 0
    UU, UU, UU, UU, UU, UU, UU, UU, UU, UU, UU, UU, UU, UU, UU, UU,  # 1
    __, __, QU, __, __, __, __, __, __, __, __, __, __, __, __, __,  # 2
    __, __, __, __, __, __, __, __, __, __, __, __, __, __, __, __,  # 3
    __, __, __, __, __, __, __, __, __, __, __, __, __, __, __, __,  # 4
    __, __, __, __, __, __, __, __, __, __, __, __, BS, __, __, __,  # 5
    __, __, __, __, __, __, __, __, __, __, __, __, __, __, __, __,  # 6
    __, __, __, __, __, __, __, __, __, __, __, __, __, __, __, __,  # 7
    __, __, __, __, __, __, __, __, __, __, __, __, __, __, __, __,  # 8
    __, __, __, __, __, __, __, __, __, __, __, __, __, __, __, __,  # 9
    __, __, __, __, __, __, __, __, __, __, __, __, __, __, __, __,  # A
    __, __, __, __, __, __, __, __, __, __, __, __, __, __, __, __,  # B
    __, __, __, __, __, __, __, __, __, __, __, __, __, __, __, __,  # C
    __, __, __, __, __, __, __, __, __, __, __, __, __, __, __, __,  # D
    __, __, __, __, __, __, __, __, __, __, __, __, __, __, __, __,  # E
    __, __, __, __, __, __, __, __, __, __, __, __, __, __, __, __,  # F
)
# fmt: on


def escape_class(ch: str) -> str:
    """Return the escape class of a single character (see module docstring)."""
    code: int = ord(ch)
    return ESCAPE[code] if code < len(ESCAPE) else __
