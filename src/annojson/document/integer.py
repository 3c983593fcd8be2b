# topmark:header:start
#
#   project      : AnnoJSON
#   file         : integer.py
#   file_relpath : src/annojson/document/integer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Numeric values as they appear in a document tree.

An `Int` remembers the base it *wants* to be shown in (its intrinsic base).
Whether that base is honored is decided by the active dialect configuration:
the emitter passes the base back to `Int.format` only when the dialect allows
it for display, otherwise the value is formatted in decimal.

Floats have no base; `format_float` produces the canonical decimal text used
for both values and keys.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from annojson.constants import SAFE_INTEGER_LIMIT


class Base(Enum):
    """Integer bases a value may be displayed in."""

    BIN = 2
    OCT = 8
    DEC = 10
    HEX = 16

    @property
    def prefix(self) -> str:
        """Return the literal prefix for this base (empty for decimal)."""
        return _PREFIXES[self]


_PREFIXES: dict[Base, str] = {
    Base.BIN: "0b",
    Base.OCT: "0o",
    Base.DEC: "",
    Base.HEX: "0x",
}

_FORMAT_SPECS: dict[Base, str] = {
    Base.BIN: "b",
    Base.OCT: "o",
    Base.DEC: "d",
    Base.HEX: "X",
}


@dataclass(frozen=True, slots=True)
class Int:
    """An integer value with an intrinsic display base.

    Attributes:
        value (int): The numeric value.
        base (Base): The base the value prefers to be displayed in.
    """

    value: int
    base: Base = Base.DEC

    def format(self, base: Base | None = None) -> str:
        """Return the value's text in ``base`` notation.

        Args:
            base (Base | None): Base to format in; ``None`` means decimal.

        Returns:
            str: Formatted text, e.g. ``"0x1F"`` or ``"-0b101"``. The sign
                precedes the base prefix.
        """
        base = base or Base.DEC
        digits: str = format(abs(self.value), _FORMAT_SPECS[base])
        sign: str = "-" if self.value < 0 else ""
        return f"{sign}{base.prefix}{digits}"

    def is_legal_json(self) -> bool:
        """Return True if a strict JSON consumer can represent the value exactly."""
        return abs(self.value) <= SAFE_INTEGER_LIMIT

    def __str__(self) -> str:
        return self.format(None)


def format_float(value: float) -> str:
    """Return the canonical decimal text of a float.

    The shortest round-tripping digits are written positionally (never with an
    exponent); integral values drop the fractional part.

    Args:
        value (float): The value to format.

    Returns:
        str: Text such as ``"0.8675309"``, ``"8675309"`` or ``"0.0000001"``.
            Non-finite values render as ``NaN``, ``Infinity`` and ``-Infinity``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    text: str = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
