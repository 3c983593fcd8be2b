# topmark:header:start
#
#   project      : AnnoJSON
#   file         : color.py
#   file_relpath : src/annojson/rendering/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color profiles for rendered documents.

The emitter never styles text itself: it asks a `ColorProfile` to *paint*
each token with the token's semantic role (key, string, punctuation, ...).
Painting only decorates; the emitter computes layout from the plain text.

Key types:
    - `Colorizer`: Protocol describing any callable compatible with
      `yachalk.ChalkBuilder.__call__`.
    - `PaintRole`: `str, Enum` of semantic roles. Each member carries a
      default yachalk colorizer, exposed via `.color`.
    - `ColorProfile`: maps each role to an optional colorizer.

Example:
    ```python
    from annojson.rendering.color import ColorProfile, PaintRole

    ColorProfile.plain().paint(PaintRole.KEY, "name")   # 'name'
    ColorProfile.basic().paint(PaintRole.KEY, "name")   # cyan 'name'
    ```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from yachalk import chalk


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Compatible with `yachalk.ChalkBuilder.__call__`; AnnoJSON always calls
    colorizers with a single string.
    """

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Return the decorated text of ``args`` joined by ``sep``."""
        ...


class PaintRole(str, Enum):
    """Semantic role of a rendered token, with its default colorizer.

    The enum `.value` is the role name; the colorizer is stored separately in
    `_color` so Enum hashing, equality and `repr` are unaffected.
    """

    _value_: str
    _color: Colorizer

    PUNCTUATION = ("punctuation", chalk.white)
    KEY = ("key", chalk.cyan_bright)
    STRING = ("string", chalk.green)
    ESCAPE = ("escape", chalk.yellow_bright)
    INTEGER = ("integer", chalk.magenta_bright)
    FLOAT = ("float", chalk.magenta)
    BOOLEAN = ("boolean", chalk.yellow)
    NULL = ("null", chalk.red)
    COMMENT = ("comment", chalk.gray)
    AGGREGATE = ("aggregate", chalk.white_bright)

    def __new__(cls, text: str, color: Colorizer) -> PaintRole:
        obj: PaintRole = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def color(self) -> Colorizer:
        """Return the default colorizer for this role."""
        return self._color


@dataclass(frozen=True)
class ColorProfile:
    """Role → colorizer mapping used by the emitter.

    Roles without a colorizer are written as plain text.

    Attributes:
        colors (dict[PaintRole, Colorizer]): Colorizer per role.
    """

    colors: dict[PaintRole, Colorizer] = field(default_factory=lambda: {})

    @classmethod
    def plain(cls) -> ColorProfile:
        """Return a profile that leaves all text unstyled."""
        return cls()

    @classmethod
    def basic(cls) -> ColorProfile:
        """Return a profile using each role's default yachalk colorizer."""
        return cls({role: role.color for role in PaintRole})

    def with_color(self, role: PaintRole, color: Colorizer | None) -> ColorProfile:
        """Return a copy with ``role`` painted by ``color`` (None removes styling)."""
        colors: dict[PaintRole, Colorizer] = dict(self.colors)
        if color is None:
            colors.pop(role, None)
        else:
            colors[role] = color
        return ColorProfile(colors)

    @property
    def enabled(self) -> bool:
        """Return True if any role is styled."""
        return bool(self.colors)

    def paint(self, role: PaintRole, text: str) -> str:
        """Return ``text`` decorated for ``role``."""
        color: Colorizer | None = self.colors.get(role)
        if color is None or not text:
            return text
        return color(text)
