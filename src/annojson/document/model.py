# topmark:header:start
#
#   project      : AnnoJSON
#   file         : model.py
#   file_relpath : src/annojson/document/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Document tree model.

A `Document` is a closed set of immutable node variants. Trees are built by
callers (see `annojson.document.builders`) and handed fully formed to the
emitter, which never mutates them.

Variants:
    - Scalars: `Null`, `Boolean`, `Integer`, `Float`.
    - Text: `String`, `StaticStr` (both carry a `StrFormat`).
    - `Bytes`: rendered as a bracketed list of unsigned decimal numbers.
    - Aggregates: `Mapping` (entries are `Fragment` key/value clusters or
      standalone `Comment` nodes) and `Sequence`.
    - `Comment`: an annotation; never a value.
    - `Compact`: forces single-line rendering of its subtree.
    - `Fragment`: groups an entry's comment/key/value, or attaches a trailing
      comment to a value. A fragment is not itself a value; it *has* a value
      when any of its children does.

Example:
    ```python
    from annojson.document.model import Comment, Fragment, Integer, Mapping, String
    from annojson.document.integer import Int

    doc = Mapping(
        (
            Fragment((Comment("answer"), String("x"), Integer(Int(42)))),
        )
    )
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from annojson.core.errors import StructureError
from annojson.document.integer import Int


class StrFormat(Enum):
    """How a string prefers to be rendered."""

    STANDARD = "standard"
    MULTILINE = "multiline"


class CommentFormat(Enum):
    """Comment styles a comment node may ask for.

    `STANDARD` defers to the dialect's standard comment leader.
    """

    STANDARD = "standard"
    SLASH_SLASH = "slash_slash"
    HASH = "hash"
    BLOCK = "block"


class Document:
    """Base class of all document nodes."""

    __slots__ = ()

    variant: ClassVar[str] = "document"

    def has_value(self) -> bool:
        """Return True if this node contributes a value to its parent aggregate."""
        return True

    def comment(self) -> tuple[str, CommentFormat] | None:
        """Return ``(text, format)`` if this node is a comment, else None."""
        return None

    def fragments(self) -> tuple[Document, ...]:
        """Return the nodes making up a mapping entry.

        Returns:
            tuple[Document, ...]: The children of a `Fragment`, or the node itself
                for a standalone `Comment`.

        Raises:
            StructureError: If the node cannot stand as a mapping entry.
        """
        raise StructureError("fragment", self.variant)

    @staticmethod
    def last_value_index(nodes: tuple[Document, ...]) -> int:
        """Return the index of the last value-bearing node, or -1 if there is none."""
        for i in range(len(nodes) - 1, -1, -1):
            if nodes[i].has_value():
                return i
        return -1


@dataclass(frozen=True, slots=True)
class Null(Document):
    """The null literal."""

    variant: ClassVar[str] = "null"


@dataclass(frozen=True, slots=True)
class Boolean(Document):
    """A boolean literal."""

    variant: ClassVar[str] = "boolean"

    value: bool


@dataclass(frozen=True, slots=True)
class Integer(Document):
    """An integer with an intrinsic base."""

    variant: ClassVar[str] = "int"

    value: Int


@dataclass(frozen=True, slots=True)
class Float(Document):
    """A floating point number."""

    variant: ClassVar[str] = "float"

    value: float


@dataclass(frozen=True, slots=True)
class String(Document):
    """A string built at runtime."""

    variant: ClassVar[str] = "string"

    text: str
    fmt: StrFormat = StrFormat.STANDARD


@dataclass(frozen=True, slots=True)
class StaticStr(Document):
    """A string fixed at definition time, such as an enum variant name.

    Rendered exactly like `String`.
    """

    variant: ClassVar[str] = "string"

    text: str
    fmt: StrFormat = StrFormat.STANDARD


@dataclass(frozen=True, slots=True)
class Bytes(Document):
    """A byte string."""

    variant: ClassVar[str] = "bytes"

    value: bytes


@dataclass(frozen=True, slots=True)
class Mapping(Document):
    """An ordered mapping; entries are emitted in insertion order."""

    variant: ClassVar[str] = "mapping"

    entries: tuple[Document, ...] = ()


@dataclass(frozen=True, slots=True)
class Sequence(Document):
    """An ordered sequence."""

    variant: ClassVar[str] = "sequence"

    items: tuple[Document, ...] = ()


@dataclass(frozen=True, slots=True)
class Comment(Document):
    """A comment; never a value."""

    variant: ClassVar[str] = "comment"

    text: str
    fmt: CommentFormat = CommentFormat.STANDARD

    def has_value(self) -> bool:
        return False

    def comment(self) -> tuple[str, CommentFormat] | None:
        return (self.text, self.fmt)

    def fragments(self) -> tuple[Document, ...]:
        return (self,)


@dataclass(frozen=True, slots=True)
class Compact(Document):
    """Render the wrapped subtree on a single line."""

    variant: ClassVar[str] = "compact"

    inner: Document


@dataclass(frozen=True, slots=True)
class Fragment(Document):
    """A group of nodes without separator semantics of its own."""

    variant: ClassVar[str] = "fragment"

    nodes: tuple[Document, ...] = ()

    def has_value(self) -> bool:
        return any(node.has_value() for node in self.nodes)

    def fragments(self) -> tuple[Document, ...]:
        return self.nodes
