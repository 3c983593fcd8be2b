# topmark:header:start
#
#   project      : AnnoJSON
#   file         : builders.py
#   file_relpath : src/annojson/document/builders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers for building document trees.

The emitter only consumes trees; these helpers cover the common ways of
producing one:

- `from_value` converts plain Python data (for instance the result of
  ``json.load``) into a tree.
- `kv`, `comment`, `int_node` and `hex_int` are small constructors for
  hand-built trees.
"""

from __future__ import annotations

from collections.abc import Mapping as MappingABC
from typing import TYPE_CHECKING, Any

from annojson.config.logging import get_logger
from annojson.document.integer import Base, Int
from annojson.document.model import (
    Boolean,
    Bytes,
    Comment,
    CommentFormat,
    Document,
    Float,
    Fragment,
    Integer,
    Mapping,
    Null,
    Sequence,
    StrFormat,
    String,
)

if TYPE_CHECKING:
    from annojson.config.logging import AnnojsonLogger

logger: AnnojsonLogger = get_logger(__name__)


def string(text: str, *, multiline: bool = False) -> String:
    """Return a string node, optionally eligible for multiline rendering."""
    return String(text, StrFormat.MULTILINE if multiline else StrFormat.STANDARD)


def comment(text: str, fmt: CommentFormat = CommentFormat.STANDARD) -> Comment:
    """Return a comment node."""
    return Comment(text, fmt)


def int_node(value: int, base: Base = Base.DEC) -> Integer:
    """Return an integer node with the given intrinsic base."""
    return Integer(Int(value, base))


def hex_int(value: int) -> Integer:
    """Return an integer node that prefers hexadecimal display."""
    return int_node(value, Base.HEX)


def kv(key: str | Document, value: Any, note: str | None = None) -> Fragment:
    """Return a mapping entry.

    Args:
        key (str | Document): Entry key; plain strings become `String` nodes.
        value (Any): Entry value; converted with `from_value` unless already a node.
        note (str | None): Optional comment rendered above the entry.

    Returns:
        Fragment: The ``[comment?, key, value]`` cluster.
    """
    key_node: Document = key if isinstance(key, Document) else String(key)
    nodes: list[Document] = [key_node, from_value(value)]
    if note is not None:
        nodes.insert(0, comment(note))
    return Fragment(tuple(nodes))


def from_value(obj: Any, *, multiline: bool = True) -> Document:
    """Convert plain Python data into a document tree.

    Args:
        obj (Any): ``None``, ``bool``, ``int``, ``float``, ``str``, ``bytes``,
            ``bytearray``, a mapping, a ``list``/``tuple``, or an existing `Document`.
        multiline (bool): If True, strings containing a line feed are marked
            `StrFormat.MULTILINE`.

    Returns:
        Document: The equivalent tree. Mapping keys that are not ``str``,
            ``bool``, ``int`` or ``float`` are passed through ``str()``.

    Raises:
        TypeError: If ``obj`` (or a nested value) has no document representation.
    """
    if isinstance(obj, Document):
        return obj
    if obj is None:
        return Null()
    # bool before int: bool is an int subclass.
    if isinstance(obj, bool):
        return Boolean(obj)
    if isinstance(obj, int):
        return Integer(Int(obj))
    if isinstance(obj, float):
        return Float(obj)
    if isinstance(obj, str):
        return string(obj, multiline=multiline and "\n" in obj)
    if isinstance(obj, (bytes, bytearray)):
        return Bytes(bytes(obj))
    if isinstance(obj, MappingABC):
        entries: list[Document] = []
        for key, value in obj.items():
            entries.append(
                Fragment((_key_node(key), from_value(value, multiline=multiline)))
            )
        return Mapping(tuple(entries))
    if isinstance(obj, (list, tuple)):
        return Sequence(tuple(from_value(item, multiline=multiline) for item in obj))
    raise TypeError(f"Cannot convert {type(obj).__name__} to a document node")


def _key_node(key: Any) -> Document:
    if isinstance(key, bool):
        return Boolean(key)
    if isinstance(key, int):
        return Integer(Int(key))
    if isinstance(key, float):
        return Float(key)
    if isinstance(key, str):
        return String(key)
    logger.debug("Coercing mapping key of type %s to string", type(key).__name__)
    return String(str(key))
