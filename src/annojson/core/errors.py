# topmark:header:start
#
#   project      : AnnoJSON
#   file         : errors.py
#   file_relpath : src/annojson/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised while rendering a document tree.

Both structural errors describe a malformed `Document` (a bug in the code that
built the tree), never a transient condition. They abort the current render;
the emitter keeps no state across renders, so later renders are unaffected.

Errors raised by the output sink itself (e.g. ``OSError`` from a file) are not
wrapped and propagate unchanged.
"""

from __future__ import annotations


class AnnojsonError(Exception):
    """Base class for all AnnoJSON library errors."""


class StructureError(AnnojsonError):
    """A node appeared where the tree shape does not allow it.

    Attributes:
        expected (str): What the emitter expected at this position.
        found (str): Variant name of the node actually found.
    """

    def __init__(self, expected: str, found: str) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f"Unexpected document structure: expected {expected}, found {found}")


class KeyTypeError(AnnojsonError):
    """A mapping key position holds a variant that cannot be written as a key.

    Attributes:
        variant (str): Variant name of the offending node.
    """

    def __init__(self, variant: str) -> None:
        self.variant = variant
        super().__init__(f"Illegal mapping key type: {variant}")
