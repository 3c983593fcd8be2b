# topmark:header:start
#
#   project      : AnnoJSON
#   file         : emitter.py
#   file_relpath : src/annojson/rendering/emitter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Document emitter for JSON, JSON5 and Hjson.

`JsonEmitter` walks a `Document` depth-first and writes text to a sink in a
single pass. Its only mutable state is the current nesting level and the
compact flag (temporarily forced on beneath a `Compact` node); both return
to their previous values when a node has been written.

Layout rules:
    - Aggregates open with a bracket and a newline, indent each entry by
      ``level * indent`` spaces and close on their own line. Compact mode
      drops newlines and indentation and separates entries with a space.
    - A comma follows every value-bearing entry except the last one
      (`Document.last_value_index`). Comments never receive a comma.
    - A comment before an entry's key (or value, in a sequence) sits on its
      own line; a comment after the value stays on the value's line.
    - Entries that carry no value are skipped when comments are not rendered
      (comments disabled or compact mode).

An emitter is cheap to build; `annojson.rendering.api.render` creates a new
one per call so concurrent renders never share state.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Protocol

from annojson.config.logging import get_logger
from annojson.config.types import Multiline
from annojson.core.errors import KeyTypeError, StructureError
from annojson.document.integer import format_float
from annojson.document.model import (
    Boolean,
    Bytes,
    Comment,
    CommentFormat,
    Compact,
    Document,
    Float,
    Fragment,
    Integer,
    Mapping,
    Null,
    Sequence,
    StaticStr,
    StrFormat,
    String,
)
from annojson.rendering.bareword import is_legal_bareword
from annojson.rendering.color import ColorProfile, PaintRole
from annojson.rendering.escape import NN, UU, escape_class

if TYPE_CHECKING:
    from annojson.config.logging import AnnojsonLogger
    from annojson.config.model import DialectConfig
    from annojson.document.integer import Int

logger: AnnojsonLogger = get_logger(__name__)


class TextSink(Protocol):
    """Anything with a ``write(str)`` method (``io.StringIO``, text files, ...)."""

    def write(self, s: str, /) -> object:
        """Write ``s`` to the sink."""
        ...


class LineState(Enum):
    """Whether the current aggregate entry still owes a line break."""

    CLEAN = "clean"
    SEPARATOR_OWED = "separator_owed"


def _split_trailing_comment(node: Document) -> tuple[Document, Comment | None]:
    """Split a ``[value, Comment]`` fragment into its value and comment."""
    if isinstance(node, Fragment) and len(node.nodes) == 2:
        value, note = node.nodes
        if isinstance(note, Comment):
            return value, note
    return node, None


class JsonEmitter:
    """Stateful writer for one render pass.

    Args:
        config (DialectConfig): Dialect options; copied into the emitter.
        color (ColorProfile | None): Color profile; defaults to plain text.
    """

    def __init__(self, config: DialectConfig, color: ColorProfile | None = None) -> None:
        self.level: int = 0
        self.indent: int = config.indent
        self.comment: frozenset[CommentFormat] = config.comment
        self.standard_comment: CommentFormat = config.standard_comment
        self.bases = config.bases
        self.literals = config.literals
        self.strict_numeric_limits: bool = config.strict_numeric_limits
        self.multiline: Multiline = config.multiline
        self.bare_keys: bool = config.bare_keys
        self.compact: bool = config.compact
        self.color: ColorProfile = color or ColorProfile.plain()

    # ------------------------------ Dispatch ------------------------------

    def emit_node(self, w: TextSink, node: Document) -> None:
        """Write ``node`` and its subtree to ``w``.

        Raises:
            StructureError: If a fragment or mapping entry has an unexpected shape.
            KeyTypeError: If a mapping key is not a string, boolean, int or float.
        """
        if isinstance(node, Comment):
            self._emit_comment_newline(w, node.text, node.fmt)
        elif isinstance(node, (String, StaticStr)):
            self._emit_string(w, node.text, node.fmt)
        elif isinstance(node, Boolean):
            self._emit_boolean(w, node.value)
        elif isinstance(node, Integer):
            self._emit_int(w, node.value)
        elif isinstance(node, Float):
            self._write(w, PaintRole.FLOAT, format_float(node.value))
        elif isinstance(node, Mapping):
            self._emit_mapping(w, node.entries)
        elif isinstance(node, Sequence):
            self._emit_sequence(w, node.items)
        elif isinstance(node, Bytes):
            self._emit_bytes(w, node.value)
        elif isinstance(node, Null):
            self._write(w, PaintRole.NULL, "null")
        elif isinstance(node, Compact):
            self._emit_compact(w, node.inner)
        elif isinstance(node, Fragment):
            self._emit_fragment(w, node.nodes)
        else:
            raise StructureError("document node", type(node).__name__)

    def _emit_compact(self, w: TextSink, node: Document) -> None:
        compact: bool = self.compact
        self.compact = True
        try:
            self.emit_node(w, node)
        finally:
            self.compact = compact

    def _emit_fragment(self, w: TextSink, nodes: tuple[Document, ...]) -> None:
        # A value followed by one comment: the comment stays on the value's line.
        value, note = _split_trailing_comment(Fragment(nodes))
        if note is not None:
            self.emit_node(w, value)
            if self._comments_rendered:
                w.write(" ")
                self._emit_comment(w, note.text, note.fmt)
            return
        prior_val: bool = False
        for node in nodes:
            if prior_val:
                self._writeln(w, "")
                self._emit_indent(w)
            self.emit_node(w, node)
            prior_val = node.has_value()

    # ----------------------------- Aggregates -----------------------------

    def _visible(self, entries: tuple[Document, ...]) -> tuple[Document, ...]:
        if self._comments_rendered:
            return entries
        return tuple(entry for entry in entries if entry.has_value())

    def _open(self, w: TextSink, bracket: str, nonempty: bool) -> None:
        self.level += 1
        self._writeln(w, self.color.paint(PaintRole.AGGREGATE, bracket))
        if nonempty:
            self._emit_indent(w)

    def _close(self, w: TextSink, bracket: str, state: LineState) -> None:
        if state is LineState.SEPARATOR_OWED:
            self._writeln(w, "")
        self.level -= 1
        self._emit_indent(w)
        self._write(w, PaintRole.AGGREGATE, bracket)

    def _break_line(self, w: TextSink, i: int, last: int) -> None:
        w.write(" " if self.compact else "\n")
        if i <= last or self.comment:
            self._emit_indent(w)

    def _emit_separator(self, w: TextSink, i: int, last: int) -> None:
        if i != last:
            self._write(w, PaintRole.PUNCTUATION, ",")

    def _emit_entry_comment(
        self,
        w: TextSink,
        node: Document,
        state: LineState,
        *,
        head_done: bool,
        value_done: bool,
    ) -> LineState:
        """Write a comment found inside an aggregate entry.

        Args:
            w (TextSink): Output sink.
            node (Document): The comment node.
            state (LineState): Line state before the comment.
            head_done (bool): Whether the entry's key (mapping) or value
                (sequence) has been written; if not, the comment gets its own line.
            value_done (bool): Whether the entry's value has been written.

        Returns:
            LineState: The line state after the comment.
        """
        text, fmt = node.comment() or ("", CommentFormat.STANDARD)
        if not self._comments_rendered:
            return state
        if value_done and state is LineState.SEPARATOR_OWED:
            w.write(" ")
        self._emit_comment(w, text, fmt)
        if not head_done:
            w.write("\n")
            self._emit_indent(w)
            return LineState.CLEAN
        return LineState.SEPARATOR_OWED

    def _emit_sequence(self, w: TextSink, sequence: tuple[Document, ...]) -> None:
        items: tuple[Document, ...] = self._visible(sequence)
        self._open(w, "[", bool(items))
        last: int = Document.last_value_index(items)
        logger.trace("sequence: level=%d items=%d last=%d", self.level, len(items), last)
        state: LineState = LineState.CLEAN
        for i, value in enumerate(items):
            if i > 0 and state is LineState.SEPARATOR_OWED:
                self._break_line(w, i, last)
                state = LineState.CLEAN
            nodes: tuple[Document, ...] = (
                value.nodes if isinstance(value, Fragment) else (value,)
            )
            val_done: bool = i > last
            for node in nodes:
                if node.comment() is not None:
                    state = self._emit_entry_comment(
                        w, node, state, head_done=val_done, value_done=val_done
                    )
                    continue
                if val_done:
                    raise StructureError("comment", node.variant)
                self.emit_node(w, node)
                self._emit_separator(w, i, last)
                val_done = True
                state = LineState.SEPARATOR_OWED
        self._close(w, "]", state)

    def _emit_mapping(self, w: TextSink, mapping: tuple[Document, ...]) -> None:
        entries: tuple[Document, ...] = self._visible(mapping)
        self._open(w, "{", bool(entries))
        last: int = Document.last_value_index(entries)
        logger.trace("mapping: level=%d entries=%d last=%d", self.level, len(entries), last)
        state: LineState = LineState.CLEAN
        for i, frag in enumerate(entries):
            nodes: tuple[Document, ...] = frag.fragments()
            if i > 0 and state is LineState.SEPARATOR_OWED:
                self._break_line(w, i, last)
                state = LineState.CLEAN
            key_done: bool = i > last
            val_done: bool = i > last
            for node in nodes:
                if node.comment() is not None:
                    state = self._emit_entry_comment(
                        w, node, state, head_done=key_done, value_done=val_done
                    )
                    continue
                if not key_done:
                    self._emit_key(w, node)
                    self._write(w, PaintRole.PUNCTUATION, ": ")
                    key_done = True
                elif not val_done:
                    value, note = _split_trailing_comment(node)
                    self.emit_node(w, value)
                    self._emit_separator(w, i, last)
                    val_done = True
                    state = LineState.SEPARATOR_OWED
                    if note is not None:
                        state = self._emit_entry_comment(
                            w, note, state, head_done=True, value_done=True
                        )
                else:
                    raise StructureError("comment", node.variant)
        self._close(w, "}", state)

    def _emit_bytes(self, w: TextSink, data: bytes) -> None:
        self._open(w, "[", bool(data))
        for i, value in enumerate(data):
            if i > 0:
                self._writeln(w, ",")
                self._emit_indent(w)
            self._write(w, PaintRole.INTEGER, str(value))
        self._close(w, "]", LineState.SEPARATOR_OWED if data else LineState.CLEAN)

    # -------------------------------- Keys --------------------------------

    def _emit_key(self, w: TextSink, node: Document) -> None:
        if isinstance(node, (String, StaticStr)):
            if self.bare_keys and is_legal_bareword(node.text):
                self._write(w, PaintRole.KEY, node.text)
                return
            self._emit_quoted(w, node.text, PaintRole.KEY, Multiline.NONE)
            return
        if isinstance(node, Boolean):
            text: str = "true" if node.value else "false"
        elif isinstance(node, Integer):
            text = str(node.value)
        elif isinstance(node, Float):
            text = format_float(node.value)
        else:
            raise KeyTypeError(node.variant)
        self._write(w, PaintRole.PUNCTUATION, '"')
        self._write(w, PaintRole.KEY, text)
        self._write(w, PaintRole.PUNCTUATION, '"')

    # ------------------------------ Comments ------------------------------

    @property
    def _comments_rendered(self) -> bool:
        return bool(self.comment) and not self.compact

    def _emit_comment_newline(self, w: TextSink, comment: str, fmt: CommentFormat) -> None:
        if self._emit_comment(w, comment, fmt):
            w.write("\n")
            self._emit_indent(w)

    def _emit_comment(self, w: TextSink, comment: str, fmt: CommentFormat) -> bool:
        """Write a comment without a trailing newline.

        Returns:
            bool: True if anything was written.
        """
        if not self._comments_rendered:
            return False
        style: CommentFormat = fmt if fmt in self.comment else self.standard_comment
        lines: list[str] = comment.split("\n")
        if style is CommentFormat.BLOCK:
            self._write(w, PaintRole.COMMENT, "/*")
            for line in lines:
                w.write("\n")
                self._emit_indent(w)
                self._write(w, PaintRole.COMMENT, f" * {line}" if line else " *")
            w.write("\n")
            self._emit_indent(w)
            self._write(w, PaintRole.COMMENT, " */")
            return True
        leader: str = "#" if style is CommentFormat.HASH else "//"
        for i, line in enumerate(lines):
            if i > 0:
                w.write("\n")
                self._emit_indent(w)
            self._write(w, PaintRole.COMMENT, f"{leader} {line}" if line else leader)
        return True

    # ------------------------------ Strings -------------------------------

    def _emit_string(self, w: TextSink, value: str, fmt: StrFormat) -> None:
        if (
            fmt is StrFormat.MULTILINE
            and self.multiline is not Multiline.NONE
            and not self.compact
        ):
            self._emit_string_multiline(w, value)
        else:
            self._emit_quoted(w, value, PaintRole.STRING, Multiline.NONE)

    def _emit_string_multiline(self, w: TextSink, value: str) -> None:
        if self.multiline is not Multiline.HJSON:
            self._emit_quoted(w, value, PaintRole.STRING, self.multiline)
            return
        w.write("\n")
        self.level += 1
        self._emit_indent(w)
        self._writeln(w, self.color.paint(PaintRole.PUNCTUATION, "'''"))
        self._emit_indent(w)
        self._emit_escaped(w, value, PaintRole.STRING, Multiline.HJSON)
        w.write("\n")
        self._emit_indent(w)
        self._write(w, PaintRole.PUNCTUATION, "'''")
        self.level -= 1

    def _emit_quoted(self, w: TextSink, value: str, role: PaintRole, style: Multiline) -> None:
        self._write(w, PaintRole.PUNCTUATION, '"')
        self._emit_escaped(w, value, role, style)
        self._write(w, PaintRole.PUNCTUATION, '"')

    def _emit_escaped(self, w: TextSink, value: str, role: PaintRole, style: Multiline) -> None:
        """Write ``value`` with JSON escapes; unescaped runs are written as one span."""
        start: int = 0
        for i, ch in enumerate(value):
            escape: str = escape_class(ch)
            if not escape:
                continue
            if start < i:
                self._write(w, role, value[start:i])
            if escape == UU:
                self._write(w, PaintRole.ESCAPE, f"\\u{ord(ch):04x}")
            elif escape == NN and style is Multiline.JSON5:
                self._write(w, PaintRole.ESCAPE, "\\")
                w.write("\n")
            elif escape == NN and style is Multiline.HJSON:
                w.write("\n")
                self._emit_indent(w)
            else:
                self._write(w, PaintRole.ESCAPE, f"\\{escape}")
            start = i + 1
        if start < len(value):
            self._write(w, role, value[start:])

    # ------------------------------ Scalars -------------------------------

    def _emit_boolean(self, w: TextSink, value: bool) -> None:
        self._write(w, PaintRole.BOOLEAN, "true" if value else "false")

    def _emit_int(self, w: TextSink, value: Int) -> None:
        base = value.base
        displayed: bool = base in self.bases
        text: str = value.format(base if displayed else None)
        if (self.strict_numeric_limits and not value.is_legal_json()) or (
            displayed and base not in self.literals
        ):
            self._write(w, PaintRole.PUNCTUATION, '"')
            self._write(w, PaintRole.INTEGER, text)
            self._write(w, PaintRole.PUNCTUATION, '"')
        else:
            self._write(w, PaintRole.INTEGER, text)

    # ------------------------------- Layout -------------------------------

    def _write(self, w: TextSink, role: PaintRole, text: str) -> None:
        w.write(self.color.paint(role, text))

    def _emit_indent(self, w: TextSink) -> None:
        if self.compact:
            return
        w.write(" " * (self.level * self.indent))

    def _writeln(self, w: TextSink, text: str) -> None:
        """Write ``text`` and end the line; in compact mode a comma gets a space instead."""
        if text == ",":
            text = self.color.paint(PaintRole.PUNCTUATION, ",")
            w.write(f"{text} " if self.compact else f"{text}\n")
        elif self.compact:
            w.write(text)
        else:
            w.write(f"{text}\n")
