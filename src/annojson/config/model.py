# topmark:header:start
#
#   project      : AnnoJSON
#   file         : model.py
#   file_relpath : src/annojson/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dialect configuration model.

This module defines:
    - `DialectConfig`: an immutable snapshot of the stylistic options consumed
      by the emitter for one render pass.
    - `MutableDialectConfig`: a mutable builder used to layer presets, TOML
      settings and CLI overrides; it can be frozen into `DialectConfig` and
      thawed back for edits.

Immutability:
    - `DialectConfig` stores frozensets and is ``frozen=True``, so a single
      snapshot may be shared by any number of renders. Use
      `DialectConfig.thaw` → edit → `MutableDialectConfig.freeze` for updates.

Layering:
    - Presets (`annojson.config.presets`) start from the strict baseline and
      apply builder calls on top.
    - ``with_comments``, ``with_bases`` and ``with_literals`` *add* to the
      existing sets; ``with_literals`` also adds each base to the display set,
      so literals are always a subset of display bases.
    - TOML tables (`MutableDialectConfig.apply_toml_dict`) and CLI arguments
      (`MutableDialectConfig.apply_cli_args`) are applied last-wins.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from annojson.config.io import (
    get_bool_value_or_none,
    get_enum_list_or_none,
    get_enum_value_or_none,
    get_int_value_or_none,
    get_table_value,
)
from annojson.config.keys import Toml
from annojson.config.logging import get_logger
from annojson.config.types import Multiline
from annojson.constants import DEFAULT_INDENT
from annojson.document.integer import Base
from annojson.document.model import CommentFormat

if TYPE_CHECKING:
    from annojson.config.io import TomlTable
    from annojson.config.logging import AnnojsonLogger

# ArgsLike: generic mapping accepted by `apply_cli_args` (CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: AnnojsonLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class DialectConfig:
    """Immutable rendering options for one render pass.

    Attributes:
        indent (int): Spaces per nesting level.
        comment (frozenset[CommentFormat]): Comment formats written as requested.
            An empty set disables comments entirely.
        standard_comment (CommentFormat): Leader used for comments whose format
            is not in ``comment``.
        bases (frozenset[Base]): Bases integers may be displayed in.
        literals (frozenset[Base]): Bases written as bare literals; a displayed
            base that is not a literal base is written as a quoted string.
        strict_numeric_limits (bool): Quote integers larger than 2^53 in magnitude.
        multiline (Multiline): Multiline string style.
        bare_keys (bool): Permit unquoted mapping keys.
        compact (bool): Single-line output without comments or indentation.
    """

    indent: int
    comment: frozenset[CommentFormat]
    standard_comment: CommentFormat
    bases: frozenset[Base]
    literals: frozenset[Base]
    strict_numeric_limits: bool
    multiline: Multiline
    bare_keys: bool
    compact: bool

    def thaw(self) -> MutableDialectConfig:
        """Return a mutable copy of this snapshot."""
        return MutableDialectConfig(
            indent=self.indent,
            comment=set(self.comment),
            standard_comment=self.standard_comment,
            bases=set(self.bases),
            literals=set(self.literals),
            strict_numeric_limits=self.strict_numeric_limits,
            multiline=self.multiline,
            bare_keys=self.bare_keys,
            compact=self.compact,
        )

    def to_toml_dict(self) -> TomlTable:
        """Convert this snapshot into a TOML-serializable dict.

        Sets are emitted as sorted lists so the output is deterministic.
        """
        return {
            Toml.SECTION_FORMAT: {
                Toml.KEY_INDENT: self.indent,
                Toml.KEY_COMPACT: self.compact,
                Toml.KEY_BARE_KEYS: self.bare_keys,
                Toml.KEY_MULTILINE: self.multiline.value,
            },
            Toml.SECTION_COMMENTS: {
                Toml.KEY_ACCEPT: sorted(c.value for c in self.comment),
                Toml.KEY_STANDARD: self.standard_comment.value,
            },
            Toml.SECTION_NUMBERS: {
                Toml.KEY_BASES: [b.name.lower() for b in sorted(self.bases, key=_base_order)],
                Toml.KEY_LITERALS: [
                    b.name.lower() for b in sorted(self.literals, key=_base_order)
                ],
                Toml.KEY_STRICT_LIMITS: self.strict_numeric_limits,
            },
        }


def _base_order(base: Base) -> int:
    return base.value


# -------------------------- Mutable builder --------------------------
@dataclass
class MutableDialectConfig:
    """Mutable builder for `DialectConfig`.

    Defaults are the strict JSON baseline. Every ``with_*`` method returns
    ``self`` so calls can be chained.

    Attributes:
        indent (int): Spaces per nesting level.
        comment (set[CommentFormat]): Accepted comment formats.
        standard_comment (CommentFormat): Fallback comment leader.
        bases (set[Base]): Display bases.
        literals (set[Base]): Literal bases.
        strict_numeric_limits (bool): Quote integers beyond 2^53.
        multiline (Multiline): Multiline string style.
        bare_keys (bool): Permit unquoted mapping keys.
        compact (bool): Compact single-line output.
    """

    indent: int = DEFAULT_INDENT
    comment: set[CommentFormat] = field(default_factory=lambda: set[CommentFormat]())
    standard_comment: CommentFormat = CommentFormat.SLASH_SLASH
    bases: set[Base] = field(default_factory=lambda: {Base.DEC})
    literals: set[Base] = field(default_factory=lambda: {Base.DEC})
    strict_numeric_limits: bool = True
    multiline: Multiline = Multiline.NONE
    bare_keys: bool = False
    compact: bool = False

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> DialectConfig:
        """Freeze this builder into an immutable `DialectConfig`.

        Raises:
            ValueError: If ``indent`` is negative.
        """
        if self.indent < 0:
            raise ValueError(f"Config invalid: indent must be >= 0, got {self.indent}")
        # Literal bases are always displayable.
        bases: set[Base] = self.bases | self.literals
        return DialectConfig(
            indent=self.indent,
            comment=frozenset(self.comment),
            standard_comment=self.standard_comment,
            bases=frozenset(bases),
            literals=frozenset(self.literals),
            strict_numeric_limits=self.strict_numeric_limits,
            multiline=self.multiline,
            bare_keys=self.bare_keys,
            compact=self.compact,
        )

    # ------------------------------ Setters -------------------------------
    def with_indent(self, indent: int) -> MutableDialectConfig:
        """Set the amount of indentation for each level of nesting."""
        self.indent = indent
        return self

    def with_comments(self, *formats: CommentFormat) -> MutableDialectConfig:
        """Accept the given comment formats in addition to those already accepted."""
        self.comment.update(formats)
        return self

    def with_standard_comment(self, fmt: CommentFormat) -> MutableDialectConfig:
        """Set the leader used for comments whose format is not accepted."""
        self.standard_comment = fmt
        return self

    def with_bases(self, *bases: Base) -> MutableDialectConfig:
        """Allow integers to be displayed in the given bases.

        Note: a display base that is not also a literal base is emitted as a
        quoted string.
        """
        self.bases.update(bases)
        return self

    def with_literals(self, *bases: Base) -> MutableDialectConfig:
        """Allow the given bases as bare integer literals (and for display)."""
        self.bases.update(bases)
        self.literals.update(bases)
        return self

    def with_strict_numeric_limits(self, enabled: bool) -> MutableDialectConfig:
        """Set whether integers larger than 2^53 in magnitude are quoted."""
        self.strict_numeric_limits = enabled
        return self

    def with_multiline(self, style: Multiline) -> MutableDialectConfig:
        """Set the multiline string style."""
        self.multiline = style
        return self

    def with_bare_keys(self, enabled: bool) -> MutableDialectConfig:
        """Set whether bare mapping keys are allowed."""
        self.bare_keys = enabled
        return self

    def with_compact(self, enabled: bool) -> MutableDialectConfig:
        """Set compact mode (no comments, newlines or indentation)."""
        self.compact = enabled
        return self

    # --------------------------- Loaders/parsers --------------------------
    def apply_toml_dict(self, table: TomlTable) -> MutableDialectConfig:
        """Apply settings from a parsed TOML table (last-wins).

        Lists (``accept``, ``bases``, ``literals``) replace the current sets.
        Values of the wrong shape are logged and ignored.

        Args:
            table (TomlTable): The ``annojson.toml`` root (or ``[tool.annojson]``) table.

        Returns:
            MutableDialectConfig: ``self``, for chaining.
        """
        fmt_tbl: TomlTable = get_table_value(table, Toml.SECTION_FORMAT)
        indent: int | None = get_int_value_or_none(fmt_tbl, Toml.KEY_INDENT)
        if indent is not None:
            self.indent = indent
        compact: bool | None = get_bool_value_or_none(fmt_tbl, Toml.KEY_COMPACT)
        if compact is not None:
            self.compact = compact
        bare_keys: bool | None = get_bool_value_or_none(fmt_tbl, Toml.KEY_BARE_KEYS)
        if bare_keys is not None:
            self.bare_keys = bare_keys
        multiline: Multiline | None = get_enum_value_or_none(
            fmt_tbl, Toml.KEY_MULTILINE, Multiline
        )
        if multiline is not None:
            self.multiline = multiline

        comments_tbl: TomlTable = get_table_value(table, Toml.SECTION_COMMENTS)
        accept: list[CommentFormat] | None = get_enum_list_or_none(
            comments_tbl, Toml.KEY_ACCEPT, CommentFormat
        )
        if accept is not None:
            self.comment = set(accept)
        standard: CommentFormat | None = get_enum_value_or_none(
            comments_tbl, Toml.KEY_STANDARD, CommentFormat
        )
        if standard is not None:
            self.standard_comment = standard

        numbers_tbl: TomlTable = get_table_value(table, Toml.SECTION_NUMBERS)
        bases: list[Base] | None = get_enum_list_or_none(
            numbers_tbl, Toml.KEY_BASES, Base, by_name=True
        )
        if bases is not None:
            self.bases = set(bases)
        literals: list[Base] | None = get_enum_list_or_none(
            numbers_tbl, Toml.KEY_LITERALS, Base, by_name=True
        )
        if literals is not None:
            self.literals = set(literals)
            self.bases.update(literals)
        strict: bool | None = get_bool_value_or_none(numbers_tbl, Toml.KEY_STRICT_LIMITS)
        if strict is not None:
            self.strict_numeric_limits = strict

        logger.trace("Applied TOML settings: %s", self)
        return self

    def apply_cli_args(self, args: ArgsLike) -> MutableDialectConfig:
        """Apply CLI overrides; keys whose value is None are left untouched.

        Recognized keys: ``indent``, ``compact``, ``bare_keys``,
        ``strict_numeric_limits``, ``multiline``, ``literals``.

        Args:
            args (ArgsLike): Mapping of option names to parsed values.

        Returns:
            MutableDialectConfig: ``self``, for chaining.
        """
        if args.get("indent") is not None:
            self.indent = int(args["indent"])
        if args.get("compact") is not None:
            self.compact = bool(args["compact"])
        if args.get("bare_keys") is not None:
            self.bare_keys = bool(args["bare_keys"])
        if args.get("strict_numeric_limits") is not None:
            self.strict_numeric_limits = bool(args["strict_numeric_limits"])
        if args.get("multiline") is not None:
            self.multiline = Multiline(args["multiline"])
        literals: Iterable[Base] | None = args.get("literals")
        if literals:
            self.with_literals(*literals)
        return self
