# topmark:header:start
#
#   project      : AnnoJSON
#   file         : api.py
#   file_relpath : src/annojson/rendering/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering entry points.

`render` is the single way documents are turned into text; the ``to_*``
helpers pick a dialect preset and apply keyword overrides on top of it.

Each call builds its own `JsonEmitter`, so renders never share mutable state
and may run concurrently on different threads as long as they do not share a
sink.

Example:
    ```python
    from annojson.document.builders import from_value
    from annojson.rendering.api import to_json5

    print(to_json5(from_value({"a": 5, "b": [1, 2]}), compact=True))
    # {a: 5, b: [1, 2]}
    ```
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, Any

from annojson.config.logging import get_logger
from annojson.config.presets import hjson, json5, strict
from annojson.rendering.emitter import JsonEmitter

if TYPE_CHECKING:
    from annojson.config.logging import AnnojsonLogger
    from annojson.config.model import DialectConfig, MutableDialectConfig
    from annojson.document.model import Document
    from annojson.rendering.color import ColorProfile
    from annojson.rendering.emitter import TextSink

logger: AnnojsonLogger = get_logger(__name__)

# Keyword overrides accepted by the ``to_*`` helpers.
OVERRIDE_KEYS: frozenset[str] = frozenset(
    {"indent", "compact", "bare_keys", "strict_numeric_limits", "multiline", "literals"}
)


def render(
    document: Document,
    config: DialectConfig | None = None,
    *,
    color: ColorProfile | None = None,
    sink: TextSink | None = None,
) -> str:
    """Render ``document`` as text.

    Args:
        document (Document): The tree to render.
        config (DialectConfig | None): Dialect options; the strict JSON preset
            when None.
        color (ColorProfile | None): Color profile; plain text when None.
        sink (TextSink | None): Optional destination. Output is written to it
            in addition to being returned.

    Returns:
        str: The text written by this call.

    Raises:
        StructureError: If the tree has an unexpected shape.
        KeyTypeError: If a mapping key has an illegal type.
    """
    cfg: DialectConfig = config if config is not None else strict().freeze()
    buf = io.StringIO()
    logger.debug(
        "render: root=%s indent=%d compact=%s comments=%d",
        document.variant,
        cfg.indent,
        cfg.compact,
        len(cfg.comment),
    )
    JsonEmitter(cfg, color).emit_node(buf, document)
    text: str = buf.getvalue()
    logger.debug("render: wrote %d characters", len(text))
    if sink is not None:
        sink.write(text)
    return text


def _with_overrides(builder: MutableDialectConfig, overrides: dict[str, Any]) -> DialectConfig:
    unknown: set[str] = set(overrides) - OVERRIDE_KEYS
    if unknown:
        raise TypeError(f"Unexpected rendering option(s): {', '.join(sorted(unknown))}")
    return builder.apply_cli_args(overrides).freeze()


def to_json(
    document: Document, *, color: ColorProfile | None = None, **overrides: Any
) -> str:
    """Render ``document`` as strict JSON (see `OVERRIDE_KEYS` for overrides)."""
    return render(document, _with_overrides(strict(), overrides), color=color)


def to_json5(
    document: Document, *, color: ColorProfile | None = None, **overrides: Any
) -> str:
    """Render ``document`` as JSON5."""
    return render(document, _with_overrides(json5(), overrides), color=color)


def to_hjson(
    document: Document, *, color: ColorProfile | None = None, **overrides: Any
) -> str:
    """Render ``document`` as Hjson."""
    return render(document, _with_overrides(hjson(), overrides), color=color)
