# topmark:header:start
#
#   project      : AnnoJSON
#   file         : __init__.py
#   file_relpath : src/annojson/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public AnnoJSON API (stable surface).

This module re-exports the small, typed surface intended for programmatic use.
Internal modules may change between minor versions; the names below follow
semver.

Versioning policy
-----------------
- The **signatures and dataclass shapes** re-exported here follow semver.
- Adding optional parameters with defaults is allowed in minor releases.
- Removing/renaming anything here is a breaking change (major release).

Configuration contract
----------------------
- Rendering functions accept a frozen `DialectConfig`. Build one from a preset
  builder (`strict`, `json5`, `hjson`) and ``freeze()`` it; the builder is
  mutable, the snapshot is not, so a snapshot can be shared between threads.
- The ``to_*`` helpers accept keyword overrides (``indent=``, ``compact=``,
  ``bare_keys=``, ``strict_numeric_limits=``, ``multiline=``, ``literals=``).

```python
from annojson import api

doc = api.from_value({"name": "demo", "flags": 0x1F})
print(api.to_json5(doc, indent=4))

cfg = api.json5().with_compact(True).freeze()
print(api.render(doc, cfg))
```
"""

from __future__ import annotations

from annojson.config.model import DialectConfig, MutableDialectConfig
from annojson.config.presets import for_dialect, hjson, json5, strict
from annojson.config.types import Dialect, Multiline
from annojson.constants import ANNOJSON_VERSION
from annojson.core.errors import AnnojsonError, KeyTypeError, StructureError
from annojson.document.builders import comment, from_value, hex_int, int_node, kv, string
from annojson.document.integer import Base, Int
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
from annojson.rendering.api import render, to_hjson, to_json, to_json5
from annojson.rendering.color import ColorProfile, PaintRole

__version__: str = ANNOJSON_VERSION

__all__ = [
    "AnnojsonError",
    "Base",
    "Boolean",
    "Bytes",
    "ColorProfile",
    "Comment",
    "CommentFormat",
    "Compact",
    "Dialect",
    "DialectConfig",
    "Document",
    "Float",
    "Fragment",
    "Int",
    "Integer",
    "KeyTypeError",
    "Mapping",
    "Multiline",
    "MutableDialectConfig",
    "Null",
    "PaintRole",
    "Sequence",
    "StaticStr",
    "StrFormat",
    "String",
    "StructureError",
    "comment",
    "for_dialect",
    "from_value",
    "hex_int",
    "hjson",
    "int_node",
    "json5",
    "kv",
    "render",
    "strict",
    "string",
    "to_hjson",
    "to_json",
    "to_json5",
]
