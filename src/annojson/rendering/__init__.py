# topmark:header:start
#
#   project      : AnnoJSON
#   file         : __init__.py
#   file_relpath : src/annojson/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering of document trees to text.

- `annojson.rendering.emitter`: the single-pass emitter.
- `annojson.rendering.api`: `render` and the ``to_json``/``to_json5``/``to_hjson`` helpers.
- `annojson.rendering.color`: color profiles (yachalk).
- `annojson.rendering.escape` / `annojson.rendering.bareword`: lexical helpers.
"""

from __future__ import annotations
