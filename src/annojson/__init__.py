# topmark:header:start
#
#   project      : AnnoJSON
#   file         : __init__.py
#   file_relpath : src/annojson/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AnnoJSON package.

AnnoJSON renders annotated document trees as strict JSON, JSON5 or Hjson,
keeping comments, integer bases and multiline strings where the target dialect
can represent them. It exposes a small typed API (`annojson.api`) and a CLI.
"""

from __future__ import annotations
