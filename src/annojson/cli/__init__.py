# topmark:header:start
#
#   project      : AnnoJSON
#   file         : __init__.py
#   file_relpath : src/annojson/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for AnnoJSON."""

from __future__ import annotations
