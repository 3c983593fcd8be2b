# topmark:header:start
#
#   project      : AnnoJSON
#   file         : __init__.py
#   file_relpath : src/annojson/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AnnoJSON CLI subcommands."""

from __future__ import annotations
