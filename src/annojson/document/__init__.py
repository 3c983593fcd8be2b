# topmark:header:start
#
#   project      : AnnoJSON
#   file         : __init__.py
#   file_relpath : src/annojson/document/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Document tree model, numeric values and tree builders.

Public modules:
    - annojson.document.model
    - annojson.document.integer
    - annojson.document.builders
"""

from __future__ import annotations
