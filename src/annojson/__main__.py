# topmark:header:start
#
#   project      : AnnoJSON
#   file         : __main__.py
#   file_relpath : src/annojson/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running AnnoJSON via ``python -m annojson``.

Equivalent to running the ``annojson`` console script.

Examples:
    Convert a JSON file to JSON5::

        python -m annojson transcode --dialect json5 data.json
"""

from __future__ import annotations

from annojson.cli.main import cli

if __name__ == "__main__":
    cli()
