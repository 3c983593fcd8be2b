# topmark:header:start
#
#   project      : AnnoJSON
#   file         : constants.py
#   file_relpath : src/annojson/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AnnoJSON Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    ANNOJSON_VERSION: str = get_version("annojson")
except PackageNotFoundError:  # running from a source checkout
    ANNOJSON_VERSION = "0.0.0"

LOG_LEVEL_ENV_VAR: str = "ANNOJSON_LOG_LEVEL"

# Config file names, in discovery order.
CONFIG_FILE_NAME: str = "annojson.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_SECTION: str = "tool.annojson"

# Largest integer magnitude a strict JSON consumer can represent exactly (IEEE-754 double).
SAFE_INTEGER_LIMIT: int = 2**53

DEFAULT_INDENT: int = 2
