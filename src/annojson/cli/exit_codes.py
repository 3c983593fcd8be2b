# topmark:header:start
#
#   project      : AnnoJSON
#   file         : exit_codes.py
#   file_relpath : src/annojson/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Standardized exit codes used by the AnnoJSON CLI."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the AnnoJSON CLI.

    Attributes:
        SUCCESS (int): The command completed.
        FAILURE (int): Generic failure (e.g. the output file could not be written).
        USAGE_ERROR (int): Invalid flags or arguments.
        CONFIG_ERROR (int): Missing, invalid or malformed configuration.
        INPUT_ERROR (int): The input could not be read or is not valid JSON.
        STRUCTURE_ERROR (int): The document tree could not be rendered.

    Usage:
        ```python
        import subprocess
        from annojson.cli.exit_codes import ExitCode

        result = subprocess.run(["annojson", "transcode", "data.json"])
        if result.returncode == ExitCode.INPUT_ERROR:
            print("data.json is not valid JSON")
        ```
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 2
    CONFIG_ERROR = 3
    INPUT_ERROR = 4
    STRUCTURE_ERROR = 5
