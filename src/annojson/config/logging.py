# topmark:header:start
#
#   project      : AnnoJSON
#   file         : logging.py
#   file_relpath : src/annojson/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging for AnnoJSON: a TRACE level, a project logger class and chalk output.

The emitter reports per-aggregate detail at TRACE, below DEBUG, so enabling
DEBUG for config troubleshooting does not flood the output with layout
breadcrumbs. Records are written to a text stream (stderr by default) so they
never mix with a document rendered to stdout.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, TextIO, cast

from yachalk import chalk

from annojson.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Callable

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

# Accepted spellings for ANNOJSON_LOG_LEVEL (upper-cased before lookup).
LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "FATAL": logging.CRITICAL,
    "CRITICAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}

# Lowest level first; a record takes the style of the highest threshold it reaches.
LEVEL_STYLES: Final[tuple[tuple[int, Callable[..., str]], ...]] = (
    (TRACE_LEVEL, chalk.blue),
    (logging.DEBUG, chalk.gray),
    (logging.INFO, chalk.green),
    (logging.WARNING, chalk.yellow),
    (logging.ERROR, chalk.red),
    (logging.CRITICAL, chalk.red_bright),
)


class AnnojsonLogger(logging.Logger):
    """Logger with a `trace()` method for the TRACE level."""

    def trace(self, msg: object, *args: object) -> None:
        """Log ``msg % args`` at TRACE."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(AnnojsonLogger)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record by severity.

    Args:
        fmt (str | None): Record format string.
        color (bool): When False, records are returned without styling.
    """

    def __init__(self, fmt: str | None = None, *, color: bool = True) -> None:
        super().__init__(fmt)
        self.color: bool = color

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and apply the style for its level."""
        message: str = super().format(record)
        if not self.color:
            return message
        style: Callable[..., str] | None = None
        for threshold, candidate in LEVEL_STYLES:
            if record.levelno >= threshold:
                style = candidate
        return style(message) if style is not None else chalk.dim(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by ANNOJSON_LOG_LEVEL, or None.

    Accepts level names (case-insensitive, surrounding blanks ignored) and
    plain numbers. Unknown names yield None.
    """
    raw: str | None = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not raw:
        return None
    value: str = raw.strip().upper()
    if value.isdigit():
        return int(value)
    return LEVEL_NAMES.get(value)


def setup_logging(
    level: int | None = None,
    *,
    stream: TextIO | None = None,
    color: bool = True,
) -> None:
    """Install a single chalk handler on the root logger.

    Args:
        level (int | None): Log level; None consults ANNOJSON_LOG_LEVEL and
            falls back to CRITICAL.
        stream (TextIO | None): Destination for records; defaults to the
            current ``sys.stderr``.
        color (bool): Whether records are styled.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root: logging.Logger = logging.getLogger()
    root.setLevel(level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(
        ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT, color=color)
    )
    root.addHandler(handler)


def get_logger(name: str) -> AnnojsonLogger:
    """Return the `AnnojsonLogger` called ``name``."""
    return cast("AnnojsonLogger", logging.getLogger(name))
