# topmark:header:start
#
#   project      : AnnoJSON
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the AnnoJSON logging setup."""

from __future__ import annotations

import io
import logging

import pytest

from annojson.config.logging import (
    TRACE_LEVEL,
    AnnojsonLogger,
    ChalkFormatter,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)
from annojson.constants import LOG_LEVEL_ENV_VAR
from tests.conftest import parametrize


@parametrize(
    "raw, level",
    [
        ("trace", TRACE_LEVEL),
        ("DEBUG", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("fatal", logging.CRITICAL),
        ("15", 15),
        ("bogus", None),
    ],
)
def test_resolve_env_log_level(monkeypatch: pytest.MonkeyPatch, raw: str, level: int | None) -> None:
    """It should accept level names (case-insensitive) and numbers."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, raw)
    assert resolve_env_log_level() == level


def test_resolve_env_log_level_unset() -> None:
    """It should return None when the variable is not set."""
    assert resolve_env_log_level() is None


def test_trace_level_is_registered() -> None:
    """It should register TRACE below DEBUG."""
    assert TRACE_LEVEL < logging.DEBUG
    assert logging.getLevelName(TRACE_LEVEL) == "TRACE"


def test_get_logger_returns_project_logger(caplog: pytest.LogCaptureFixture) -> None:
    """It should return loggers that support trace()."""
    logger: AnnojsonLogger = get_logger("annojson.tests.logging")
    assert isinstance(logger, AnnojsonLogger)
    caplog.set_level(TRACE_LEVEL)
    logger.trace("traced %d", 42)
    assert any(r.levelno == TRACE_LEVEL and r.message == "traced 42" for r in caplog.records)


def test_chalk_formatter_keeps_message() -> None:
    """It should include the formatted message whatever the color support."""
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "hello %s", ("world",), None)
    text: str = ChalkFormatter("[%(levelname)s] %(message)s").format(record)
    assert "[WARNING] hello world" in text


def test_chalk_formatter_without_color() -> None:
    """It should return the plain formatted record when color is off."""
    record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", (), None)
    assert ChalkFormatter("[%(levelname)s] %(message)s", color=False).format(record) == (
        "[ERROR] boom"
    )


def test_setup_logging_writes_to_given_stream() -> None:
    """It should send records at or above the level to the given stream."""
    stream = io.StringIO()
    logger: AnnojsonLogger = get_logger("annojson.tests.stream")
    try:
        setup_logging(logging.INFO, stream=stream, color=False)
        logger.warning("careful %s", "now")
        logger.debug("hidden")
    finally:
        setup_logging(level=TRACE_LEVEL)
    assert stream.getvalue() == "[WARNING] careful now\n"


def test_setup_logging_debug_format_names_logger() -> None:
    """It should include the logger name and line below INFO."""
    stream = io.StringIO()
    try:
        setup_logging(logging.DEBUG, stream=stream, color=False)
        get_logger("annojson.tests.fmt").debug("detail")
    finally:
        setup_logging(level=TRACE_LEVEL)
    text: str = stream.getvalue()
    assert text.startswith("[DEBUG] [annojson.tests.fmt:")
    assert text.endswith("] detail\n")
