# topmark:header:start
#
#   project      : AnnoJSON
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the AnnoJSON test suite.

This file sets up global fixtures, typed mark helpers and the logging
configuration for test runs.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs from a preset builder (`annojson.config.presets`), then
      ``freeze()`` into a `DialectConfig` before rendering.
    - Do **not** mutate a frozen `DialectConfig`. If you need to tweak one,
      call `DialectConfig.thaw()`, edit the builder, then ``freeze()`` again.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from annojson.config import logging
from annojson.config.presets import for_dialect
from annojson.config.types import Dialect
from annojson.rendering.api import render

if TYPE_CHECKING:
    from pathlib import Path

    from annojson.config.model import DialectConfig
    from annojson.document.model import Document

F = TypeVar("F", bound=Callable[..., object])

# A decorator that returns the same Callable (F) it receives.
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def clean_annojson_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer shell settings from leaking into test runs.

    Removes ``ANNOJSON_LOG_LEVEL`` (log noise) and the ``FORCE_COLOR`` /
    ``NO_COLOR`` switches (color detection).

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to
            manipulate environment variables.
    """
    monkeypatch.delenv("ANNOJSON_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the log level to TRACE so failures come with full emitter traces.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an empty project directory so config discovery finds nothing.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def make_config(dialect: Dialect = Dialect.JSON, **overrides: Any) -> DialectConfig:
    """Return a frozen config built from a dialect preset and builder overrides.

    Args:
        dialect (Dialect): Preset to start from.
        **overrides (Any): Attributes set on the builder before freezing.

    Returns:
        DialectConfig: The frozen configuration.
    """
    builder = for_dialect(dialect)
    for key, value in overrides.items():
        setattr(builder, key, value)
    return builder.freeze()


def render_with(document: Document, dialect: Dialect = Dialect.JSON, **overrides: Any) -> str:
    """Render ``document`` with `make_config` (plain text)."""
    return render(document, make_config(dialect, **overrides))
