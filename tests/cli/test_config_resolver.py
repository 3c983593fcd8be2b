# topmark:header:start
#
#   project      : AnnoJSON
#   file         : test_config_resolver.py
#   file_relpath : tests/cli/test_config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `annojson.cli.config_resolver` precedence rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from annojson.cli.config_resolver import ResolvedConfig, resolve_dialect_config
from annojson.cli.errors import AnnojsonConfigError
from annojson.cli.exit_codes import ExitCode
from annojson.config.presets import hjson, json5, strict
from annojson.config.types import Dialect

if TYPE_CHECKING:
    from pathlib import Path


def test_defaults_without_config(isolation: Path) -> None:
    """It should fall back to strict JSON with no file and no flags."""
    resolved: ResolvedConfig = resolve_dialect_config(
        dialect=None, config_path=None, no_config=False, overrides={}
    )
    assert resolved.dialect is Dialect.JSON
    assert resolved.source is None
    assert resolved.config == strict().freeze()


def test_file_dialect_and_settings(isolation: Path) -> None:
    """It should take the dialect from the file and apply its tables on top."""
    cfg: Path = isolation / "annojson.toml"
    cfg.write_text('dialect = "json5"\n[format]\nindent = 3\n', encoding="utf-8")
    resolved: ResolvedConfig = resolve_dialect_config(
        dialect=None, config_path=None, no_config=False, overrides={}
    )
    assert resolved.dialect is Dialect.JSON5
    assert resolved.source == cfg
    assert resolved.config == json5().with_indent(3).freeze()


def test_cli_dialect_beats_file_dialect(isolation: Path) -> None:
    """It should prefer --dialect over the file's dialect key."""
    (isolation / "annojson.toml").write_text('dialect = "json5"\n', encoding="utf-8")
    resolved: ResolvedConfig = resolve_dialect_config(
        dialect=Dialect.HJSON, config_path=None, no_config=False, overrides={}
    )
    assert resolved.dialect is Dialect.HJSON
    assert resolved.config == hjson().freeze()


def test_discovery_from_explicit_cwd(tmp_path: Path, isolation: Path) -> None:
    """It should start discovery from the given directory."""
    project: Path = tmp_path / "other"
    project.mkdir()
    (project / "annojson.toml").write_text('dialect = "hjson"\n', encoding="utf-8")
    resolved: ResolvedConfig = resolve_dialect_config(
        dialect=None, config_path=None, no_config=False, overrides={}, cwd=project
    )
    assert resolved.dialect is Dialect.HJSON


def test_unknown_file_dialect_is_ignored(isolation: Path) -> None:
    """It should fall back to strict JSON when the file names an unknown dialect."""
    (isolation / "annojson.toml").write_text('dialect = "yaml"\n', encoding="utf-8")
    resolved: ResolvedConfig = resolve_dialect_config(
        dialect=None, config_path=None, no_config=False, overrides={}
    )
    assert resolved.dialect is Dialect.JSON


def test_invalid_settings_raise_config_error(isolation: Path) -> None:
    """It should turn invalid layered settings into a config error."""
    with pytest.raises(AnnojsonConfigError) as excinfo:
        resolve_dialect_config(
            dialect=None, config_path=None, no_config=True, overrides={"indent": -2}
        )
    assert excinfo.value.exit_code == ExitCode.CONFIG_ERROR
    assert "indent" in excinfo.value.format_message()
