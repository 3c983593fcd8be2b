# topmark:header:start
#
#   project      : AnnoJSON
#   file         : test_render_api.py
#   file_relpath : tests/rendering/test_render_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the rendering entry points in `annojson.rendering.api`."""

from __future__ import annotations

import io
import threading

import pytest

from annojson.config.presets import json5
from annojson.config.types import Multiline
from annojson.core.errors import StructureError
from annojson.document.builders import from_value, hex_int
from annojson.document.integer import Base
from annojson.document.model import Fragment, Mapping, Sequence
from annojson.rendering.api import OVERRIDE_KEYS, render, to_json, to_json5


def test_render_defaults_to_strict_json() -> None:
    """It should use the strict preset when no config is given."""
    doc = from_value({"a": [1, 2]})
    assert render(doc) == to_json(doc) == '{\n  "a": [\n    1,\n    2\n  ]\n}'


def test_render_writes_to_sink() -> None:
    """It should write the same text to the sink that it returns."""
    sink = io.StringIO()
    text = render(from_value([True, None]), json5().with_compact(True).freeze(), sink=sink)
    assert text == "[true, null]"
    assert sink.getvalue() == text


def test_render_error_leaves_sink_untouched() -> None:
    """It should not write partial output when the tree is malformed."""
    sink = io.StringIO()
    with pytest.raises(StructureError):
        render(Mapping((from_value(1),)), sink=sink)
    assert sink.getvalue() == ""


def test_overrides() -> None:
    """It should apply keyword overrides on top of the dialect preset."""
    doc = from_value({"k": "a\nb"})
    assert to_json5(doc, indent=0, multiline=Multiline.NONE) == '{\nk: "a\\nb"\n}'
    assert to_json(doc, bare_keys=True, compact=True) == '{k: "a\\nb"}'
    assert to_json(hex_int(255), literals={Base.HEX}) == "0xFF"


def test_none_overrides_are_ignored() -> None:
    """It should keep the preset value for overrides passed as None."""
    assert to_json5(from_value([1]), compact=None) == "[\n  1\n]"


def test_unknown_override_is_rejected() -> None:
    """It should raise TypeError naming unexpected keyword arguments."""
    with pytest.raises(TypeError, match="colour"):
        to_json(from_value(1), colour=True)
    assert "compact" in OVERRIDE_KEYS


def test_failed_render_does_not_affect_later_renders() -> None:
    """It should keep no state across renders."""
    bad = Sequence((Fragment((from_value(1), from_value(2))),))
    with pytest.raises(StructureError):
        to_json(bad)
    assert to_json(Sequence((from_value(1),))) == "[\n  1\n]"


def test_concurrent_renders_share_a_config() -> None:
    """It should render the same frozen config from several threads."""
    cfg = json5().freeze()
    doc = from_value({"a": list(range(50)), "b": {"c": "d"}})
    expected = render(doc, cfg)
    results: list[str] = []
    lock = threading.Lock()

    def worker() -> None:
        text = render(doc, cfg)
        with lock:
            results.append(text)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert results == [expected] * 8
