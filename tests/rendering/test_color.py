# topmark:header:start
#
#   project      : AnnoJSON
#   file         : test_color.py
#   file_relpath : tests/rendering/test_color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for color profiles and colored rendering.

A tagging colorizer stands in for yachalk so the assertions do not depend on
terminal escape sequences.
"""

from __future__ import annotations

import re

from annojson.document.builders import comment, kv, string
from annojson.document.model import Mapping, Sequence, String
from annojson.rendering.api import to_hjson, to_json, to_json5
from annojson.rendering.color import Colorizer, ColorProfile, PaintRole

TAG_RE = re.compile(r"</?[a-z]+>")


def tag(name: str) -> Colorizer:
    def _colorize(*args: object, sep: str = " ") -> str:
        return f"<{name}>{sep.join(str(a) for a in args)}</{name}>"

    return _colorize


def tagging_profile() -> ColorProfile:
    profile = ColorProfile()
    for role in PaintRole:
        profile = profile.with_color(role, tag(role.value))
    return profile


def test_plain_profile_is_disabled() -> None:
    """It should leave text untouched and report itself as disabled."""
    profile = ColorProfile.plain()
    assert not profile.enabled
    assert profile.paint(PaintRole.KEY, "k") == "k"


def test_basic_profile_styles_every_role() -> None:
    """It should assign each role its default colorizer."""
    profile = ColorProfile.basic()
    assert profile.enabled
    assert set(profile.colors) == set(PaintRole)
    assert profile.colors[PaintRole.KEY] is PaintRole.KEY.color


def test_with_color_returns_a_copy() -> None:
    """It should not modify the original profile and remove roles given None."""
    base = ColorProfile.plain()
    styled = base.with_color(PaintRole.NULL, tag("n"))
    assert base.colors == {}
    assert styled.paint(PaintRole.NULL, "null") == "<n>null</n>"
    assert not styled.with_color(PaintRole.NULL, None).enabled


def test_paint_skips_empty_text() -> None:
    """It should not wrap empty strings."""
    assert tagging_profile().paint(PaintRole.PUNCTUATION, "") == ""


def test_paint_role_values() -> None:
    """It should behave as a string enum keyed by role name."""
    assert PaintRole("key") is PaintRole.KEY
    assert PaintRole.COMMENT == "comment"


def test_colored_tokens() -> None:
    """It should paint keys, punctuation, values and escapes by role."""
    doc = Mapping((kv("a", String('x"y')),))
    text = to_json5(doc, compact=True, color=tagging_profile())
    assert text == (
        "<aggregate>{</aggregate>"
        "<key>a</key><punctuation>: </punctuation>"
        '<punctuation>"</punctuation><string>x</string>'
        '<escape>\\"</escape><string>y</string><punctuation>"</punctuation>'
        "<aggregate>}</aggregate>"
    )


def test_quoted_keys_are_painted_as_keys() -> None:
    """It should paint the quotes of a key as punctuation and its text as a key."""
    text = to_json(Mapping((kv("a b", None),)), compact=True, color=tagging_profile())
    assert '<punctuation>"</punctuation><key>a b</key><punctuation>"</punctuation>' in text
    assert "<null>null</null>" in text


def test_comments_are_painted() -> None:
    """It should paint each comment line separately."""
    text = to_json5(comment("a\nb"), color=tagging_profile())
    assert text == "<comment>// a</comment>\n<comment>// b</comment>\n"


def test_color_does_not_change_layout() -> None:
    """It should produce the plain layout once tags are removed."""
    doc = Mapping(
        (
            kv("list", Sequence((string("a\nb", multiline=True), String("\t")))),
            kv("n", 0x10, "note"),
        )
    )
    for render in (to_json, to_json5, to_hjson):
        colored = render(doc, color=tagging_profile())
        assert TAG_RE.sub("", colored) == render(doc)
