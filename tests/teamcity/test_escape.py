# topmark:header:start
#
#   project      : TCInspect
#   file         : test_escape.py
#   file_relpath : tests/teamcity/test_escape.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for service message value escaping."""

from __future__ import annotations

from hypothesis import given, settings

from tests.conftest import parametrize
from tests.strategies_tcinspect import s_attribute_text
from tcinspect.teamcity.escape import RESERVED_CHARACTERS, escape


@parametrize(
    "raw, expected",
    [
        ("", ""),
        ("plain text", "plain text"),
        ("it's", "it|'s"),
        ("a\nb", "a|nb"),
        ("a\rb", "a|rb"),
        ("[x]", "|[x|]"),
        ("a|b", "a||b"),
        ("a\r\nb", "a|r|nb"),
        ("|n", "||n"),
    ],
)
def test_escape_known_values(raw: str, expected: str) -> None:
    """Each reserved character is prefixed with a bar; newlines become letters."""
    assert escape(raw) == expected


def test_escape_leaves_other_characters_alone() -> None:
    """Non-reserved characters, including unicode and tabs, pass through."""
    value = 'tab\there "quotes" & <angles> é中'
    assert escape(value) == value


def test_escape_is_not_idempotent() -> None:
    """Escaping twice doubles the markers, so values must be escaped exactly once."""
    once: str = escape("|")
    assert once == "||"
    assert escape(once) == "||||"


@settings(max_examples=200)
@given(value=s_attribute_text())
def test_escape_output_has_no_raw_line_breaks(value: str) -> None:
    """Escaped values never contain CR or LF."""
    out: str = escape(value)
    assert "\n" not in out
    assert "\r" not in out


@settings(max_examples=200)
@given(value=s_attribute_text())
def test_escape_reserved_characters_are_always_marked(value: str) -> None:
    """Every quote and bracket in the output is preceded by an unpaired bar."""
    out: str = escape(value)
    i = 0
    while i < len(out):
        ch: str = out[i]
        if ch == "|":
            # A marker always consumes the following character.
            assert i + 1 < len(out)
            assert out[i + 1] in "'nr[]|"
            i += 2
            continue
        assert ch not in RESERVED_CHARACTERS
        i += 1
