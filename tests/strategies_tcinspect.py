# topmark:header:start
#
#   project      : TCInspect
#   file         : strategies_tcinspect.py
#   file_relpath : tests/strategies_tcinspect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for attribute values and diagnostics.

Text strategies are biased towards the characters that service messages
reserve, so that escaping edge cases show up early.
"""

from __future__ import annotations

from hypothesis import strategies as st

from tcinspect.diagnostic.model import Diagnostic, FileLocation, Severity

RESERVED: tuple[str, ...] = ("'", "\n", "\r", "[", "]", "|")

BLACKLIST_CATEGORIES: tuple[str, ...] = ("Cs",)


def s_attribute_text(max_size: int = 40) -> st.SearchStrategy[str]:
    """Arbitrary text mixed with reserved characters."""
    plain: st.SearchStrategy[str] = st.characters(blacklist_categories=BLACKLIST_CATEGORIES)
    return st.text(alphabet=st.one_of(st.sampled_from(RESERVED), plain), max_size=max_size)


def s_report_path() -> st.SearchStrategy[str]:
    """Relative, POSIX-absolute and Windows-style paths."""
    segment: st.SearchStrategy[str] = st.text(
        alphabet="abcdefghijklmnopqrstuvwxyz0123456789_.", min_size=1, max_size=8
    )
    segments: st.SearchStrategy[list[str]] = st.lists(segment, min_size=1, max_size=4)
    return st.one_of(
        segments.map("/".join),
        segments.map(lambda parts: "/" + "/".join(parts)),
        segments.map(lambda parts: "C:\\" + "\\".join(parts)),
    )


def s_location() -> st.SearchStrategy[FileLocation]:
    """A single location frame."""
    return st.builds(
        FileLocation,
        file=s_report_path(),
        line=st.integers(min_value=0, max_value=10_000),
        column=st.integers(min_value=0, max_value=500),
    )


def s_diagnostic() -> st.SearchStrategy[Diagnostic]:
    """A diagnostic with 0..3 frames and arbitrary messages."""
    return st.builds(
        Diagnostic,
        kind=st.sampled_from(("nullPointer", "uninitvar", "memleak", "unusedFunction")),
        short=s_attribute_text(),
        verbose=s_attribute_text(),
        severity=st.sampled_from(list(Severity)),
        inconclusive=st.booleans(),
        cwe=st.integers(min_value=0, max_value=1500),
        frames=st.lists(s_location(), max_size=3).map(tuple),
        file0=st.one_of(st.just(""), s_report_path()),
    )
