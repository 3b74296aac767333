"""Unit tests for whitespace normalization helpers."""

from __future__ import annotations

import pytest

from zenite.text.whitespace import (
    normalize_line_endings,
    normalize_paragraphs,
    normalize_whitespace,
    normalize_whitespace_for_typing,
    trim_and_collapse_spaces,
)


def test_normalize_whitespace_collapses_spaces_and_line_endings() -> None:
    """Mixed CRLF, tabs, blank lines and NBSP should collapse to single spaces."""

    value = "  Hello\r\n\tWorld\n\n  Foo\u00a0Bar  "

    assert normalize_whitespace(value) == "Hello World Foo Bar"


def test_normalize_whitespace_treats_missing_input_as_empty() -> None:
    """Empty and `None` input should produce an empty string."""

    assert normalize_whitespace("") == ""
    assert normalize_whitespace(None) == ""
    assert normalize_whitespace(" \t\r\n  ") == ""


def test_normalize_whitespace_joins_unicode_line_separators() -> None:
    """Line and paragraph separators should become ordinary spaces."""

    assert normalize_whitespace("one\u2028two\u2029three") == "one two three"


@pytest.mark.parametrize(
    "value",
    [
        "",
        "plain",
        "  a\t\tb  ",
        "x\r\ny\rz\n",
        " \t\n mixed  \r\n sequence ",
    ],
)
def test_normalize_whitespace_is_idempotent(value: str) -> None:
    """Normalizing twice should give the same result as normalizing once."""

    once = normalize_whitespace(value)

    assert normalize_whitespace(once) == once


def test_trim_and_collapse_spaces_collapses_spaces_and_tabs() -> None:
    """Runs of spaces and tabs should collapse and the ends should be trimmed."""

    assert trim_and_collapse_spaces("  a   b\t c  ") == "a b c"
    assert trim_and_collapse_spaces("") == ""
    assert trim_and_collapse_spaces(None) == ""


def test_trim_and_collapse_spaces_keeps_inner_line_breaks() -> None:
    """Inner line breaks are not substituted by the spaces-only variant."""

    assert trim_and_collapse_spaces("  a  \n  b ") == "a \n b"


def test_normalize_line_endings_converts_crlf_and_cr() -> None:
    """All line ending variants should become `\\n`."""

    assert normalize_line_endings("a\r\nb\rc\nd") == "a\nb\nc\nd"


def test_normalize_whitespace_for_typing_keeps_trailing_space_and_newlines() -> None:
    """Live-typing normalization should not eat the space or newline just typed."""

    assert normalize_whitespace_for_typing("  hello   world ") == "hello world "
    assert normalize_whitespace_for_typing("a\r\nb\t\tc") == "a\nb c"
    assert normalize_whitespace_for_typing(None) == ""


def test_normalize_paragraphs_keeps_single_blank_line_between_paragraphs() -> None:
    """Each line is collapsed and blank-line runs shrink to one blank line."""

    value = "  first   line \r\n\r\n\r\n\n second\tline  "

    assert normalize_paragraphs(value) == "first line\n\nsecond line"


def test_normalize_paragraphs_keeps_adjacent_lines() -> None:
    """Consecutive non-blank lines should stay on separate lines."""

    assert normalize_paragraphs("one\ntwo  \n\n") == "one\ntwo"
