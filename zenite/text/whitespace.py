"""Deterministic whitespace normalization helpers.

Responsibilities:
- Collapse mixed whitespace (CR/LF, tabs, non-breaking spaces) into single spaces.
- Provide line-preserving variants for multi-paragraph fields and live typing.
"""

from __future__ import annotations

import re

_LINE_BREAK_RE = re.compile(r"\r\n?|\n")
_SPACE_LIKE_RE = re.compile(r"[\t\f\v\u00a0\u2028\u2029]+")
_WHITESPACE_RUN_RE = re.compile(r"\s+")
_SPACE_TAB_RUN_RE = re.compile(r"[ \t]+")
_HORIZONTAL_RUN_RE = re.compile(r"[ \t\f\v\u00a0]+")
_BLANK_LINE_RUN_RE = re.compile(r"\n{3,}")


def normalize_whitespace(value: str | None) -> str:
    """Return `value` on one line with every whitespace run collapsed to one space."""

    if not value:
        return ""
    text = _LINE_BREAK_RE.sub(" ", value)
    text = _SPACE_LIKE_RE.sub(" ", text)
    return _WHITESPACE_RUN_RE.sub(" ", text).strip()


def trim_and_collapse_spaces(value: str | None) -> str:
    """Collapse runs of spaces and tabs and trim both ends.

    Line breaks inside the text are kept as they are.
    """

    if not value:
        return ""
    return _SPACE_TAB_RUN_RE.sub(" ", value).strip()


def normalize_line_endings(value: str | None) -> str:
    """Convert `\\r\\n` and lone `\\r` line endings to `\\n`."""

    if not value:
        return ""
    return _LINE_BREAK_RE.sub("\n", value)


def normalize_whitespace_for_typing(value: str | None) -> str:
    """Normalize whitespace in text that is still being edited.

    Unlike `normalize_whitespace`, this keeps newlines and a single trailing
    space so the caller can run it on every keystroke without eating the space
    the user just typed.
    """

    if not value:
        return ""
    lines = normalize_line_endings(value).split("\n")
    collapsed = [_HORIZONTAL_RUN_RE.sub(" ", line) for line in lines]
    return "\n".join(collapsed).lstrip()


def normalize_paragraphs(value: str | None) -> str:
    """Normalize whitespace per line while keeping paragraph breaks.

    Each line is collapsed and trimmed, runs of blank lines shrink to a single
    blank line, and the whole text is trimmed.
    """

    if not value:
        return ""
    lines = normalize_line_endings(value).split("\n")
    cleaned = [_WHITESPACE_RUN_RE.sub(" ", _SPACE_LIKE_RE.sub(" ", line)).strip() for line in lines]
    return _BLANK_LINE_RUN_RE.sub("\n\n", "\n".join(cleaned)).strip()
