"""Field-level sanitizers composed from whitespace and casing helpers.

Responsibilities:
- Give form fields (titles, descriptions, free text) one call that yields the
  stored representation.
- Keep every sanitizer total: `None` and blank input produce `""`.
"""

from __future__ import annotations

from collections.abc import Iterable

from .casing import capitalize_first_letter, title_case, to_sentence_case
from .whitespace import normalize_paragraphs, normalize_whitespace

TERMINAL_PUNCTUATION: tuple[str, ...] = (".", "!", "?")


def sanitize_title(value: str | None, small_words: Iterable[str] | None = None) -> str:
    """Normalize whitespace and title-case a title or project name."""

    return title_case(normalize_whitespace(value), small_words)


def sanitize_description(value: str | None) -> str:
    """Normalize a description onto one line and finish it as a sentence."""

    return finish_sentence(normalize_whitespace(value))


def sanitize_description_preserve_newlines(value: str | None) -> str:
    """Sanitize a multi-paragraph description without joining its lines."""

    return finish_sentence(normalize_paragraphs(value))


def sanitize_text(value: str | None, *, sentence_case: bool = False) -> str:
    """Normalize free text and fix its capitalization.

    Args:
        value: Text to sanitize.
        sentence_case: When true, lowercase everything after the first letter.
            Otherwise only the first letter is capitalized.
    """

    text = normalize_whitespace(value)
    if sentence_case:
        return to_sentence_case(text)
    return capitalize_first_letter(text)


def finish_sentence(text: str) -> str:
    """Capitalize the first letter and add a period unless already punctuated."""

    if not text:
        return ""
    text = capitalize_first_letter(text)
    if not text.endswith(TERMINAL_PUNCTUATION):
        text += "."
    return text
