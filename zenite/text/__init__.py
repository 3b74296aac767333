"""Text normalization components.

This package provides pure whitespace, casing and sanitizing helpers applied to
user-entered titles and descriptions before they are stored or displayed.
"""

from .casing import (
    DEFAULT_SMALL_WORDS,
    capitalize_first_letter,
    capitalize_word,
    title_case,
    to_sentence_case,
)
from .rules import SanitizationReport, TextSanitizer, build_field_sanitizer
from .sanitizers import (
    sanitize_description,
    sanitize_description_preserve_newlines,
    sanitize_text,
    sanitize_title,
)
from .truncate import truncate_preserve_words
from .whitespace import (
    normalize_paragraphs,
    normalize_whitespace,
    normalize_whitespace_for_typing,
    trim_and_collapse_spaces,
)

__all__ = [
    "DEFAULT_SMALL_WORDS",
    "normalize_whitespace",
    "trim_and_collapse_spaces",
    "normalize_whitespace_for_typing",
    "normalize_paragraphs",
    "capitalize_first_letter",
    "capitalize_word",
    "to_sentence_case",
    "title_case",
    "sanitize_title",
    "sanitize_description",
    "sanitize_description_preserve_newlines",
    "sanitize_text",
    "truncate_preserve_words",
    "TextSanitizer",
    "SanitizationReport",
    "build_field_sanitizer",
]
