"""Top-level package for Zenite text normalization.

This package provides the pure string transforms the Zenite task manager applies
to titles and descriptions, plus record sanitizers and a CLI around them.
"""

from .text import (
    capitalize_first_letter,
    normalize_whitespace,
    sanitize_description,
    sanitize_text,
    sanitize_title,
    title_case,
    to_sentence_case,
    trim_and_collapse_spaces,
)

__all__ = [
    "normalize_whitespace",
    "trim_and_collapse_spaces",
    "capitalize_first_letter",
    "to_sentence_case",
    "title_case",
    "sanitize_title",
    "sanitize_description",
    "sanitize_text",
    "__version__",
]

__version__ = "0.1.0"
