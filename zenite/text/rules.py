"""Composable sanitizer rules and per-field rule profiles.

Responsibilities:
- Wrap the pure text helpers as rule objects applied in a fixed order.
- Map form field kinds (title, description, notes...) to rule sequences.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from .casing import capitalize_first_letter, title_case, to_sentence_case
from .sanitizers import TERMINAL_PUNCTUATION
from .whitespace import normalize_paragraphs, normalize_whitespace


class SanitizerRule(Protocol):
    """Protocol for text sanitizer rules."""

    name: str

    def apply(self, text: str) -> str:
        """Apply a single sanitizing transformation."""


class NormalizeWhitespace:
    """Collapse all whitespace, including line breaks, to single spaces."""

    name = "normalize_whitespace"

    def apply(self, text: str) -> str:
        return normalize_whitespace(text)


class NormalizeParagraphs:
    """Collapse whitespace per line while keeping paragraph breaks."""

    name = "normalize_paragraphs"

    def apply(self, text: str) -> str:
        return normalize_paragraphs(text)


class TitleCase:
    """Title-case text with an optional small-word override."""

    name = "title_case"

    def __init__(self, small_words: Iterable[str] | None = None) -> None:
        self.small_words = tuple(small_words) if small_words is not None else None

    def apply(self, text: str) -> str:
        return title_case(text, self.small_words)


class SentenceCase:
    """Capitalize the first letter and lowercase the remainder."""

    name = "sentence_case"

    def apply(self, text: str) -> str:
        return to_sentence_case(text)


class CapitalizeFirstLetter:
    """Capitalize the first letter only."""

    name = "capitalize_first_letter"

    def apply(self, text: str) -> str:
        return capitalize_first_letter(text)


class EnsureTerminalPunctuation:
    """Append a period to non-empty text lacking terminal punctuation."""

    name = "ensure_terminal_punctuation"

    def apply(self, text: str) -> str:
        if not text or text.endswith(TERMINAL_PUNCTUATION):
            return text
        return text + "."


@dataclass(frozen=True, slots=True)
class SanitizationReport:
    """Structured output of one sanitizer run."""

    original_text: str
    sanitized_text: str
    applied_rules: tuple[str, ...]

    @property
    def changed(self) -> bool:
        """Return whether sanitizing altered the text."""

        return self.original_text != self.sanitized_text


class TextSanitizer:
    """Apply a sequence of sanitizer rules in order."""

    def __init__(self, rules: list[SanitizerRule] | None = None) -> None:
        """Initialize with custom rules or the plain text rule sequence."""

        self.rules = rules or [NormalizeWhitespace(), CapitalizeFirstLetter()]

    def sanitize_with_report(self, text: str | None) -> SanitizationReport:
        """Apply all configured rules and return the result with diagnostics."""

        original = text or ""
        current = original
        for rule in self.rules:
            current = rule.apply(current)
        return SanitizationReport(
            original_text=original,
            sanitized_text=current,
            applied_rules=tuple(rule.name for rule in self.rules),
        )

    def sanitize(self, text: str | None) -> str:
        """Apply all configured rules in order."""

        return self.sanitize_with_report(text).sanitized_text


FIELD_PROFILES = ("title", "description", "notes", "text", "sentence")


def build_field_sanitizer(
    field: str, small_words: Iterable[str] | None = None
) -> TextSanitizer:
    """Return the sanitizer for a named field profile.

    `description` joins lines into one; `notes` keeps paragraph breaks.

    Raises:
        ValueError: If `field` is not a known profile.
    """

    profile = field.strip().lower()
    if profile == "title":
        return TextSanitizer([NormalizeWhitespace(), TitleCase(small_words)])
    if profile == "description":
        return TextSanitizer(
            [NormalizeWhitespace(), CapitalizeFirstLetter(), EnsureTerminalPunctuation()]
        )
    if profile == "notes":
        return TextSanitizer(
            [NormalizeParagraphs(), CapitalizeFirstLetter(), EnsureTerminalPunctuation()]
        )
    if profile == "text":
        return TextSanitizer([NormalizeWhitespace(), CapitalizeFirstLetter()])
    if profile == "sentence":
        return TextSanitizer([NormalizeWhitespace(), SentenceCase()])

    supported = ", ".join(FIELD_PROFILES)
    raise ValueError(f"Unsupported field profile `{field}`; supported: {supported}.")
