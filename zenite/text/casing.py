"""Case transformation helpers for titles and sentences.

Responsibilities:
- Apply Unicode-aware capitalization without a fixed ASCII table.
- Title-case short user-visible strings with a configurable small-word list.

Key public functions:
- `capitalize_first_letter`: uppercase the first character when it is a letter.
- `to_sentence_case`: capitalize the first letter and lowercase the rest.
- `title_case`: capitalize words except small connectors, numbers and acronyms.
"""

from __future__ import annotations

from collections.abc import Iterable

from .whitespace import normalize_whitespace

DEFAULT_SMALL_WORDS: tuple[str, ...] = (
    "a",
    "an",
    "the",
    "and",
    "but",
    "or",
    "for",
    "nor",
    "on",
    "at",
    "to",
    "from",
    "by",
    "of",
    "in",
    "with",
    "as",
    "vs",
    "via",
    "so",
    "per",
)

_DEFAULT_SMALL_WORD_SET = frozenset(DEFAULT_SMALL_WORDS)
_WRAPPING_PUNCTUATION = "()[]{}\"\u201c\u201d\u2018\u2019,;:"


def capitalize_first_letter(value: str | None) -> str:
    """Uppercase the first character when it is a letter; leave the rest untouched."""

    if not value:
        return ""
    first = value[0]
    if not first.isalpha():
        return value
    return first.upper() + value[1:]


def capitalize_word(word: str | None) -> str:
    """Uppercase the first letter of `word` and lowercase everything after it.

    Leading punctuation such as an opening parenthesis or quote is skipped, so
    `(seoul` becomes `(Seoul`. A word without letters is returned unchanged.
    """

    if not word:
        return ""
    for index, character in enumerate(word):
        if character.isalpha():
            return word[:index] + character.upper() + word[index + 1 :].lower()
    return word


def to_sentence_case(value: str | None) -> str:
    """Return normalized text with only its first letter capitalized.

    Capitalization only happens when the text starts with a letter; text that
    opens with digits or punctuation is lowercased as a whole so no capital
    appears in the middle of it.
    """

    text = normalize_whitespace(value)
    if not text:
        return ""
    if text[0].isalpha():
        return text[0].upper() + text[1:].lower()
    return text.lower()


def title_case(value: str | None, small_words: Iterable[str] | None = None) -> str:
    """Title-case `value` word by word and hyphen segment by hyphen segment.

    Args:
        value: Free text; whitespace is normalized before casing.
        small_words: Optional override for the connector words kept lowercase.
            Matching is case-insensitive.

    Returns:
        The title-cased text joined with single spaces.
    """

    text = normalize_whitespace(value)
    if not text:
        return ""

    small_word_set = _resolve_small_word_set(small_words)
    cased_words: list[str] = []
    for word_index, word in enumerate(text.split(" ")):
        segments = word.split("-")
        cased_segments = [
            _title_case_segment(
                segment,
                small_word_set,
                opens_title=word_index == 0 and segment_index == 0,
            )
            for segment_index, segment in enumerate(segments)
        ]
        cased_words.append("-".join(cased_segments))
    return " ".join(cased_words)


def is_acronym(segment: str) -> bool:
    """Return whether `segment` has at least two letters and all of them are uppercase."""

    letters = [character for character in segment if character.isalpha()]
    return len(letters) >= 2 and all(character.isupper() for character in letters)


def _title_case_segment(segment: str, small_word_set: frozenset[str], opens_title: bool) -> str:
    """Case one hyphen-delimited segment of a title."""

    if not segment or any(character.isdigit() for character in segment):
        return segment

    # periods and apostrophes stay: `A.` and `A's` are not the connector `a`
    is_small_word = segment.strip(_WRAPPING_PUNCTUATION).lower() in small_word_set
    if is_small_word:
        return capitalize_word(segment) if opens_title else segment.lower()
    if is_acronym(segment):
        return segment
    return capitalize_word(segment)


def _resolve_small_word_set(small_words: Iterable[str] | None) -> frozenset[str]:
    """Build the lowercase lookup set for a small-word override."""

    if small_words is None:
        return _DEFAULT_SMALL_WORD_SET
    return frozenset(word.strip().lower() for word in small_words if word and word.strip())
