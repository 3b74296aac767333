"""Unit tests for capitalization, sentence case and title case."""

from __future__ import annotations

import pytest

from zenite.text.casing import (
    DEFAULT_SMALL_WORDS,
    capitalize_first_letter,
    capitalize_word,
    is_acronym,
    title_case,
    to_sentence_case,
)
from zenite.text.whitespace import normalize_whitespace


def test_capitalize_first_letter_handles_empty_and_single_char_strings() -> None:
    """Only the first character changes, and only when it is a letter."""

    assert capitalize_first_letter("hello") == "Hello"
    assert capitalize_first_letter("") == ""
    assert capitalize_first_letter(None) == ""
    assert capitalize_first_letter("a") == "A"
    assert capitalize_first_letter("hello WORLD") == "Hello WORLD"


def test_capitalize_first_letter_is_unicode_aware() -> None:
    """Accented first letters should be uppercased."""

    assert capitalize_first_letter("ábc") == "Ábc"
    assert capitalize_first_letter("žluťoučký kůň") == "Žluťoučký kůň"


def test_capitalize_first_letter_leaves_non_letter_start_unchanged() -> None:
    """No later character is capitalized when the text opens with a non-letter."""

    assert capitalize_first_letter("1st place") == "1st place"
    assert capitalize_first_letter(" leading") == " leading"


def test_capitalize_word_skips_leading_punctuation() -> None:
    """The first letter after punctuation is capitalized and the rest lowercased."""

    assert capitalize_word("(seoul") == "(Seoul"
    assert capitalize_word("LOndon") == "London"
    assert capitalize_word("...") == "..."
    assert capitalize_word("") == ""


def test_to_sentence_case_capitalizes_first_alpha_and_lowercases_rest() -> None:
    """Sentence case normalizes whitespace and lowercases after the first letter."""

    assert to_sentence_case("  hELLo WORLD  ") == "Hello world"
    assert to_sentence_case("ÉCOLE   Normale") == "École normale"
    assert to_sentence_case("") == ""
    assert to_sentence_case(None) == ""


def test_to_sentence_case_does_not_capitalize_after_leading_non_letters() -> None:
    """Text opening with digits or punctuation is only lowercased."""

    assert to_sentence_case("123  aBC") == "123 abc"
    assert to_sentence_case("!!!") == "!!!"
    assert to_sentence_case("- ITEM") == "- item"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("create the next 1-2 presentations", "Create the Next 1-2 Presentations"),
        ("hello world", "Hello World"),
        ("the quick brown fox", "The Quick Brown Fox"),
        ("a tale of two cities", "A Tale of Two Cities"),
        ("this is the project of a team", "This Is the Project of a Team"),
        ("of mice and men", "Of Mice and Men"),
    ],
)
def test_title_case_keeps_small_words_lowercase_unless_first(value: str, expected: str) -> None:
    """Small connectors stay lowercase except when they open the title."""

    assert title_case(value) == expected


def test_title_case_handles_hyphenated_segments() -> None:
    """Each hyphen segment is cased on its own."""

    assert title_case("state-of-the-art device") == "State-of-the-Art Device"
    assert title_case("pre-and-post-processing") == "Pre-and-Post-Processing"


def test_title_case_preserves_segments_with_digits() -> None:
    """Version numbers and ranges are left untouched."""

    assert title_case("version 2.0 release") == "Version 2.0 Release"
    assert title_case("update 1-2 items") == "Update 1-2 Items"
    assert title_case("ship v2 build") == "Ship v2 Build"


def test_title_case_with_custom_small_words() -> None:
    """An override list replaces the defaults and still keeps the first word capitalized."""

    assert title_case("the little prince", ["little"]) == "The little Prince"
    assert title_case("the LITTLE prince", ["Little"]) == "The little Prince"
    assert title_case("war and peace", []) == "War And Peace"


def test_title_case_preserves_all_uppercase_acronyms() -> None:
    """Words whose letters are all uppercase are kept as acronyms."""

    assert title_case("SUFS") == "SUFS"
    assert title_case("NASA") == "NASA"
    assert title_case("API and SDK") == "API and SDK"


def test_title_case_fixes_mixed_case_typos() -> None:
    """Mixed-case words are normalized to a single leading capital."""

    assert title_case("LOndon") == "London"
    assert title_case("fRAud") == "Fraud"


def test_title_case_handles_parentheses_and_punctuation() -> None:
    """Words wrapped in punctuation are still title-cased by their letters."""

    assert (
        title_case("SUFS (Seoul University of Foreign Studies)")
        == "SUFS (Seoul University of Foreign Studies)"
    )
    assert title_case("notes (of the meeting)") == "Notes (of the Meeting)"


@pytest.mark.parametrize("value", ["1-2", "  3.0   4.5 ", "!!! ...", "2024-01-31 -- 10:30", ""])
def test_title_case_leaves_non_alphabetic_text_as_normalized(value: str) -> None:
    """Strings without letters only get their whitespace normalized."""

    assert title_case(value) == normalize_whitespace(value)


def test_default_small_words_are_lowercase_connectors() -> None:
    """The default list should contain lowercase articles and prepositions."""

    assert "the" in DEFAULT_SMALL_WORDS
    assert "of" in DEFAULT_SMALL_WORDS
    assert all(word == word.lower() for word in DEFAULT_SMALL_WORDS)


def test_is_acronym_requires_two_uppercase_letters() -> None:
    """Single letters and mixed case do not count as acronyms."""

    assert is_acronym("NASA")
    assert is_acronym("U.S.")
    assert not is_acronym("A")
    assert not is_acronym("Nasa")


def test_title_case_does_not_mistake_punctuated_words_for_small_words() -> None:
    """Periods and apostrophes inside a segment keep it from matching a connector."""

    assert title_case("getting straight A's") == "Getting Straight A's"
    assert title_case("book the O.R. slot") == "Book the O.R. Slot"
    assert title_case("plan A.") == "Plan A."


def test_title_case_strips_wrapping_punctuation_before_small_word_lookup() -> None:
    """Brackets, quotes and commas around a connector do not stop the match."""

    assert title_case("tales of, by and for heroes") == "Tales of, by and for Heroes"
    assert title_case('the "of" clause') == 'The "of" Clause'


def test_title_case_capitalizes_opening_small_word_in_all_caps_title() -> None:
    """An uppercase opening connector is capitalized, not kept as an acronym."""

    assert title_case("THE LORD OF THE RINGS") == "The LORD of the RINGS"
    assert title_case("OF MICE AND MEN") == "Of MICE and MEN"
