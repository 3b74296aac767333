"""Unit tests for shared configuration parsing helpers."""

import pytest

from zenite.parsing import (
    normalize_optional_string,
    parse_permissive_boolean,
    parse_required_boolean,
    parse_word_list,
)


def test_normalize_optional_string_handles_blank_values() -> None:
    """Normalization should return `None` for `None` and blank textual values."""

    assert normalize_optional_string(None) is None
    assert normalize_optional_string("") is None
    assert normalize_optional_string("   ") is None


def test_normalize_optional_string_strips_non_blank_values() -> None:
    """Normalization should return stripped content for non-empty values."""

    assert normalize_optional_string("  value  ") == "value"
    assert normalize_optional_string(42) == "42"


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("TrUe", True),
        ("  ON ", True),
        ("YeS", True),
        ("FALSE", False),
        (" oFf ", False),
        ("nO", False),
    ],
)
def test_parse_permissive_boolean_accepts_mixed_case_tokens(
    token: str, expected: bool
) -> None:
    """Permissive parsing should accept valid tokens case-insensitively."""

    assert parse_permissive_boolean(token) is expected


@pytest.mark.parametrize("value", ["", "   ", "maybe", "2", object()])
def test_parse_permissive_boolean_returns_none_for_invalid_tokens(value: object) -> None:
    """Permissive parsing should return `None` for invalid or blank inputs."""

    assert parse_permissive_boolean(value) is None


def test_parse_required_boolean_raises_with_field_name() -> None:
    """Required parsing should name the field in its error."""

    assert parse_required_boolean("yes", "sentence_case") is True
    with pytest.raises(ValueError, match="`sentence_case` must be a boolean value"):
        parse_required_boolean("perhaps", "sentence_case")


def test_parse_word_list_accepts_strings_and_iterables() -> None:
    """Word lists are lowercased, stripped and de-duplicated in order."""

    assert parse_word_list("The, of ,,the") == ("the", "of")
    assert parse_word_list([" A ", "an", ""]) == ("a", "an")
    assert parse_word_list("") == ()
    assert parse_word_list(None) is None


@pytest.mark.parametrize("value", [5, ["ok", 3]])
def test_parse_word_list_rejects_non_string_values(value: object) -> None:
    """Non-string inputs and entries are rejected."""

    with pytest.raises(ValueError, match="Word lists must"):
        parse_word_list(value)
