"""Shared parsing helpers for configuration value normalization."""

from __future__ import annotations

from collections.abc import Iterable


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse a permissive boolean token and return `None` for invalid values."""

    if isinstance(value, bool):
        return value

    normalized = normalize_optional_string(value)
    if normalized is None:
        return None

    token = normalized.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None


def parse_required_boolean(value: str, field_name: str) -> bool:
    """Parse a required boolean value from accepted textual tokens.

    Raises:
        ValueError: If the token is not one of the accepted boolean values.
    """

    parsed = parse_permissive_boolean(value)
    if parsed is not None:
        return parsed

    raise ValueError(
        f"`{field_name}` must be a boolean value (`true`/`false`, `1`/`0`, `yes`/`no`)."
    )


def parse_word_list(value: object) -> tuple[str, ...] | None:
    """Parse a comma-separated string or an iterable of strings into lowercase words.

    Blank entries are dropped and duplicates keep their first position. Returns
    `None` for `None` so callers can tell "not set" from "set to empty".

    Raises:
        ValueError: If `value` is neither a string nor an iterable of strings.
    """

    if value is None:
        return None
    if isinstance(value, str):
        raw_items: Iterable[object] = value.split(",")
    elif isinstance(value, Iterable):
        raw_items = value
    else:
        raise ValueError("Word lists must be a comma-separated string or a list of strings.")

    words: list[str] = []
    for item in raw_items:
        if not isinstance(item, str):
            raise ValueError("Word lists must contain only strings.")
        word = normalize_optional_string(item)
        if word is None:
            continue
        lowered = word.lower()
        if lowered not in words:
            words.append(lowered)
    return tuple(words)
