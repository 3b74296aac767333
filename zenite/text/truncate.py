"""Word-boundary aware truncation for compact labels."""

from __future__ import annotations

ELLIPSIS = "…"
DEFAULT_TRUNCATE_LENGTH = 15


def truncate_preserve_words(value: str | None, max_length: int = DEFAULT_TRUNCATE_LENGTH) -> str:
    """Shorten `value` to at most `max_length` characters plus an ellipsis.

    The cut prefers the last space inside the limit so words stay whole; a
    single long word is cut hard at `max_length`.

    Raises:
        ValueError: If `max_length` is not a positive integer.
    """

    if max_length <= 0:
        raise ValueError("`max_length` must be a positive integer.")
    if not value:
        return ""

    text = value.strip()
    if len(text) <= max_length:
        return text

    # one extra character tells whether the limit falls right before a space
    candidate = text[: max_length + 1]
    last_space = candidate.rfind(" ")
    if last_space > 0:
        trimmed = candidate[:last_space].strip()
        if trimmed:
            return trimmed + ELLIPSIS

    return text[:max_length].rstrip() + ELLIPSIS
