"""Sanitization of task, daily and project records before persistence.

Responsibilities:
- Apply the field sanitizers that each entry form uses to its record payload.
- Enforce project name/description limits after sanitizing.
- Detect duplicate project names case-insensitively.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from .errors import RecordValidationError
from .text.sanitizers import (
    sanitize_description,
    sanitize_description_preserve_newlines,
    sanitize_title,
)
from .text.whitespace import normalize_whitespace

UNTITLED_DAILY = "Untitled Daily"
PROJECT_NAME_MAX_LENGTH = 255
PROJECT_DESCRIPTION_MAX_LENGTH = 1000

RecordSanitizer = Callable[..., dict[str, Any]]


def _field_text(record: Mapping[str, Any], field: str) -> str:
    """Return a record field as text, treating a missing or null value as empty."""

    value = record.get(field)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise RecordValidationError(field=field, detail="must be a string.")
    return value


def sanitize_task_record(
    record: Mapping[str, Any], small_words: Iterable[str] | None = None
) -> dict[str, Any]:
    """Return a copy of a task record with `title` and `notes` sanitized."""

    sanitized = dict(record)
    if "title" in record:
        sanitized["title"] = sanitize_title(_field_text(record, "title"), small_words)
    if "notes" in record:
        sanitized["notes"] = sanitize_description(_field_text(record, "notes"))
    return sanitized


def sanitize_daily_record(
    record: Mapping[str, Any], small_words: Iterable[str] | None = None
) -> dict[str, Any]:
    """Return a copy of a daily record; blank titles get a placeholder, blank notes are dropped."""

    sanitized = dict(record)
    title = sanitize_title(_field_text(record, "title"), small_words)
    sanitized["title"] = title or UNTITLED_DAILY
    sanitized["notes"] = sanitize_description(_field_text(record, "notes")) or None
    return sanitized


def sanitize_project_record(
    record: Mapping[str, Any], small_words: Iterable[str] | None = None
) -> dict[str, Any]:
    """Return a copy of a project record with `name` and `description` sanitized.

    Description paragraphs are kept. A blank description becomes `None`.

    Raises:
        RecordValidationError: If the name is missing or a field exceeds its limit.
    """

    sanitized = dict(record)
    name = sanitize_title(_field_text(record, "name"), small_words)
    if not name:
        raise RecordValidationError(field="name", detail="is required.")
    if len(name) > PROJECT_NAME_MAX_LENGTH:
        raise RecordValidationError(
            field="name", detail=f"must be at most {PROJECT_NAME_MAX_LENGTH} characters."
        )
    sanitized["name"] = name

    description = sanitize_description_preserve_newlines(_field_text(record, "description"))
    if len(description) > PROJECT_DESCRIPTION_MAX_LENGTH:
        raise RecordValidationError(
            field="description",
            detail=f"must be at most {PROJECT_DESCRIPTION_MAX_LENGTH} characters.",
        )
    sanitized["description"] = description or None
    return sanitized


RECORD_SANITIZERS: dict[str, RecordSanitizer] = {
    "task": sanitize_task_record,
    "daily": sanitize_daily_record,
    "project": sanitize_project_record,
}


def sanitize_records(
    kind: str,
    records: Iterable[Mapping[str, Any]],
    small_words: Iterable[str] | None = None,
) -> list[dict[str, Any]]:
    """Sanitize a batch of records of one kind.

    Raises:
        ValueError: If `kind` is unknown or an entry is not a mapping.
        RecordValidationError: If a record fails validation.
    """

    sanitizer = RECORD_SANITIZERS.get(kind)
    if sanitizer is None:
        supported = ", ".join(sorted(RECORD_SANITIZERS))
        raise ValueError(f"Unsupported record kind `{kind}`; supported: {supported}.")

    word_list = tuple(small_words) if small_words is not None else None
    sanitized: list[dict[str, Any]] = []
    for index, record in enumerate(records):
        if not isinstance(record, Mapping):
            raise ValueError(f"Record #{index + 1} must be a mapping/object.")
        sanitized.append(sanitizer(record, word_list))
    return sanitized


def project_name_key(name: str | None) -> str:
    """Return the case-insensitive comparison key for a project name."""

    return normalize_whitespace(name).casefold()


def find_duplicate_project(
    name: str | None, existing: Iterable[Mapping[str, Any]]
) -> Mapping[str, Any] | None:
    """Return the first existing project whose name matches `name` ignoring case."""

    key = project_name_key(name)
    if not key:
        return None
    for project in existing:
        existing_name = project.get("name")
        if isinstance(existing_name, str) and project_name_key(existing_name) == key:
            return project
    return None
