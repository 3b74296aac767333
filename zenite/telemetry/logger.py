"""Structured operation logging utilities.

Responsibilities:
- Emit concise, deterministic operation-level log lines through `loguru`.
- Record text sizes and outcomes only, never the text itself.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


class OperationLogger:
    """Emit deterministic log lines for CLI-observable sanitizer operations."""

    def __init__(self, sink: TextIO | None = None, level: str = "INFO") -> None:
        """Route loguru output to `sink` (stderr by default) at `level`."""

        self._sink = sink or sys.stderr
        logger.remove()
        logger.add(self._sink, format="{message}", level=level, colorize=False)

    def _emit(self, level: str, event: str, operation: str, **context: object) -> None:
        """Emit one structured log line."""

        line = f"[text] level={level} op={operation} event={event}{_format_context(context)}"
        logger.log(level, line)

    def log_operation_start(self, operation: str, **context: object) -> None:
        """Emit an operation-start event."""

        self._emit("INFO", "start", operation, **context)

    def log_operation_complete(
        self, operation: str, output_chars: int, **context: object
    ) -> None:
        """Emit an operation-complete event."""

        self._emit("INFO", "complete", operation, output_chars=output_chars, **context)

    def log_operation_failure(self, operation: str, error_type: str) -> None:
        """Emit an operation-failure event without the failing payload."""

        self._emit("ERROR", "failure", operation, error_type=error_type)
