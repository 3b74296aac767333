"""Domain exceptions for record validation and CLI diagnostics."""

from __future__ import annotations


class CommandStageError(RuntimeError):
    """Raised when a specific stage of a CLI command fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped command error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class RecordValidationError(ValueError):
    """Raised when a sanitized record field violates its constraints."""

    def __init__(self, *, field: str, detail: str) -> None:
        super().__init__(f"`{field}` {detail}")
        self.field = field
        self.detail = detail
