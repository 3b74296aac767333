"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
sanitizer reports, and JSON record output.
"""

from __future__ import annotations

import json
from typing import Any, NoReturn

import typer

from .errors import CommandStageError
from .text.rules import SanitizationReport


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, CommandStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_sanitization_report(report: SanitizationReport) -> None:
    """Print the rules applied by a sanitizer run and whether the text changed."""

    typer.echo(f"Rules: {', '.join(report.applied_rules)}")
    typer.echo(f"Changed: {'yes' if report.changed else 'no'}")


def render_records_json(records: list[dict[str, Any]]) -> str:
    """Serialize sanitized records as stable, human-readable JSON."""

    return json.dumps(records, ensure_ascii=False, indent=2) + "\n"
