"""Command-line interface for Zenite text normalization.

Responsibilities:
- Expose each text transform as a user-facing command.
- Resolve `ZeniteConfig` from YAML, environment and CLI overrides.
- Sanitize JSON record files the way entry forms do before saving.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from collections.abc import Callable
import json
import os
from pathlib import Path
from typing import Annotated, Any

import typer

from .cli_rendering import (
    echo_sanitization_report,
    exit_with_command_error,
    render_records_json,
)
from .config import ConfigLoader, RuntimeConfigSources, ZeniteConfig
from .errors import CommandStageError
from .records import RECORD_SANITIZERS, sanitize_records
from .telemetry.logger import OperationLogger
from .text import (
    normalize_paragraphs,
    normalize_whitespace,
    normalize_whitespace_for_typing,
    sanitize_description,
    sanitize_description_preserve_newlines,
    sanitize_text,
    sanitize_title,
    to_sentence_case,
    trim_and_collapse_spaces,
    truncate_preserve_words,
)
from .text.rules import build_field_sanitizer

app = typer.Typer(
    name="zenite",
    no_args_is_help=True,
    help="Zenite text normalization CLI.",
)

_NORMALIZE_MODES: dict[str, Callable[[str], str]] = {
    "collapse": normalize_whitespace,
    "spaces": trim_and_collapse_spaces,
    "paragraphs": normalize_paragraphs,
    "typing": normalize_whitespace_for_typing,
}

TextArgument = Annotated[
    str | None,
    typer.Argument(help="Text to transform. Read from stdin when omitted."),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML config file with command defaults."),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Log operation events to stderr."),
]


def _load_config(
    config_path: Path | None, cli_overrides: dict[str, str] | None = None
) -> ZeniteConfig:
    """Resolve effective config from YAML defaults, environment and CLI overrides."""

    try:
        base = ConfigLoader.from_yaml(config_path) if config_path is not None else ZeniteConfig()
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config keys/values and rerun.",
        ) from exc

    try:
        return base.resolve(RuntimeConfigSources(cli=cli_overrides or {}, env=os.environ))
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Invalid configuration override: {exc}",
            hint="Check `ZENITE_*` environment variables and command options.",
        ) from exc


def _read_text(text: str | None) -> str:
    """Return the text argument, or stdin content when the argument is omitted."""

    if text is not None:
        return text
    return typer.get_text_stream("stdin").read()


def _verbose_overrides(verbose: bool) -> dict[str, str]:
    """Return CLI overrides implied by `--verbose`."""

    return {"log_level": "INFO"} if verbose else {}


def _run_text_command(
    command_name: str,
    text: str | None,
    config_path: Path | None,
    verbose: bool,
    transform: Callable[[str, ZeniteConfig], str],
    cli_overrides: dict[str, str] | None = None,
) -> None:
    """Resolve config, apply one transform, log the operation and print the result."""

    overrides = {**_verbose_overrides(verbose), **(cli_overrides or {})}
    run_logger: OperationLogger | None = None
    try:
        config = _load_config(config_path, overrides)
        run_logger = OperationLogger(level=config.log_level)
        source = _read_text(text)
        run_logger.log_operation_start(command_name, input_chars=len(source))
        result = transform(source, config)
        run_logger.log_operation_complete(command_name, output_chars=len(result))
    except Exception as exc:
        if run_logger is not None:
            run_logger.log_operation_failure(command_name, type(exc).__name__)
        exit_with_command_error(command_name, exc)

    typer.echo(result)


@app.command("normalize")
def normalize_command(
    text: TextArgument = None,
    mode: Annotated[
        str,
        typer.Option(
            "--mode",
            help="`collapse` (one line), `spaces`, `paragraphs`, or `typing`.",
        ),
    ] = "collapse",
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Normalize whitespace in text."""

    def _transform(source: str, _config: ZeniteConfig) -> str:
        normalizer = _NORMALIZE_MODES.get(mode.strip().lower())
        if normalizer is None:
            raise CommandStageError(
                stage="input",
                detail=f"Unsupported normalize mode `{mode}`.",
                hint=f"Use one of: {', '.join(_NORMALIZE_MODES)}.",
            )
        return normalizer(source)

    _run_text_command("normalize", text, config_file, verbose, _transform)


@app.command("title")
def title_command(
    text: TextArgument = None,
    small_words: Annotated[
        list[str] | None,
        typer.Option(
            "--small-word",
            "-w",
            help="Connector word kept lowercase; repeat to replace the configured list.",
        ),
    ] = None,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Normalize whitespace and title-case text."""

    overrides = {"small_words": ",".join(small_words)} if small_words else None
    _run_text_command(
        "title",
        text,
        config_file,
        verbose,
        lambda source, config: sanitize_title(source, config.small_words),
        cli_overrides=overrides,
    )


@app.command("sentence")
def sentence_command(
    text: TextArgument = None,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Convert text to sentence case."""

    _run_text_command(
        "sentence",
        text,
        config_file,
        verbose,
        lambda source, _config: to_sentence_case(source),
    )


@app.command("description")
def description_command(
    text: TextArgument = None,
    preserve_newlines: Annotated[
        bool,
        typer.Option("--preserve-newlines", help="Keep paragraph breaks."),
    ] = False,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Sanitize a description: capitalize it and end it with punctuation."""

    sanitizer = (
        sanitize_description_preserve_newlines if preserve_newlines else sanitize_description
    )
    _run_text_command(
        "description",
        text,
        config_file,
        verbose,
        lambda source, _config: sanitizer(source),
    )


@app.command("sanitize")
def sanitize_command(
    text: TextArgument = None,
    sentence_case: Annotated[
        bool | None,
        typer.Option(
            "--sentence-case/--no-sentence-case",
            help="Lowercase everything after the first letter (overrides config).",
        ),
    ] = None,
    field: Annotated[
        str | None,
        typer.Option(
            "--field",
            help="Apply a field profile: title, description, notes, text, sentence.",
        ),
    ] = None,
    report: Annotated[
        bool,
        typer.Option("--report", help="Print applied rules after the result."),
    ] = False,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Sanitize free text with the default pipeline or a named field profile."""

    overrides = _verbose_overrides(verbose)
    if sentence_case is not None:
        overrides["sentence_case"] = "true" if sentence_case else "false"

    run_logger: OperationLogger | None = None
    try:
        config = _load_config(config_file, overrides)
        run_logger = OperationLogger(level=config.log_level)
        source = _read_text(text)
        run_logger.log_operation_start("sanitize", input_chars=len(source))
        if field is not None:
            try:
                sanitizer = build_field_sanitizer(field, config.small_words)
            except ValueError as exc:
                raise CommandStageError(
                    stage="input",
                    detail=str(exc),
                    hint="Pass `--field` with a supported profile name.",
                ) from exc
            sanitization = sanitizer.sanitize_with_report(source)
            result = sanitization.sanitized_text
        else:
            sanitization = None
            result = sanitize_text(source, sentence_case=config.sentence_case)
        run_logger.log_operation_complete("sanitize", output_chars=len(result))
    except Exception as exc:
        if run_logger is not None:
            run_logger.log_operation_failure("sanitize", type(exc).__name__)
        exit_with_command_error("sanitize", exc)

    typer.echo(result)
    if report and sanitization is not None:
        echo_sanitization_report(sanitization)


@app.command("truncate")
def truncate_command(
    text: TextArgument = None,
    max_length: Annotated[
        int | None,
        typer.Option("--max", help="Maximum characters before the ellipsis (overrides config)."),
    ] = None,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Shorten text on a word boundary and append an ellipsis."""

    overrides = {"truncate_length": str(max_length)} if max_length is not None else None
    _run_text_command(
        "truncate",
        text,
        config_file,
        verbose,
        lambda source, config: truncate_preserve_words(source, config.truncate_length),
        cli_overrides=overrides,
    )


def _load_records(input_path: Path) -> list[Any]:
    """Read a JSON array of records and map failures to input stage errors."""

    try:
        payload = json.loads(input_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="input",
            detail=f"Records file not found: `{input_path}`.",
            hint="Pass an existing JSON file with an array of records.",
        ) from exc
    except json.JSONDecodeError as exc:
        raise CommandStageError(
            stage="input",
            detail=f"Records file `{input_path}` is not valid JSON: {exc.msg}.",
        ) from exc

    if not isinstance(payload, list):
        raise CommandStageError(
            stage="input",
            detail=f"Records file `{input_path}` must contain a JSON array.",
        )
    return payload


@app.command("records")
def records_command(
    input_path: Annotated[Path, typer.Argument(help="JSON file with an array of records.")],
    kind: Annotated[
        str,
        typer.Option("--kind", help="Record kind: task, daily, or project."),
    ] = "task",
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Write sanitized JSON here instead of stdout."),
    ] = None,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Sanitize task, daily or project records from a JSON file."""

    run_logger: OperationLogger | None = None
    try:
        config = _load_config(config_file, _verbose_overrides(verbose))
        run_logger = OperationLogger(level=config.log_level)
        if kind not in RECORD_SANITIZERS:
            raise CommandStageError(
                stage="input",
                detail=f"Unsupported record kind `{kind}`.",
                hint=f"Use one of: {', '.join(sorted(RECORD_SANITIZERS))}.",
            )
        records = _load_records(input_path)
        run_logger.log_operation_start("records", records=len(records), kind=kind)
        try:
            sanitized = sanitize_records(kind, records, config.small_words)
        except ValueError as exc:
            raise CommandStageError(stage="records", detail=str(exc)) from exc
        rendered = render_records_json(sanitized)
        if out is not None:
            out.parent.mkdir(parents=True, exist_ok=True)
            out.write_text(rendered, encoding="utf-8")
        run_logger.log_operation_complete(
            "records", output_chars=len(rendered), records=len(sanitized)
        )
    except Exception as exc:
        if run_logger is not None:
            run_logger.log_operation_failure("records", type(exc).__name__)
        exit_with_command_error("records", exc)

    if out is None:
        typer.echo(rendered, nl=False)
    else:
        typer.echo(f"Sanitized {len(sanitized)} {kind} record(s): {out}")


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
