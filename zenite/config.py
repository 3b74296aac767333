"""Configuration model and loaders for Zenite.

Responsibilities:
- Define text-normalization settings as a typed dataclass.
- Provide deterministic precedence resolution for CLI and environment overrides.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `ZeniteConfig`: normalized settings for sanitizer commands.
- `RuntimeConfigSources`: optional value sources for precedence resolution.
- `ConfigLoader`: static construction helpers for `ZeniteConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import (
    normalize_optional_string,
    parse_permissive_boolean,
    parse_required_boolean,
    parse_word_list,
)
from .text.casing import DEFAULT_SMALL_WORDS
from .text.truncate import DEFAULT_TRUNCATE_LENGTH

_DEFAULT_LOG_LEVEL = "WARNING"
_SUPPORTED_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR"})

_ENV_KEYS = {
    "small_words": "ZENITE_SMALL_WORDS",
    "sentence_case": "ZENITE_SENTENCE_CASE",
    "truncate_length": "ZENITE_TRUNCATE_LENGTH",
    "log_level": "ZENITE_LOG_LEVEL",
}


@dataclass(frozen=True, slots=True)
class RuntimeConfigSources:
    """Source mappings used for deterministic override precedence.

    Attributes:
        cli: Values explicitly provided by CLI options, keyed by field name.
        env: Values loaded from environment variables, keyed by `ZENITE_*` name.
    """

    cli: Mapping[str, str] = field(default_factory=dict)
    env: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ZeniteConfig:
    """Settings shared by sanitizer commands.

    Attributes:
        small_words: Connector words kept lowercase by title casing.
        sentence_case: Whether `sanitize` lowercases text after the first letter.
        truncate_length: Default character limit for `truncate`.
        log_level: Minimum level of operation log lines.
    """

    small_words: tuple[str, ...] = DEFAULT_SMALL_WORDS
    sentence_case: bool = False
    truncate_length: int = DEFAULT_TRUNCATE_LENGTH
    log_level: str = _DEFAULT_LOG_LEVEL

    def validate(self) -> None:
        """Validate configuration values before use."""

        if self.truncate_length <= 0:
            raise ValueError("`truncate_length` must be a positive integer.")
        if self.log_level not in _SUPPORTED_LOG_LEVELS:
            supported = ", ".join(sorted(_SUPPORTED_LOG_LEVELS))
            raise ValueError(
                f"Unsupported `log_level` value `{self.log_level}`; supported: {supported}."
            )

    def resolve(self, sources: RuntimeConfigSources | None = None) -> ZeniteConfig:
        """Return a copy with overrides applied.

        Precedence for each key is `cli` > `env` > current field value.
        """

        resolved_sources = sources if sources is not None else RuntimeConfigSources()
        overrides: dict[str, Any] = {}

        small_words = self._lookup_word_list(resolved_sources, "small_words")
        if small_words is not None:
            overrides["small_words"] = small_words

        sentence_case = self._lookup(resolved_sources, "sentence_case")
        if sentence_case is not None:
            overrides["sentence_case"] = parse_required_boolean(sentence_case, "sentence_case")

        truncate_length = self._lookup(resolved_sources, "truncate_length")
        if truncate_length is not None:
            overrides["truncate_length"] = _parse_positive_int(truncate_length, "`truncate_length`")

        log_level = self._lookup(resolved_sources, "log_level")
        if log_level is not None:
            overrides["log_level"] = log_level.upper()

        resolved = replace(self, **overrides)
        resolved.validate()
        return resolved

    @staticmethod
    def _lookup(sources: RuntimeConfigSources, key: str) -> str | None:
        """Return the highest-precedence non-blank value for one key."""

        cli_value = normalize_optional_string(sources.cli.get(key))
        if cli_value is not None:
            return cli_value
        return normalize_optional_string(sources.env.get(_ENV_KEYS[key]))

    @staticmethod
    def _lookup_word_list(sources: RuntimeConfigSources, key: str) -> tuple[str, ...] | None:
        """Return the highest-precedence word list for one key.

        Unlike `_lookup`, a value that is set but blank counts: it clears the list.
        """

        if sources.cli.get(key) is not None:
            return parse_word_list(sources.cli[key])
        env_value = sources.env.get(_ENV_KEYS[key])
        if env_value is not None:
            return parse_word_list(env_value)
        return None


class ConfigLoader:
    """Factory methods for creating `ZeniteConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset(_ENV_KEYS)

    @staticmethod
    def from_yaml(path: Path) -> ZeniteConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)
        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> ZeniteConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        return ZeniteConfig().resolve(RuntimeConfigSources(env=env_map))

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(payload: Mapping[str, Any], source_label: str) -> ZeniteConfig:
        """Build a validated config from a normalized mapping payload."""

        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            key_list = ", ".join(str(key) for key in unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        small_words = DEFAULT_SMALL_WORDS
        if payload.get("small_words") is not None:
            try:
                small_words = parse_word_list(payload["small_words"]) or ()
            except ValueError as exc:
                raise ValueError(f"{source_label} field `small_words`: {exc}") from exc

        sentence_case = False
        if "sentence_case" in payload:
            parsed = parse_permissive_boolean(payload["sentence_case"])
            if parsed is None:
                raise ValueError(
                    f"{source_label} field `sentence_case` must be a boolean value "
                    "(`true`/`false`, `1`/`0`, `yes`/`no`)."
                )
            sentence_case = parsed

        truncate_length = DEFAULT_TRUNCATE_LENGTH
        if payload.get("truncate_length") is not None:
            truncate_length = _parse_positive_int(
                payload["truncate_length"], f"{source_label} field `truncate_length`"
            )

        log_level = (
            normalize_optional_string(payload.get("log_level")) or _DEFAULT_LOG_LEVEL
        ).upper()

        config = ZeniteConfig(
            small_words=small_words,
            sentence_case=sentence_case,
            truncate_length=truncate_length,
            log_level=log_level,
        )
        config.validate()
        return config


def _parse_positive_int(value: object, label: str) -> int:
    """Parse a positive integer from an int or numeric string."""

    if isinstance(value, bool):
        raise ValueError(f"{label} must be a positive integer.")
    if isinstance(value, int):
        parsed = value
    else:
        normalized = normalize_optional_string(value)
        try:
            parsed = int(normalized or "")
        except ValueError as exc:
            raise ValueError(f"{label} must be a positive integer.") from exc

    if parsed <= 0:
        raise ValueError(f"{label} must be a positive integer.")
    return parsed
