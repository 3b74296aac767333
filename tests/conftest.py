"""Shared pytest fixtures for the full Zenite test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

_ZENITE_ENV_KEYS = (
    "ZENITE_SMALL_WORDS",
    "ZENITE_SENTENCE_CASE",
    "ZENITE_TRUNCATE_LENGTH",
    "ZENITE_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clear_zenite_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ambient `ZENITE_*` variables from leaking into config resolution."""

    for key in _ZENITE_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Provide a YAML config path with a custom small-word list."""

    path = tmp_path / "zenite.yml"
    path.write_text(
        """
small_words:
  - little
sentence_case: false
truncate_length: 11
""".strip(),
        encoding="utf-8",
    )
    return path
