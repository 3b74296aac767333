"""Module entrypoint for running Zenite as ``python -m zenite``."""

from __future__ import annotations

from zenite.cli import main


if __name__ == "__main__":
    main()
