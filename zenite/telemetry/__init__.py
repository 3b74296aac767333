"""Telemetry helpers.

This package emits deterministic operation events for auditing CLI runs.
"""

from .logger import OperationLogger

__all__ = ["OperationLogger"]
