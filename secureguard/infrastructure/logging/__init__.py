"""Logging adapters."""

from secureguard.infrastructure.logging.console_adapter import (
    ConsoleAdapter,
    redact_secrets,
)

__all__ = ["ConsoleAdapter", "redact_secrets"]
