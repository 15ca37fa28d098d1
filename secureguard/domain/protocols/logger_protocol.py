"""LoggerProtocol for structured logging.

Backend-agnostic port. Every call is a snake_case event name plus key/value
context; implementations add level and timestamp.

Security:
    - NEVER log passwords, second-factor tokens or credential digests
    - Log subject ids and usernames, not secrets

Usage:
    logger.info("access_denied", subject_id="u3", resource_id="r2", model="RBAC")

    flow_logger = logger.bind(flow="login", username="bob_staff")
    flow_logger.warning("login_failed", reason="bad_password")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Structured logger port (DEBUG, INFO, WARNING, ERROR, CRITICAL + bind)."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Diagnostic detail (development only)."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Normal operation: successful login, granted access."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Security-relevant failure: denied access, failed login, lockout."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Operation failed unexpectedly.

        Args:
            message: Event name.
            error: Optional exception; adds error_type and error_message.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """System-wide failure requiring immediate attention."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger with context included in every call.

        The original logger is unchanged.
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...
