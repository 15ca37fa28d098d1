"""Domain event subscribers."""

from secureguard.infrastructure.events.handlers.audit_event_handler import (
    AuditEventHandler,
)
from secureguard.infrastructure.events.handlers.logging_event_handler import (
    LoggingEventHandler,
)

__all__ = ["AuditEventHandler", "LoggingEventHandler"]
