"""Event bus protocol (port) for domain events.

Application handlers publish events after the pure engine has produced its
result; subscribers (logging, audit) perform the side effects.

Implementations:
    - InMemoryEventBus: secureguard/infrastructure/events/in_memory_event_bus.py

Usage:
    >>> event_bus.subscribe(ResourceAccessDenied, audit_handler.handle_access_denied)
    >>> await event_bus.publish(ResourceAccessDenied(...))
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from secureguard.domain.events.base_event import DomainEvent

EventHandler = Callable[[DomainEvent], Awaitable[None]]
"""Async event handler: takes one event, returns None, side effects only."""


class EventBusProtocol(Protocol):
    """Publish/subscribe port for domain events."""

    def subscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        """Register handler for an exact event type."""
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Deliver event to every handler registered for type(event).

        Never raises: handler failures are logged and swallowed so that a
        broken subscriber cannot undo a completed business operation.
        """
        ...
