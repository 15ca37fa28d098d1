"""In-memory event bus.

Implements EventBusProtocol with a dictionary of handlers per event type.

Design:
    - Fail-open: a handler failure is logged, other handlers still run, the
      publisher never sees the exception
    - Concurrent: handlers for one event run under asyncio.gather
    - Exact type match only (no subclass dispatch)
"""

import asyncio
from collections import defaultdict

from secureguard.domain.events.base_event import DomainEvent
from secureguard.domain.protocols.event_bus_protocol import EventHandler
from secureguard.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventBus:
    """In-memory event bus with fail-open behavior.

    Thread Safety:
        NOT thread-safe (single event loop design).

    Example:
        >>> bus = InMemoryEventBus(logger=logger)
        >>> bus.subscribe(SubjectLocked, logging_handler.handle_subject_locked)
        >>> bus.subscribe(SubjectLocked, audit_handler.handle_subject_locked)
        >>> await bus.publish(SubjectLocked(subject_id="u3", username="bob", failed_attempts=3))
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)
        self._logger = logger

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register handler for event_type (no duplicate detection)."""
        self._handlers[event_type].append(handler)

    def handler_count(self, event_type: type[DomainEvent]) -> int:
        """Number of handlers registered for event_type."""
        return len(self._handlers.get(event_type, []))

    async def publish(self, event: DomainEvent) -> None:
        """Run every handler for type(event); never raises.

        Flow:
            1. Look up handlers for type(event)
            2. No handlers: no-op
            3. asyncio.gather(..., return_exceptions=True)
            4. Log each handler exception as a warning
        """
        event_type = type(event)
        handlers = self._handlers.get(event_type, [])

        if not handlers:
            return

        self._logger.debug(
            "event_publishing",
            event_type=event_type.__name__,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )

        results = await asyncio.gather(
            *(handler(event) for handler in handlers),
            return_exceptions=True,
        )

        for idx, result in enumerate(results):
            if isinstance(result, Exception):
                self._logger.warning(
                    "event_handler_failed",
                    event_type=event_type.__name__,
                    event_id=str(event.event_id),
                    handler_name=getattr(handlers[idx], "__name__", repr(handlers[idx])),
                    error_type=type(result).__name__,
                    error_message=str(result),
                )
