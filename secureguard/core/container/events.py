# mypy: disable-error-code="arg-type"
"""Event bus dependency factory.

Application-scoped singleton for domain event publishing. Subscriptions are
wired from EVENT_REGISTRY: for every event the logging handler's
``handle_<workflow_name>`` is subscribed, and the audit handler's when
``requires_audit`` is set.
"""

from functools import lru_cache
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from secureguard.domain.protocols import EventBusProtocol


def _resolve_handler(handler: Any, method_name: str, strict: bool) -> Any:
    from secureguard.core.container.infrastructure import get_logger

    method = getattr(handler, method_name, None)
    if method is None:
        if strict:
            raise RuntimeError(
                f"Missing event handler method: "
                f"{type(handler).__name__}.{method_name}"
            )
        get_logger().warning(
            "event_handler_missing",
            handler=type(handler).__name__,
            handler_method=method_name,
        )
    return method


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Raises:
        RuntimeError: In strict mode, when a registered event has no handler
            method on a required subscriber.
    """
    from secureguard.core.config import get_settings
    from secureguard.core.container.infrastructure import get_audit, get_logger
    from secureguard.domain.events.registry import EVENT_REGISTRY
    from secureguard.infrastructure.events import InMemoryEventBus
    from secureguard.infrastructure.events.handlers import (
        AuditEventHandler,
        LoggingEventHandler,
    )

    strict = get_settings().events_strict_mode
    event_bus = InMemoryEventBus(logger=get_logger())
    logging_handler = LoggingEventHandler(logger=get_logger())
    audit_handler = AuditEventHandler(audit=get_audit(), logger=get_logger())

    for metadata in EVENT_REGISTRY:
        method_name = f"handle_{metadata.workflow_name}"

        handler_method = _resolve_handler(logging_handler, method_name, strict)
        if handler_method is not None:
            event_bus.subscribe(metadata.event_class, handler_method)

        if metadata.requires_audit:
            handler_method = _resolve_handler(audit_handler, method_name, strict)
            if handler_method is not None:
                event_bus.subscribe(metadata.event_class, handler_method)

    return event_bus
