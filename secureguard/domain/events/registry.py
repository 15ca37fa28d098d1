"""Event registry: single source of truth for event wiring.

The container loops over EVENT_REGISTRY and subscribes
``handle_<workflow_name>`` on the logging handler for every event, and on
the audit handler when ``requires_audit`` is set.
"""

from dataclasses import dataclass

from secureguard.domain.events.access_events import (
    PolicyConfigChangeDenied,
    PolicyConfigChanged,
    ResourceAccessDenied,
    ResourceAccessGranted,
    ResourceShared,
)
from secureguard.domain.events.auth_events import (
    PasswordChanged,
    PasswordChangeFailed,
    SecondFactorFailed,
    SubjectLocked,
    SubjectLoginAttempted,
    SubjectLoginFailed,
    SubjectLoginSucceeded,
    SubjectProfileUpdated,
    SubjectRegistered,
    SubjectRegistrationFailed,
    SubjectUnlocked,
    SubjectUpdated,
)
from secureguard.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True)
class EventMetadata:
    """Wiring metadata for one event class.

    Attributes:
        event_class: Event type.
        workflow_name: Suffix of the handler method (handle_<workflow_name>).
        requires_audit: Whether the audit handler records it.
    """

    event_class: type[DomainEvent]
    workflow_name: str
    requires_audit: bool = True


EVENT_REGISTRY: tuple[EventMetadata, ...] = (
    EventMetadata(
        event_class=SubjectLoginAttempted,
        workflow_name="login_attempted",
        requires_audit=False,
    ),
    EventMetadata(event_class=SubjectLoginSucceeded, workflow_name="login_succeeded"),
    EventMetadata(event_class=SubjectLoginFailed, workflow_name="login_failed"),
    EventMetadata(event_class=SecondFactorFailed, workflow_name="second_factor_failed"),
    EventMetadata(event_class=SubjectLocked, workflow_name="subject_locked"),
    EventMetadata(event_class=SubjectUnlocked, workflow_name="subject_unlocked"),
    EventMetadata(event_class=SubjectRegistered, workflow_name="subject_registered"),
    EventMetadata(
        event_class=SubjectRegistrationFailed,
        workflow_name="subject_registration_failed",
    ),
    EventMetadata(event_class=PasswordChanged, workflow_name="password_changed"),
    EventMetadata(
        event_class=PasswordChangeFailed, workflow_name="password_change_failed"
    ),
    EventMetadata(
        event_class=SubjectProfileUpdated, workflow_name="subject_profile_updated"
    ),
    EventMetadata(event_class=SubjectUpdated, workflow_name="subject_updated"),
    EventMetadata(event_class=ResourceAccessGranted, workflow_name="access_granted"),
    EventMetadata(event_class=ResourceAccessDenied, workflow_name="access_denied"),
    EventMetadata(event_class=ResourceShared, workflow_name="resource_shared"),
    EventMetadata(
        event_class=PolicyConfigChanged, workflow_name="policy_config_changed"
    ),
    EventMetadata(
        event_class=PolicyConfigChangeDenied,
        workflow_name="policy_config_change_denied",
    ),
)


def get_event_metadata(event_class: type[DomainEvent]) -> EventMetadata | None:
    """Registry entry for event_class, or None."""
    for metadata in EVENT_REGISTRY:
        if metadata.event_class is event_class:
            return metadata
    return None
