"""Domain events."""

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

__all__ = [
    "DomainEvent",
    "PasswordChangeFailed",
    "PasswordChanged",
    "PolicyConfigChangeDenied",
    "PolicyConfigChanged",
    "ResourceAccessDenied",
    "ResourceAccessGranted",
    "ResourceShared",
    "SecondFactorFailed",
    "SubjectLocked",
    "SubjectLoginAttempted",
    "SubjectLoginFailed",
    "SubjectLoginSucceeded",
    "SubjectProfileUpdated",
    "SubjectRegistered",
    "SubjectRegistrationFailed",
    "SubjectUnlocked",
    "SubjectUpdated",
]
