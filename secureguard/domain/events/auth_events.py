"""Authentication and account administration events.

Pattern: ATTEMPTED -> SUCCEEDED / FAILED, plus lockout transitions.

Handlers:
- LoggingEventHandler: all events
- AuditEventHandler: all events except *Attempted
"""

from dataclasses import dataclass

from secureguard.domain.events.base_event import DomainEvent


# ═══════════════════════════════════════════════════════════════
# Login flow
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class SubjectLoginAttempted(DomainEvent):
    """Credentials were submitted for a username."""

    username: str


@dataclass(frozen=True, kw_only=True)
class SubjectLoginSucceeded(DomainEvent):
    """Login flow reached AUTHENTICATED.

    Attributes:
        second_factor_used: True when the flow went through a second factor.
    """

    subject_id: str
    username: str
    second_factor_used: bool = False


@dataclass(frozen=True, kw_only=True)
class SubjectLoginFailed(DomainEvent):
    """Credential step failed.

    Attributes:
        reason: Error code value (captcha_incorrect, unknown_user,
            account_locked, invalid_credentials).
        subject_id: Set when the username matched a subject.
    """

    username: str
    reason: str
    subject_id: str | None = None


@dataclass(frozen=True, kw_only=True)
class SecondFactorFailed(DomainEvent):
    """Second-factor token rejected."""

    subject_id: str
    username: str
    reason: str


@dataclass(frozen=True, kw_only=True)
class SubjectLocked(DomainEvent):
    """Failure counter reached the lockout threshold."""

    subject_id: str
    username: str
    failed_attempts: int


@dataclass(frozen=True, kw_only=True)
class SubjectUnlocked(DomainEvent):
    """Administrator cleared a lock."""

    subject_id: str
    unlocked_by: str


# ═══════════════════════════════════════════════════════════════
# Registration and profile
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class SubjectRegistered(DomainEvent):
    """New subject created."""

    subject_id: str
    username: str
    role: str


@dataclass(frozen=True, kw_only=True)
class SubjectRegistrationFailed(DomainEvent):
    """Registration rejected."""

    username: str
    reason: str


@dataclass(frozen=True, kw_only=True)
class PasswordChanged(DomainEvent):
    """Subject changed its password."""

    subject_id: str


@dataclass(frozen=True, kw_only=True)
class PasswordChangeFailed(DomainEvent):
    """Password change rejected."""

    subject_id: str
    reason: str


@dataclass(frozen=True, kw_only=True)
class SubjectUpdated(DomainEvent):
    """Administrator changed role, department or clearance.

    Attributes:
        changes: Field name -> new value.
    """

    subject_id: str
    updated_by: str
    changes: dict[str, str]


@dataclass(frozen=True, kw_only=True)
class SubjectProfileUpdated(DomainEvent):
    """Subject changed its own name, email or second-factor setting.

    Attributes:
        changes: Field name -> new value, only for fields that changed.
    """

    subject_id: str
    username: str
    changes: dict[str, str]
