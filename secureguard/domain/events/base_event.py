"""Base domain event class.

Domain events record things that already happened (past tense names:
SubjectLocked, ResourceShared). Application handlers publish them after the
pure engine has produced its result; logging and audit subscribers react.

Usage:
    >>> @dataclass(frozen=True, kw_only=True)
    ... class SubjectLocked(DomainEvent):
    ...     subject_id: str
    >>>
    >>> event = SubjectLocked(subject_id="u3")
    >>> event.event_id  # auto-generated UUIDv7
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming
        3. Be frozen, kw_only dataclasses

    Attributes:
        event_id: Unique, time-ordered id (UUIDv7).
        occurred_at: UTC timestamp.
    """

    event_id: UUID = field(default_factory=uuid7)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
