"""Audit trail protocol (port).

Records the outcome of engine operations. Appending an audit entry is an
explicit post-condition performed by the caller (the audit event handler),
never by the policy evaluator or the authentication state machine.

Usage:
    result = await audit.record(
        action=AuditAction.ACCESS_DENIED,
        status=AuditStatus.DENIED,
        actor_id="u3",
        resource_id="r2",
        details="RBAC: STAFF role cannot access CONFIDENTIAL or higher resources.",
    )

    entries = await audit.query(actor_id="u3", limit=20)
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, Protocol
from uuid import UUID

from uuid_extensions import uuid7

from secureguard.core.errors import DomainError
from secureguard.core.result import Result
from secureguard.domain.enums import AuditAction, AuditStatus


@dataclass(frozen=True, kw_only=True)
class AuditEntry:
    """Immutable audit record.

    Attributes:
        id: Entry id (UUIDv7, time-ordered).
        occurred_at: UTC timestamp.
        action: What happened.
        status: SUCCESS / DENIED / ERROR.
        actor_id: Subject id, or None for unknown users.
        actor_name: Username as presented (may not exist).
        resource_id: Resource involved, if any.
        details: Human-readable explanation (decision reason, failure reason).
        context: Extra structured data.
    """

    action: AuditAction
    status: AuditStatus
    actor_id: str | None = None
    actor_name: str | None = None
    resource_id: str | None = None
    details: str = ""
    context: dict[str, Any] = field(default_factory=dict)
    id: UUID = field(default_factory=uuid7)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))


class AuditProtocol(Protocol):
    """Append-only audit trail port.

    Error Handling:
        Methods return Result types; implementations never raise.
    """

    async def record(
        self,
        *,
        action: AuditAction,
        status: AuditStatus,
        actor_id: str | None = None,
        actor_name: str | None = None,
        resource_id: str | None = None,
        details: str = "",
        context: dict[str, Any] | None = None,
    ) -> Result[UUID, DomainError]:
        """Append an entry.

        Returns:
            Success(entry_id) or Failure(DomainError(AUDIT_RECORD_FAILED)).
        """
        ...

    async def query(
        self,
        *,
        actor_id: str | None = None,
        action: AuditAction | None = None,
        limit: int = 100,
    ) -> Result[list[AuditEntry], DomainError]:
        """Return matching entries, newest first."""
        ...
