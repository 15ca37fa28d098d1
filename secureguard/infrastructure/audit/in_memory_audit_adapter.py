"""In-memory audit adapter.

Append-only list of AuditEntry values. Entries are frozen; there is no
update or delete operation.
"""

from typing import Any
from uuid import UUID

from secureguard.core.enums import ErrorCode
from secureguard.core.errors import DomainError
from secureguard.core.result import Failure, Result, Success
from secureguard.domain.enums import AuditAction, AuditStatus
from secureguard.domain.protocols.audit_protocol import AuditEntry


class InMemoryAuditAdapter:
    """Append-only audit trail held in process memory."""

    def __init__(self, max_entries: int | None = None) -> None:
        """Initialize adapter.

        Args:
            max_entries: Optional cap; oldest entries are dropped past it.
        """
        self._entries: list[AuditEntry] = []
        self._max_entries = max_entries

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
        try:
            entry = AuditEntry(
                action=AuditAction(action),
                status=AuditStatus(status),
                actor_id=actor_id,
                actor_name=actor_name,
                resource_id=resource_id,
                details=details,
                context=dict(context or {}),
            )
        except ValueError as e:
            return Failure(
                error=DomainError(
                    code=ErrorCode.AUDIT_RECORD_FAILED,
                    message=f"Invalid audit entry: {e}",
                )
            )
        self._entries.append(entry)
        if self._max_entries is not None and len(self._entries) > self._max_entries:
            del self._entries[: len(self._entries) - self._max_entries]
        return Success(value=entry.id)

    async def query(
        self,
        *,
        actor_id: str | None = None,
        action: AuditAction | None = None,
        limit: int = 100,
    ) -> Result[list[AuditEntry], DomainError]:
        matches = [
            entry
            for entry in reversed(self._entries)
            if (actor_id is None or entry.actor_id == actor_id)
            and (action is None or entry.action == action)
        ]
        return Success(value=matches[:limit])

    def __len__(self) -> int:
        return len(self._entries)
