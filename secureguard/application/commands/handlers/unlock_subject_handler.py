"""Unlock subject handler (admin_unlock).

Flow:
1. Load actor, require ADMIN
2. Load target subject
3. Under the subject's lock: clear counter and lock flag, persist
4. Emit SubjectUnlocked
"""

from secureguard.application.commands.auth_commands import UnlockSubject
from secureguard.core.enums import ErrorCode
from secureguard.core.errors import DomainError, NotFoundError
from secureguard.core.result import Failure, Result, Success
from secureguard.domain.enums import Role
from secureguard.domain.errors import PrivilegeError
from secureguard.domain.events import SubjectUnlocked
from secureguard.domain.protocols import (
    EventBusProtocol,
    SubjectLockProtocol,
    SubjectRepository,
)


class UnlockSubjectHandler:
    """Administrative unlock. No time-based unlock exists."""

    def __init__(
        self,
        subject_repo: SubjectRepository,
        locks: SubjectLockProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self._subject_repo = subject_repo
        self._locks = locks
        self._event_bus = event_bus

    async def handle(self, cmd: UnlockSubject) -> Result[None, DomainError]:
        """Reset the failure counter and lock flag of cmd.subject_id.

        Returns:
            Success(None), Failure(PrivilegeError) for non-admin actors,
            Failure(NotFoundError) for unknown subjects.
        """
        actor = await self._subject_repo.find_by_id(cmd.actor_id)
        if actor is None or not actor.is_admin:
            return Failure(
                error=PrivilegeError(
                    code=ErrorCode.PRIVILEGE_REQUIRED,
                    message="Only ADMIN can unlock accounts",
                    actor_id=cmd.actor_id,
                    required_role=Role.ADMIN.value,
                )
            )

        async with self._locks.hold(cmd.subject_id):
            subject = await self._subject_repo.find_by_id(cmd.subject_id)
            if subject is None:
                return Failure(
                    error=NotFoundError(
                        code=ErrorCode.SUBJECT_NOT_FOUND,
                        message="Subject not found",
                        resource_type="Subject",
                        resource_id=cmd.subject_id,
                    )
                )
            subject.unlock()
            await self._subject_repo.update(subject)

        await self._event_bus.publish(
            SubjectUnlocked(subject_id=cmd.subject_id, unlocked_by=cmd.actor_id)
        )
        return Success(value=None)
