"""Update subject handler (administrative).

Changes role, department or clearance of a subject. ADMIN only. Runs under
the subject's lock so it cannot overwrite a concurrent lockout update.
"""

from secureguard.application.commands.admin_commands import UpdateSubject
from secureguard.core.enums import ErrorCode
from secureguard.core.errors import DomainError, NotFoundError, ValidationError
from secureguard.core.result import Failure, Result, Success
from secureguard.domain.entities import Subject
from secureguard.domain.enums import Role
from secureguard.domain.errors import PrivilegeError
from secureguard.domain.events import SubjectUpdated
from secureguard.domain.protocols import (
    EventBusProtocol,
    SubjectLockProtocol,
    SubjectRepository,
)


class UpdateSubjectHandler:
    def __init__(
        self,
        subject_repo: SubjectRepository,
        locks: SubjectLockProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self._subject_repo = subject_repo
        self._locks = locks
        self._event_bus = event_bus

    async def handle(self, cmd: UpdateSubject) -> Result[Subject, DomainError]:
        """Apply the non-None fields of cmd.

        Returns:
            Success(Subject) after the update, Failure(PrivilegeError) for
            non-admin actors, Failure(NotFoundError) for unknown subjects,
            Failure(ValidationError) for unknown enum values.
        """
        actor = await self._subject_repo.find_by_id(cmd.actor_id)
        if actor is None or not actor.is_admin:
            return Failure(
                error=PrivilegeError(
                    code=ErrorCode.PRIVILEGE_REQUIRED,
                    message="Only ADMIN can update subjects",
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
            try:
                subject.apply_admin_update(
                    role=cmd.role,
                    department=cmd.department,
                    clearance_level=cmd.clearance_level,
                )
            except ValueError as exc:
                return Failure(
                    error=ValidationError(
                        code=ErrorCode.VALIDATION_FAILED, message=str(exc)
                    )
                )
            await self._subject_repo.update(subject)

        changes = {
            "role": subject.role.value,
            "department": subject.department.value,
            "clearance_level": subject.clearance_level.name,
        }
        await self._event_bus.publish(
            SubjectUpdated(
                subject_id=subject.id, updated_by=actor.id, changes=changes
            )
        )
        return Success(value=subject)
