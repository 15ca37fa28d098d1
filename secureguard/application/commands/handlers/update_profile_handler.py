"""Update profile handler.

A subject edits its own display name, email and second-factor setting.
The read-modify-write runs under the subject's lock so it cannot undo a
concurrent lockout. SubjectProfileUpdated is emitted only when something
changed.
"""

from secureguard.application.commands.auth_commands import UpdateProfile
from secureguard.core.enums import ErrorCode
from secureguard.core.errors import DomainError, NotFoundError
from secureguard.core.result import Failure, Result, Success
from secureguard.domain.entities import Subject
from secureguard.domain.events import SubjectProfileUpdated
from secureguard.domain.protocols import (
    EventBusProtocol,
    SubjectLockProtocol,
    SubjectRepository,
)


class UpdateProfileHandler:
    def __init__(
        self,
        subject_repo: SubjectRepository,
        locks: SubjectLockProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self._subject_repo = subject_repo
        self._locks = locks
        self._event_bus = event_bus

    async def handle(self, cmd: UpdateProfile) -> Result[Subject, DomainError]:
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
            changes = subject.update_profile(
                full_name=cmd.full_name,
                email=cmd.email,
                mfa_enabled=cmd.mfa_enabled,
            )
            if changes:
                await self._subject_repo.update(subject)

        if changes:
            await self._event_bus.publish(
                SubjectProfileUpdated(
                    subject_id=subject.id, username=subject.username, changes=changes
                )
            )
        return Success(value=subject)
