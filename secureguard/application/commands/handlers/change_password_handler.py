"""Change password handler.

Flow (under the subject's lock):
1. Load subject
2. Subject not locked (LockedAccountError, before any password check)
3. Verify current password (AuthenticationError bad_password, counter +1)
4. New password passes PasswordPolicy (ValidationError PASSWORD_TOO_WEAK)
5. New password matches confirmation (ValidationError PASSWORD_MISMATCH)
6. Store new digest, emit PasswordChanged

A wrong current password counts toward the same lockout as a failed login,
and emits SubjectLocked when it locks the subject.
"""

from secureguard.application.commands.auth_commands import ChangePassword
from secureguard.application.services import AuthenticationFailureReason
from secureguard.core.enums import ErrorCode
from secureguard.core.errors import (
    AuthenticationError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from secureguard.core.result import Failure, Result, Success
from secureguard.domain.entities import DEFAULT_LOCKOUT_THRESHOLD, Subject
from secureguard.domain.errors import LockedAccountError
from secureguard.domain.events import (
    PasswordChanged,
    PasswordChangeFailed,
    SubjectLocked,
)
from secureguard.domain.policy import PasswordPolicy
from secureguard.domain.protocols import (
    CredentialHasherProtocol,
    EventBusProtocol,
    SubjectLockProtocol,
    SubjectRepository,
)


class ChangePasswordHandler:
    def __init__(
        self,
        subject_repo: SubjectRepository,
        hasher: CredentialHasherProtocol,
        locks: SubjectLockProtocol,
        event_bus: EventBusProtocol,
        password_policy: PasswordPolicy | None = None,
        lockout_threshold: int = DEFAULT_LOCKOUT_THRESHOLD,
    ) -> None:
        self._subject_repo = subject_repo
        self._hasher = hasher
        self._locks = locks
        self._event_bus = event_bus
        self._password_policy = password_policy or PasswordPolicy()
        self._lockout_threshold = lockout_threshold

    async def handle(self, cmd: ChangePassword) -> Result[None, DomainError]:
        newly_locked = False
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

            if subject.is_locked:
                error: DomainError | None = LockedAccountError(
                    code=ErrorCode.ACCOUNT_LOCKED,
                    message="Account is locked. Contact Admin.",
                    subject_id=subject.id,
                )
            elif not self._hasher.verify(cmd.current_password, subject.password_hash):
                newly_locked = subject.record_failed_attempt(self._lockout_threshold)
                await self._subject_repo.update(subject)
                error = AuthenticationError(
                    code=ErrorCode.INVALID_CREDENTIALS,
                    message="Current password incorrect.",
                    reason=AuthenticationFailureReason.BAD_PASSWORD,
                    details={"failed_attempts": str(subject.failed_login_attempts)},
                )
            else:
                error = self._check_new_password(cmd)

            if error is None:
                subject.change_password_hash(self._hasher.hash(cmd.new_password))
                await self._subject_repo.update(subject)

        if error is not None:
            await self._publish_failure(subject, error, newly_locked)
            return Failure(error=error)

        await self._event_bus.publish(PasswordChanged(subject_id=subject.id))
        return Success(value=None)

    def _check_new_password(self, cmd: ChangePassword) -> ValidationError | None:
        violation = self._password_policy.validate_strength(cmd.new_password)
        if violation is not None:
            return ValidationError(
                code=ErrorCode.PASSWORD_TOO_WEAK,
                message=violation,
                field="new_password",
            )
        if cmd.new_password != cmd.confirm_password:
            return ValidationError(
                code=ErrorCode.PASSWORD_MISMATCH,
                message="New passwords do not match.",
                field="confirm_password",
            )
        return None

    async def _publish_failure(
        self, subject: Subject, error: DomainError, newly_locked: bool
    ) -> None:
        await self._event_bus.publish(
            PasswordChangeFailed(subject_id=subject.id, reason=error.code.value)
        )
        if newly_locked:
            await self._event_bus.publish(
                SubjectLocked(
                    subject_id=subject.id,
                    username=subject.username,
                    failed_attempts=subject.failed_login_attempts,
                )
            )
