"""Register subject handler.

Flow:
1. Password strength (ValidationError PASSWORD_TOO_WEAK)
2. Captcha (ValidationError CAPTCHA_INCORRECT)
3. Role / department values (ValidationError VALIDATION_FAILED)
4. Username uniqueness (ConflictError)
5. Role access key for privileged roles (PrivilegeError)
6. Create subject with the role's default clearance, second factor on
7. Emit SubjectRegistered (or SubjectRegistrationFailed on any failure)
"""

from collections.abc import Callable, Mapping

from uuid_extensions import uuid7

from secureguard.application.commands.auth_commands import RegisterSubject
from secureguard.core.enums import ErrorCode
from secureguard.core.errors import ConflictError, DomainError, ValidationError
from secureguard.core.result import Failure, Result, Success
from secureguard.domain.entities import Subject
from secureguard.domain.enums import Department, Role, SecurityLevel
from secureguard.domain.errors import PrivilegeError
from secureguard.domain.events import SubjectRegistered, SubjectRegistrationFailed
from secureguard.domain.policy import PasswordPolicy
from secureguard.domain.protocols import (
    CredentialHasherProtocol,
    EventBusProtocol,
    SubjectRepository,
)

DEFAULT_CLEARANCE: dict[Role, SecurityLevel] = {
    Role.ADMIN: SecurityLevel.TOP_SECRET,
    Role.MANAGER: SecurityLevel.CONFIDENTIAL,
    Role.AUDITOR: SecurityLevel.CONFIDENTIAL,
    Role.STAFF: SecurityLevel.INTERNAL,
}


def _new_subject_id() -> str:
    return str(uuid7())


class RegisterSubjectHandler:
    """Self-registration with role access keys.

    Attributes:
        role_access_keys: Key required per privileged role. Roles missing
            from the mapping (STAFF) register without a key.
    """

    def __init__(
        self,
        subject_repo: SubjectRepository,
        hasher: CredentialHasherProtocol,
        event_bus: EventBusProtocol,
        role_access_keys: Mapping[Role, str],
        password_policy: PasswordPolicy | None = None,
        id_factory: Callable[[], str] = _new_subject_id,
    ) -> None:
        self._subject_repo = subject_repo
        self._hasher = hasher
        self._event_bus = event_bus
        self._role_access_keys = dict(role_access_keys)
        self._password_policy = password_policy or PasswordPolicy()
        self._id_factory = id_factory

    async def handle(self, cmd: RegisterSubject) -> Result[Subject, DomainError]:
        """Create a subject.

        Returns:
            Success(Subject) with the stored subject, or Failure with the
            first failed check.
        """
        error = await self._validate(cmd)
        if error is not None:
            await self._event_bus.publish(
                SubjectRegistrationFailed(
                    username=cmd.username, reason=error.code.value
                )
            )
            return Failure(error=error)

        role = Role(cmd.role)
        subject = Subject(
            id=self._id_factory(),
            username=cmd.username,
            full_name=cmd.full_name,
            email=cmd.email,
            role=role,
            department=Department(cmd.department),
            clearance_level=DEFAULT_CLEARANCE[role],
            password_hash=self._hasher.hash(cmd.password),
            mfa_enabled=True,
        )

        try:
            await self._subject_repo.save(subject)
        except KeyError:
            # Lost a race with another registration for the same username.
            conflict = self._username_conflict(cmd.username)
            await self._event_bus.publish(
                SubjectRegistrationFailed(
                    username=cmd.username, reason=conflict.code.value
                )
            )
            return Failure(error=conflict)

        await self._event_bus.publish(
            SubjectRegistered(
                subject_id=subject.id, username=subject.username, role=role.value
            )
        )
        return Success(value=subject)

    async def _validate(self, cmd: RegisterSubject) -> DomainError | None:
        violation = self._password_policy.validate_strength(cmd.password)
        if violation is not None:
            return ValidationError(
                code=ErrorCode.PASSWORD_TOO_WEAK, message=violation, field="password"
            )

        if not cmd.captcha.is_solved_by(cmd.captcha_answer):
            return ValidationError(
                code=ErrorCode.CAPTCHA_INCORRECT,
                message="Incorrect Captcha.",
                field="captcha_answer",
            )

        try:
            role = Role(cmd.role)
            Department(cmd.department)
        except ValueError as exc:
            return ValidationError(
                code=ErrorCode.VALIDATION_FAILED, message=str(exc), field="role"
            )

        if await self._subject_repo.find_by_username(cmd.username) is not None:
            return self._username_conflict(cmd.username)

        required_key = self._role_access_keys.get(role)
        if required_key is not None and cmd.role_access_key != required_key:
            return PrivilegeError(
                code=ErrorCode.INVALID_ROLE_ACCESS_KEY,
                message=f"Invalid Access Key for {role.value}. Authorization failed.",
                actor_id=cmd.username,
                required_role=role.value,
            )
        return None

    @staticmethod
    def _username_conflict(username: str) -> ConflictError:
        return ConflictError(
            code=ErrorCode.USERNAME_ALREADY_EXISTS,
            message="Username taken.",
            resource_type="Subject",
            conflicting_field="username",
            details={"username": username},
        )
