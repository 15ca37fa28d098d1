"""Authentication state machine.

One instance drives one login flow:

    AWAITING_CREDENTIALS --submit_credentials--> AWAITING_SECOND_FACTOR
    AWAITING_CREDENTIALS --submit_credentials--> AUTHENTICATED (no second factor)
    AWAITING_SECOND_FACTOR --submit_second_factor--> AUTHENTICATED
    either of the first two --(lock reached or subject locked)--> LOCKED

A flow in LOCKED may start over with submit_credentials (after an admin
unlock, or for another username).

Failure counters live on the Subject and are shared by every flow for that
subject, so each read-modify-write runs under the subject's lock from
SubjectLockProtocol. The machine publishes no events and writes no audit
records; LoginHandler wraps it for that.
"""

from secureguard.application.dtos import AuthenticationStep
from secureguard.core.enums import ErrorCode
from secureguard.core.errors import AuthenticationError, DomainError, ValidationError
from secureguard.core.result import Failure, Result, Success
from secureguard.domain.entities import DEFAULT_LOCKOUT_THRESHOLD, Subject
from secureguard.domain.enums import AuthState
from secureguard.domain.errors import LockedAccountError
from secureguard.domain.protocols import (
    CredentialHasherProtocol,
    SecondFactorVerifierProtocol,
    SubjectLockProtocol,
    SubjectRepository,
)
from secureguard.domain.value_objects import CaptchaChallenge


class AuthenticationFailureReason:
    """Reason strings carried by AuthenticationError."""

    UNKNOWN_USER = "unknown_user"
    BAD_PASSWORD = "bad_password"
    BAD_SECOND_FACTOR = "bad_second_factor"


class AuthenticationStateMachine:
    """Login flow for a single client.

    Not safe to drive one instance from several tasks at once; create one
    per flow. Different instances may run concurrently against the same
    subject.

    Attributes:
        state: Current AuthState.
        subject_id: Subject identified by the last accepted credentials.
    """

    def __init__(
        self,
        subject_repo: SubjectRepository,
        hasher: CredentialHasherProtocol,
        second_factor: SecondFactorVerifierProtocol,
        locks: SubjectLockProtocol,
        lockout_threshold: int = DEFAULT_LOCKOUT_THRESHOLD,
    ) -> None:
        self._subject_repo = subject_repo
        self._hasher = hasher
        self._second_factor = second_factor
        self._locks = locks
        self._lockout_threshold = lockout_threshold
        self._state = AuthState.AWAITING_CREDENTIALS
        self._subject_id: str | None = None

    @property
    def state(self) -> AuthState:
        return self._state

    @property
    def subject_id(self) -> str | None:
        return self._subject_id

    async def submit_credentials(
        self,
        username: str,
        password: str,
        captcha: CaptchaChallenge,
        captcha_answer: str | int | None,
    ) -> Result[AuthenticationStep, DomainError]:
        """First step: captcha, lock state, then password.

        Checks run in this order:
            1. Captcha answer (ValidationError; caller shows a fresh puzzle)
            2. Subject exists (AuthenticationError unknown_user)
            3. Subject not locked (LockedAccountError, before the password)
            4. Password digest (AuthenticationError bad_password, counter +1)

        Returns:
            Success(AuthenticationStep) with AWAITING_SECOND_FACTOR or
            AUTHENTICATED, or Failure with one of the errors above.
        """
        if self._state not in (AuthState.AWAITING_CREDENTIALS, AuthState.LOCKED):
            return self._invalid_transition("submit_credentials")

        self._state = AuthState.AWAITING_CREDENTIALS
        self._subject_id = None

        if not captcha.is_solved_by(captcha_answer):
            return Failure(
                error=ValidationError(
                    code=ErrorCode.CAPTCHA_INCORRECT,
                    message="Incorrect captcha",
                    field="captcha_answer",
                )
            )

        found = await self._subject_repo.find_by_username(username)
        if found is None:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.UNKNOWN_USER,
                    message="User not found",
                    reason=AuthenticationFailureReason.UNKNOWN_USER,
                )
            )

        self._subject_id = found.id
        async with self._locks.hold(found.id):
            # Re-read under the lock; another flow may have changed the counter.
            subject = await self._subject_repo.find_by_id(found.id)
            if subject is None:
                return Failure(
                    error=AuthenticationError(
                        code=ErrorCode.UNKNOWN_USER,
                        message="User not found",
                        reason=AuthenticationFailureReason.UNKNOWN_USER,
                    )
                )

            if subject.is_locked:
                self._state = AuthState.LOCKED
                return Failure(error=self._locked_error(subject))

            if not self._hasher.verify(password, subject.password_hash):
                await self._record_failure(subject)
                if subject.is_locked:
                    self._state = AuthState.LOCKED
                return Failure(
                    error=AuthenticationError(
                        code=ErrorCode.INVALID_CREDENTIALS,
                        message="Invalid password",
                        reason=AuthenticationFailureReason.BAD_PASSWORD,
                        details={
                            "failed_attempts": str(subject.failed_login_attempts)
                        },
                    )
                )

            # The counter resets only on reaching AUTHENTICATED.
            if not subject.mfa_enabled and subject.failed_login_attempts > 0:
                subject.reset_failed_attempts()
                await self._subject_repo.update(subject)

        self._state = (
            AuthState.AWAITING_SECOND_FACTOR
            if subject.mfa_enabled
            else AuthState.AUTHENTICATED
        )
        return Success(
            value=AuthenticationStep(state=self._state, subject_id=subject.id)
        )

    async def submit_second_factor(
        self, token: str
    ) -> Result[AuthenticationStep, DomainError]:
        """Second step: verify the one-time code.

        A wrong code counts toward the same lockout threshold as a wrong
        password. The flow stays in AWAITING_SECOND_FACTOR unless the
        failure locked the subject.

        Returns:
            Success(AuthenticationStep(AUTHENTICATED)), or Failure with
            AuthenticationError(bad_second_factor) / LockedAccountError.
        """
        if self._state is not AuthState.AWAITING_SECOND_FACTOR:
            return self._invalid_transition("submit_second_factor")
        subject_id = self._subject_id
        if subject_id is None:
            return self._invalid_transition("submit_second_factor")

        async with self._locks.hold(subject_id):
            subject = await self._subject_repo.find_by_id(subject_id)
            if subject is None:
                self._state = AuthState.AWAITING_CREDENTIALS
                self._subject_id = None
                return Failure(
                    error=AuthenticationError(
                        code=ErrorCode.UNKNOWN_USER,
                        message="User not found",
                        reason=AuthenticationFailureReason.UNKNOWN_USER,
                    )
                )

            # Another flow may have locked the subject since the first step.
            if subject.is_locked:
                self._state = AuthState.LOCKED
                return Failure(error=self._locked_error(subject))

            if not self._second_factor.verify(subject, token):
                await self._record_failure(subject)
                if subject.is_locked:
                    self._state = AuthState.LOCKED
                return Failure(
                    error=AuthenticationError(
                        code=ErrorCode.INVALID_SECOND_FACTOR,
                        message="Invalid MFA code",
                        reason=AuthenticationFailureReason.BAD_SECOND_FACTOR,
                        details={
                            "failed_attempts": str(subject.failed_login_attempts)
                        },
                    )
                )

            if subject.failed_login_attempts > 0:
                subject.reset_failed_attempts()
                await self._subject_repo.update(subject)

        self._state = AuthState.AUTHENTICATED
        return Success(
            value=AuthenticationStep(state=self._state, subject_id=subject_id)
        )

    async def _record_failure(self, subject: Subject) -> None:
        subject.record_failed_attempt(self._lockout_threshold)
        await self._subject_repo.update(subject)

    def _locked_error(self, subject: Subject) -> LockedAccountError:
        return LockedAccountError(
            code=ErrorCode.ACCOUNT_LOCKED,
            message="Account is locked. Contact Admin.",
            subject_id=subject.id,
        )

    def _invalid_transition(
        self, operation: str
    ) -> Result[AuthenticationStep, DomainError]:
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_STATE_TRANSITION,
                message=f"Cannot {operation} in state {self._state.value}",
                details={"state": self._state.value, "operation": operation},
            )
        )
