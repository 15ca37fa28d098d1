"""Login handler.

Wraps one AuthenticationStateMachine and publishes the domain events for
each step. The machine decides; this handler reports.

Flow (credentials step):
1. Emit SubjectLoginAttempted
2. Delegate to the state machine
3. Emit SubjectLoginSucceeded (no second factor) or SubjectLoginFailed
4. Emit SubjectLocked when the failure locked the subject

Flow (second-factor step):
1. Delegate to the state machine
2. Emit SubjectLoginSucceeded or SecondFactorFailed (+ SubjectLocked)
"""

from secureguard.application.commands.auth_commands import (
    SubmitCredentials,
    SubmitSecondFactor,
)
from secureguard.application.dtos import AuthenticationStep
from secureguard.application.services import AuthenticationStateMachine
from secureguard.core.enums import ErrorCode
from secureguard.core.errors import AuthenticationError, DomainError
from secureguard.core.result import Failure, Result, Success
from secureguard.domain.enums import AuthState
from secureguard.domain.events import (
    SecondFactorFailed,
    SubjectLocked,
    SubjectLoginAttempted,
    SubjectLoginFailed,
    SubjectLoginSucceeded,
)
from secureguard.domain.protocols import EventBusProtocol


class LoginHandler:
    """Event-publishing facade over one login flow.

    Create one per flow, like the state machine it wraps.
    """

    def __init__(
        self,
        machine: AuthenticationStateMachine,
        event_bus: EventBusProtocol,
    ) -> None:
        self._machine = machine
        self._event_bus = event_bus
        self._username: str | None = None

    @property
    def state(self) -> AuthState:
        return self._machine.state

    @property
    def subject_id(self) -> str | None:
        return self._machine.subject_id

    async def handle_credentials(
        self, cmd: SubmitCredentials
    ) -> Result[AuthenticationStep, DomainError]:
        """Submit username, password and captcha answer.

        Returns:
            Result from AuthenticationStateMachine.submit_credentials.

        Side Effects:
            - Publishes SubjectLoginAttempted (always).
            - Publishes SubjectLoginSucceeded when no second factor is needed.
            - Publishes SubjectLoginFailed on failure, plus SubjectLocked when
              this attempt locked the subject.
        """
        await self._event_bus.publish(SubjectLoginAttempted(username=cmd.username))

        result = await self._machine.submit_credentials(
            cmd.username, cmd.password, cmd.captcha, cmd.captcha_answer
        )

        match result:
            case Success(value=step):
                self._username = cmd.username
                if step.is_authenticated:
                    await self._event_bus.publish(
                        SubjectLoginSucceeded(
                            subject_id=step.subject_id,
                            username=cmd.username,
                            second_factor_used=False,
                        )
                    )
            case Failure(error=error):
                await self._event_bus.publish(
                    SubjectLoginFailed(
                        username=cmd.username,
                        reason=error.code.value,
                        subject_id=self._machine.subject_id,
                    )
                )
                await self._publish_if_newly_locked(error, cmd.username)

        return result

    async def handle_second_factor(
        self, cmd: SubmitSecondFactor
    ) -> Result[AuthenticationStep, DomainError]:
        """Submit the one-time code.

        Side Effects:
            - Publishes SubjectLoginSucceeded on success.
            - Publishes SecondFactorFailed on failure, plus SubjectLocked when
              this attempt locked the subject.
        """
        result = await self._machine.submit_second_factor(cmd.token)
        username = self._username or ""

        match result:
            case Success(value=step):
                await self._event_bus.publish(
                    SubjectLoginSucceeded(
                        subject_id=step.subject_id,
                        username=username,
                        second_factor_used=True,
                    )
                )
            case Failure(error=error) if self._machine.subject_id is not None:
                await self._event_bus.publish(
                    SecondFactorFailed(
                        subject_id=self._machine.subject_id,
                        username=username,
                        reason=error.code.value,
                    )
                )
                await self._publish_if_newly_locked(error, username)

        return result

    async def _publish_if_newly_locked(self, error: DomainError, username: str) -> None:
        # A wrong secret that ends in LOCKED means this attempt crossed the
        # threshold; LockedAccountError means it was locked already.
        if (
            isinstance(error, AuthenticationError)
            and error.code is not ErrorCode.UNKNOWN_USER
            and self._machine.state is AuthState.LOCKED
            and self._machine.subject_id is not None
        ):
            attempts = int((error.details or {}).get("failed_attempts", "0"))
            await self._event_bus.publish(
                SubjectLocked(
                    subject_id=self._machine.subject_id,
                    username=username,
                    failed_attempts=attempts,
                )
            )
