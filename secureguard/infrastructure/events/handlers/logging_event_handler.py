"""Logging event handler.

Structured log line for every registered domain event.

Log Levels:
    - INFO: attempts, successes, grants, administrative changes
    - WARNING: failures, denials, lockouts
"""

from secureguard.domain.events import (
    PasswordChanged,
    PasswordChangeFailed,
    PolicyConfigChangeDenied,
    PolicyConfigChanged,
    ResourceAccessDenied,
    ResourceAccessGranted,
    ResourceShared,
    SecondFactorFailed,
    SubjectLocked,
    SubjectLoginAttempted,
    SubjectLoginFailed,
    SubjectLoginSucceeded,
    SubjectProfileUpdated,
    SubjectRegistered,
    SubjectRegistrationFailed,
    SubjectUnlocked,
    SubjectUpdated,
)
from secureguard.domain.protocols.logger_protocol import LoggerProtocol


class LoggingEventHandler:
    """Logs domain events with structured fields (event_id, ids, reasons)."""

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    async def handle_login_attempted(self, event: SubjectLoginAttempted) -> None:
        self._logger.info(
            "login_attempted", event_id=str(event.event_id), username=event.username
        )

    async def handle_login_succeeded(self, event: SubjectLoginSucceeded) -> None:
        self._logger.info(
            "login_succeeded",
            event_id=str(event.event_id),
            subject_id=event.subject_id,
            username=event.username,
            second_factor_used=event.second_factor_used,
        )

    async def handle_login_failed(self, event: SubjectLoginFailed) -> None:
        self._logger.warning(
            "login_failed",
            event_id=str(event.event_id),
            username=event.username,
            subject_id=event.subject_id,
            reason=event.reason,
        )

    async def handle_second_factor_failed(self, event: SecondFactorFailed) -> None:
        self._logger.warning(
            "second_factor_failed",
            event_id=str(event.event_id),
            subject_id=event.subject_id,
            username=event.username,
            reason=event.reason,
        )

    async def handle_subject_locked(self, event: SubjectLocked) -> None:
        self._logger.warning(
            "subject_locked",
            event_id=str(event.event_id),
            subject_id=event.subject_id,
            username=event.username,
            failed_attempts=event.failed_attempts,
        )

    async def handle_subject_unlocked(self, event: SubjectUnlocked) -> None:
        self._logger.info(
            "subject_unlocked",
            event_id=str(event.event_id),
            subject_id=event.subject_id,
            unlocked_by=event.unlocked_by,
        )

    async def handle_subject_registered(self, event: SubjectRegistered) -> None:
        self._logger.info(
            "subject_registered",
            event_id=str(event.event_id),
            subject_id=event.subject_id,
            username=event.username,
            role=event.role,
        )

    async def handle_subject_registration_failed(
        self, event: SubjectRegistrationFailed
    ) -> None:
        self._logger.warning(
            "subject_registration_failed",
            event_id=str(event.event_id),
            username=event.username,
            reason=event.reason,
        )

    async def handle_password_changed(self, event: PasswordChanged) -> None:
        self._logger.info(
            "password_changed", event_id=str(event.event_id), subject_id=event.subject_id
        )

    async def handle_password_change_failed(self, event: PasswordChangeFailed) -> None:
        self._logger.warning(
            "password_change_failed",
            event_id=str(event.event_id),
            subject_id=event.subject_id,
            reason=event.reason,
        )

    async def handle_subject_profile_updated(
        self, event: SubjectProfileUpdated
    ) -> None:
        self._logger.info(
            "subject_profile_updated",
            event_id=str(event.event_id),
            subject_id=event.subject_id,
            username=event.username,
            changed_fields=sorted(event.changes),
        )

    async def handle_subject_updated(self, event: SubjectUpdated) -> None:
        self._logger.info(
            "subject_updated",
            event_id=str(event.event_id),
            subject_id=event.subject_id,
            updated_by=event.updated_by,
            **event.changes,
        )

    async def handle_access_granted(self, event: ResourceAccessGranted) -> None:
        self._logger.info(
            "access_granted",
            event_id=str(event.event_id),
            subject_id=event.subject_id,
            resource_id=event.resource_id,
        )

    async def handle_access_denied(self, event: ResourceAccessDenied) -> None:
        self._logger.warning(
            "access_denied",
            event_id=str(event.event_id),
            subject_id=event.subject_id,
            resource_id=event.resource_id,
            model=event.model,
            reason=event.reason,
        )

    async def handle_resource_shared(self, event: ResourceShared) -> None:
        self._logger.info(
            "resource_shared",
            event_id=str(event.event_id),
            resource_id=event.resource_id,
            shared_with=event.shared_with,
            shared_by=event.shared_by,
        )

    async def handle_policy_config_changed(self, event: PolicyConfigChanged) -> None:
        self._logger.info(
            "policy_config_changed",
            event_id=str(event.event_id),
            changed_by=event.changed_by,
            **event.settings,
        )

    async def handle_policy_config_change_denied(
        self, event: PolicyConfigChangeDenied
    ) -> None:
        self._logger.warning(
            "policy_config_change_denied",
            event_id=str(event.event_id),
            actor_id=event.actor_id,
        )
