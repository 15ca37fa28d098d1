"""Audit event handler.

Maps domain events to AuditAction / AuditStatus and appends an entry through
AuditProtocol. This is where "caller records the audit trail" happens: the
engine computes, the application publishes, this handler records.

A failed audit write is logged and does not propagate (the event bus is
fail-open).
"""

from typing import Any

from secureguard.core.enums import ErrorCode
from secureguard.core.result import Failure
from secureguard.domain.enums import AuditAction, AuditStatus
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
    SubjectLoginFailed,
    SubjectLoginSucceeded,
    SubjectProfileUpdated,
    SubjectRegistered,
    SubjectRegistrationFailed,
    SubjectUnlocked,
    SubjectUpdated,
)
from secureguard.domain.protocols.audit_protocol import AuditProtocol
from secureguard.domain.protocols.logger_protocol import LoggerProtocol


class AuditEventHandler:
    """Records audit entries for security-relevant events.

    Attributes:
        _audit: Audit trail adapter.
        _logger: Logger for audit write failures.
    """

    def __init__(self, audit: AuditProtocol, logger: LoggerProtocol) -> None:
        self._audit = audit
        self._logger = logger

    async def _record(self, **kwargs: Any) -> None:
        result = await self._audit.record(**kwargs)
        if isinstance(result, Failure):
            self._logger.error(
                "audit_record_failed",
                action=str(kwargs.get("action")),
                error_code=result.error.code.value,
                error_message=result.error.message,
            )

    async def handle_login_succeeded(self, event: SubjectLoginSucceeded) -> None:
        await self._record(
            action=AuditAction.LOGIN_SUCCESS,
            status=AuditStatus.SUCCESS,
            actor_id=event.subject_id,
            actor_name=event.username,
            details=f"User {event.username} logged in successfully",
            context={"second_factor_used": event.second_factor_used},
        )

    async def handle_login_failed(self, event: SubjectLoginFailed) -> None:
        if event.reason == ErrorCode.CAPTCHA_INCORRECT.value:
            return
        # Unknown users are an error condition, wrong secrets a denial.
        status = AuditStatus.ERROR if event.subject_id is None else AuditStatus.DENIED
        await self._record(
            action=AuditAction.LOGIN_ATTEMPT,
            status=status,
            actor_id=event.subject_id,
            actor_name=event.username,
            details=f"Login failed for {event.username}: {event.reason}",
            context={"reason": event.reason},
        )

    async def handle_second_factor_failed(self, event: SecondFactorFailed) -> None:
        await self._record(
            action=AuditAction.MFA_VERIFY_FAILED,
            status=AuditStatus.DENIED,
            actor_id=event.subject_id,
            actor_name=event.username,
            details=f"Invalid MFA for {event.username}",
            context={"reason": event.reason},
        )

    async def handle_subject_locked(self, event: SubjectLocked) -> None:
        await self._record(
            action=AuditAction.ACCOUNT_LOCKED,
            status=AuditStatus.DENIED,
            actor_id=event.subject_id,
            actor_name=event.username,
            details=f"Account locked after {event.failed_attempts} failed attempts",
            context={"failed_attempts": event.failed_attempts},
        )

    async def handle_subject_unlocked(self, event: SubjectUnlocked) -> None:
        await self._record(
            action=AuditAction.ACCOUNT_UNLOCKED,
            status=AuditStatus.SUCCESS,
            actor_id=event.unlocked_by,
            details=f"Admin unlocked subject {event.subject_id}",
            context={"subject_id": event.subject_id},
        )

    async def handle_subject_registered(self, event: SubjectRegistered) -> None:
        await self._record(
            action=AuditAction.USER_REGISTER,
            status=AuditStatus.SUCCESS,
            actor_id=event.subject_id,
            actor_name=event.username,
            details=f"New user registered: {event.username}",
            context={"role": event.role},
        )

    async def handle_subject_registration_failed(
        self, event: SubjectRegistrationFailed
    ) -> None:
        await self._record(
            action=AuditAction.USER_REGISTER,
            status=AuditStatus.DENIED,
            actor_name=event.username,
            details=f"Registration rejected for {event.username}: {event.reason}",
            context={"reason": event.reason},
        )

    async def handle_password_changed(self, event: PasswordChanged) -> None:
        await self._record(
            action=AuditAction.PASSWORD_CHANGE,
            status=AuditStatus.SUCCESS,
            actor_id=event.subject_id,
            details="User changed password",
        )

    async def handle_password_change_failed(self, event: PasswordChangeFailed) -> None:
        await self._record(
            action=AuditAction.PASSWORD_CHANGE,
            status=AuditStatus.DENIED,
            actor_id=event.subject_id,
            details=f"Password change rejected: {event.reason}",
            context={"reason": event.reason},
        )

    async def handle_subject_profile_updated(
        self, event: SubjectProfileUpdated
    ) -> None:
        await self._record(
            action=AuditAction.PROFILE_UPDATE,
            status=AuditStatus.SUCCESS,
            actor_id=event.subject_id,
            actor_name=event.username,
            details="User updated own profile",
            context=dict(event.changes),
        )

    async def handle_subject_updated(self, event: SubjectUpdated) -> None:
        await self._record(
            action=AuditAction.USER_ADMIN_UPDATE,
            status=AuditStatus.SUCCESS,
            actor_id=event.updated_by,
            details=f"Admin updated subject {event.subject_id}",
            context={"subject_id": event.subject_id, **event.changes},
        )

    async def handle_access_granted(self, event: ResourceAccessGranted) -> None:
        await self._record(
            action=AuditAction.ACCESS_GRANTED,
            status=AuditStatus.SUCCESS,
            actor_id=event.subject_id,
            resource_id=event.resource_id,
            details="Access granted",
        )

    async def handle_access_denied(self, event: ResourceAccessDenied) -> None:
        await self._record(
            action=AuditAction.ACCESS_DENIED,
            status=AuditStatus.DENIED,
            actor_id=event.subject_id,
            resource_id=event.resource_id,
            details=event.reason,
            context={"model": event.model},
        )

    async def handle_resource_shared(self, event: ResourceShared) -> None:
        await self._record(
            action=AuditAction.DAC_SHARE,
            status=AuditStatus.SUCCESS,
            actor_id=event.shared_by,
            resource_id=event.resource_id,
            details=f"Resource shared with {event.shared_with}",
            context={"shared_with": event.shared_with},
        )

    async def handle_policy_config_changed(self, event: PolicyConfigChanged) -> None:
        await self._record(
            action=AuditAction.SYSTEM_CONFIG_CHANGE,
            status=AuditStatus.SUCCESS,
            actor_id=event.changed_by,
            details="Security policies updated",
            context=dict(event.settings),
        )

    async def handle_policy_config_change_denied(
        self, event: PolicyConfigChangeDenied
    ) -> None:
        await self._record(
            action=AuditAction.SYSTEM_CONFIG_CHANGE,
            status=AuditStatus.DENIED,
            actor_id=event.actor_id,
            details="Unauthorized attempt to change config",
        )
