"""Update policy configuration handler.

ADMIN only. The new PolicyConfig is built with with_changes() (validated,
immutable) and swapped in as a whole, so an evaluation in flight keeps the
snapshot it already read.
"""

from secureguard.application.commands.admin_commands import UpdatePolicyConfig
from secureguard.core.enums import ErrorCode
from secureguard.core.errors import DomainError, ValidationError
from secureguard.core.result import Failure, Result, Success
from secureguard.domain.enums import Role
from secureguard.domain.errors import PrivilegeError
from secureguard.domain.events import PolicyConfigChangeDenied, PolicyConfigChanged
from secureguard.domain.protocols import (
    EventBusProtocol,
    PolicyConfigRepository,
    SubjectRepository,
)
from secureguard.domain.value_objects import PolicyConfig


class UpdatePolicyConfigHandler:
    def __init__(
        self,
        subject_repo: SubjectRepository,
        config_repo: PolicyConfigRepository,
        event_bus: EventBusProtocol,
    ) -> None:
        self._subject_repo = subject_repo
        self._config_repo = config_repo
        self._event_bus = event_bus

    async def handle(
        self, cmd: UpdatePolicyConfig
    ) -> Result[PolicyConfig, DomainError]:
        actor = await self._subject_repo.find_by_id(cmd.actor_id)
        if actor is None or not actor.is_admin:
            await self._event_bus.publish(
                PolicyConfigChangeDenied(actor_id=cmd.actor_id)
            )
            return Failure(
                error=PrivilegeError(
                    code=ErrorCode.PRIVILEGE_REQUIRED,
                    message="Only ADMIN can change security policies",
                    actor_id=cmd.actor_id,
                    required_role=Role.ADMIN.value,
                )
            )

        current = await self._config_repo.get()
        changes = cmd.changes()
        try:
            updated = current.with_changes(**changes)
        except ValueError as exc:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED, message=str(exc)
                )
            )

        await self._config_repo.set(updated)
        await self._event_bus.publish(
            PolicyConfigChanged(
                changed_by=actor.id,
                settings={name: str(value) for name, value in changes.items()},
            )
        )
        return Success(value=updated)
