"""Share resource handler (DAC grant).

Flow:
1. Load resource; actor must own it or be ADMIN
2. Target subject must exist
3. Owner / already shared: no-op success
4. Atomic add_share, emit ResourceShared
"""

from secureguard.application.commands.access_commands import ShareResource
from secureguard.core.enums import ErrorCode
from secureguard.core.errors import DomainError, NotFoundError
from secureguard.core.result import Failure, Result, Success
from secureguard.domain.entities import Resource
from secureguard.domain.enums import Role
from secureguard.domain.errors import PrivilegeError
from secureguard.domain.events import ResourceShared
from secureguard.domain.protocols import (
    EventBusProtocol,
    ResourceRepository,
    SubjectRepository,
)


class ShareResourceHandler:
    def __init__(
        self,
        subject_repo: SubjectRepository,
        resource_repo: ResourceRepository,
        event_bus: EventBusProtocol,
    ) -> None:
        self._subject_repo = subject_repo
        self._resource_repo = resource_repo
        self._event_bus = event_bus

    async def handle(self, cmd: ShareResource) -> Result[Resource, DomainError]:
        """Add cmd.target_subject_id to the resource's shared_with set.

        Returns:
            Success(Resource) with the resulting snapshot.
        """
        resource = await self._resource_repo.find_by_id(cmd.resource_id)
        if resource is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.RESOURCE_NOT_FOUND,
                    message="Resource not found",
                    resource_type="Resource",
                    resource_id=cmd.resource_id,
                )
            )

        actor = await self._subject_repo.find_by_id(cmd.actor_id)
        if actor is None or not (resource.is_owned_by(actor.id) or actor.is_admin):
            return Failure(
                error=PrivilegeError(
                    code=ErrorCode.PRIVILEGE_REQUIRED,
                    message="Only the owner or an ADMIN can share this resource",
                    actor_id=cmd.actor_id,
                    required_role=Role.ADMIN.value,
                )
            )

        target = await self._subject_repo.find_by_id(cmd.target_subject_id)
        if target is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.SUBJECT_NOT_FOUND,
                    message="Subject not found",
                    resource_type="Subject",
                    resource_id=cmd.target_subject_id,
                )
            )

        if resource.is_owned_by(target.id) or resource.is_shared_with(target.id):
            return Success(value=resource)

        updated = await self._resource_repo.add_share(resource.id, target.id)
        await self._event_bus.publish(
            ResourceShared(
                resource_id=resource.id,
                shared_with=target.id,
                shared_by=actor.id,
            )
        )
        return Success(value=updated)
