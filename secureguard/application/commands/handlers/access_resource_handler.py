"""Access resource handler.

Flow:
1. Load subject, resource and the active PolicyConfig
2. Evaluate (pure)
3. Emit ResourceAccessGranted or ResourceAccessDenied
4. Return Success(Decision) or Failure(AuthorizationError)
"""

from secureguard.application.commands.access_commands import AccessResource
from secureguard.core.enums import ErrorCode
from secureguard.core.errors import AuthorizationError, DomainError, NotFoundError
from secureguard.core.result import Failure, Result, Success
from secureguard.domain.events import ResourceAccessDenied, ResourceAccessGranted
from secureguard.domain.policy import PolicyEvaluator
from secureguard.domain.protocols import (
    EventBusProtocol,
    PolicyConfigRepository,
    ResourceRepository,
    SubjectRepository,
)
from secureguard.domain.value_objects import Decision


class AccessResourceHandler:
    """Decides one access request and reports it."""

    def __init__(
        self,
        subject_repo: SubjectRepository,
        resource_repo: ResourceRepository,
        config_repo: PolicyConfigRepository,
        evaluator: PolicyEvaluator,
        event_bus: EventBusProtocol,
    ) -> None:
        self._subject_repo = subject_repo
        self._resource_repo = resource_repo
        self._config_repo = config_repo
        self._evaluator = evaluator
        self._event_bus = event_bus

    async def handle(self, cmd: AccessResource) -> Result[Decision, DomainError]:
        """Evaluate cmd.subject_id against cmd.resource_id.

        Returns:
            Success(Decision) when allowed; Failure(AuthorizationError) with
            the denying model otherwise; Failure(NotFoundError) for unknown
            ids.
        """
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
        config = await self._config_repo.get()

        decision = self._evaluator.evaluate(subject, resource, config, at=cmd.at)

        if decision.allowed:
            await self._event_bus.publish(
                ResourceAccessGranted(subject_id=subject.id, resource_id=resource.id)
            )
            return Success(value=decision)

        model = decision.model.value if decision.model is not None else None
        await self._event_bus.publish(
            ResourceAccessDenied(
                subject_id=subject.id,
                resource_id=resource.id,
                model=model or "",
                reason=decision.reason,
            )
        )
        return Failure(
            error=AuthorizationError(
                code=ErrorCode.ACCESS_DENIED,
                message=decision.reason,
                model=model,
            )
        )
