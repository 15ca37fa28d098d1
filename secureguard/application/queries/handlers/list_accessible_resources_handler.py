"""List accessible resources handler.

Read-only: evaluates every resource for one subject with a single clock
reading. Publishes no events; opening a resource goes through
AccessResourceHandler.
"""

from secureguard.application.dtos import ResourceAccessView
from secureguard.application.queries.resource_queries import ListAccessibleResources
from secureguard.core.enums import ErrorCode
from secureguard.core.errors import DomainError, NotFoundError
from secureguard.core.result import Failure, Result, Success
from secureguard.domain.policy import PolicyEvaluator
from secureguard.domain.protocols import (
    PolicyConfigRepository,
    ResourceRepository,
    SubjectRepository,
)


class ListAccessibleResourcesHandler:
    def __init__(
        self,
        subject_repo: SubjectRepository,
        resource_repo: ResourceRepository,
        config_repo: PolicyConfigRepository,
        evaluator: PolicyEvaluator,
    ) -> None:
        self._subject_repo = subject_repo
        self._resource_repo = resource_repo
        self._config_repo = config_repo
        self._evaluator = evaluator

    async def handle(
        self, query: ListAccessibleResources
    ) -> Result[list[ResourceAccessView], DomainError]:
        """Return resources in repository order with their decisions."""
        subject = await self._subject_repo.find_by_id(query.subject_id)
        if subject is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.SUBJECT_NOT_FOUND,
                    message="Subject not found",
                    resource_type="Subject",
                    resource_id=query.subject_id,
                )
            )
        resources = await self._resource_repo.list_all()
        config = await self._config_repo.get()

        views = [
            ResourceAccessView(resource=resource, decision=decision)
            for resource, decision in self._evaluator.filter_accessible(
                subject, resources, config, at=query.at
            )
        ]
        if query.only_allowed:
            views = [view for view in views if view.allowed]
        return Success(value=views)
