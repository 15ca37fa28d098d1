"""Repository factories.

In-memory adapters, application-scoped so every handler sees the same
state. The policy configuration repository starts from
Settings.initial_policy_config().
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from secureguard.domain.protocols import (
        PolicyConfigRepository,
        ResourceRepository,
        SubjectRepository,
    )


@lru_cache()
def get_subject_repository() -> "SubjectRepository":
    from secureguard.infrastructure.persistence import InMemorySubjectRepository

    return InMemorySubjectRepository()


@lru_cache()
def get_resource_repository() -> "ResourceRepository":
    from secureguard.infrastructure.persistence import InMemoryResourceRepository

    return InMemoryResourceRepository()


@lru_cache()
def get_policy_config_repository() -> "PolicyConfigRepository":
    from secureguard.core.config import get_settings
    from secureguard.infrastructure.persistence import (
        InMemoryPolicyConfigRepository,
    )

    return InMemoryPolicyConfigRepository(
        initial=get_settings().initial_policy_config()
    )
