"""In-memory repository adapters."""

from secureguard.infrastructure.persistence.in_memory_policy_config_repository import (
    InMemoryPolicyConfigRepository,
)
from secureguard.infrastructure.persistence.in_memory_resource_repository import (
    InMemoryResourceRepository,
)
from secureguard.infrastructure.persistence.in_memory_subject_repository import (
    InMemorySubjectRepository,
)

__all__ = [
    "InMemoryPolicyConfigRepository",
    "InMemoryResourceRepository",
    "InMemorySubjectRepository",
]
