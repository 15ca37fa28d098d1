"""Domain protocols (ports).

Infrastructure adapters implement these protocols structurally, without
inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.

Usage:
    from secureguard.domain.protocols import SubjectRepository, CredentialHasherProtocol
"""

from secureguard.domain.protocols.audit_protocol import AuditEntry, AuditProtocol
from secureguard.domain.protocols.credential_hasher_protocol import (
    CredentialHasherProtocol,
)
from secureguard.domain.protocols.event_bus_protocol import (
    EventBusProtocol,
    EventHandler,
)
from secureguard.domain.protocols.logger_protocol import LoggerProtocol
from secureguard.domain.protocols.policy_config_repository import (
    PolicyConfigRepository,
)
from secureguard.domain.protocols.resource_repository import ResourceRepository
from secureguard.domain.protocols.second_factor_protocol import (
    SecondFactorVerifierProtocol,
)
from secureguard.domain.protocols.subject_lock_protocol import SubjectLockProtocol
from secureguard.domain.protocols.subject_repository import SubjectRepository

__all__ = [
    "AuditEntry",
    "AuditProtocol",
    "CredentialHasherProtocol",
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
    "PolicyConfigRepository",
    "ResourceRepository",
    "SecondFactorVerifierProtocol",
    "SubjectLockProtocol",
    "SubjectRepository",
]
