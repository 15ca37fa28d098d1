"""Access decision, sharing and policy configuration events."""

from dataclasses import dataclass

from secureguard.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True)
class ResourceAccessGranted(DomainEvent):
    """Evaluator allowed access."""

    subject_id: str
    resource_id: str


@dataclass(frozen=True, kw_only=True)
class ResourceAccessDenied(DomainEvent):
    """Evaluator denied access.

    Attributes:
        model: Denying model tag (MAC, ABAC, RBAC, RuBAC, DAC).
        reason: Decision reason.
    """

    subject_id: str
    resource_id: str
    model: str
    reason: str


@dataclass(frozen=True, kw_only=True)
class ResourceShared(DomainEvent):
    """Resource shared with a subject (DAC)."""

    resource_id: str
    shared_with: str
    shared_by: str


@dataclass(frozen=True, kw_only=True)
class PolicyConfigChanged(DomainEvent):
    """Administrator replaced the active policy configuration.

    Attributes:
        settings: Field name -> new value rendered as text.
    """

    changed_by: str
    settings: dict[str, str]


@dataclass(frozen=True, kw_only=True)
class PolicyConfigChangeDenied(DomainEvent):
    """Non-admin attempted to change the policy configuration."""

    actor_id: str
