"""Access DTOs."""

from dataclasses import dataclass

from secureguard.domain.entities import Resource
from secureguard.domain.value_objects import Decision


@dataclass(frozen=True, kw_only=True)
class ResourceAccessView:
    """A resource together with the verdict for one subject.

    Denied entries keep their reason so a listing can explain it.
    """

    resource: Resource
    decision: Decision

    @property
    def allowed(self) -> bool:
        return self.decision.allowed
