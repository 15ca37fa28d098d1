"""Resource access commands."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, kw_only=True)
class AccessResource:
    """Open a resource.

    Attributes:
        subject_id: Authenticated subject.
        resource_id: Resource to open.
        at: Request time (defaults to now); only the hour matters.
    """

    subject_id: str
    resource_id: str
    at: datetime | None = None


@dataclass(frozen=True, kw_only=True)
class ShareResource:
    """Grant another subject discretionary access.

    Attributes:
        actor_id: Owner of the resource, or an ADMIN.
        resource_id: Resource to share.
        target_subject_id: Subject receiving access.
    """

    actor_id: str
    resource_id: str
    target_subject_id: str
