"""Resource queries (read operations, no events)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, kw_only=True)
class ListAccessibleResources:
    """All resources with the verdict for one subject.

    Attributes:
        subject_id: Subject whose access is evaluated.
        only_allowed: Drop denied entries from the result.
        at: Evaluation time (defaults to now).
    """

    subject_id: str
    only_allowed: bool = False
    at: datetime | None = None
