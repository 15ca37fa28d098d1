"""Domain entities."""

from secureguard.domain.entities.resource import Resource
from secureguard.domain.entities.subject import DEFAULT_LOCKOUT_THRESHOLD, Subject

__all__ = ["DEFAULT_LOCKOUT_THRESHOLD", "Resource", "Subject"]
