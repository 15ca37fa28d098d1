"""Data transfer objects returned by handlers."""

from secureguard.application.dtos.access_dtos import ResourceAccessView
from secureguard.application.dtos.auth_dtos import AuthenticationStep

__all__ = ["AuthenticationStep", "ResourceAccessView"]
