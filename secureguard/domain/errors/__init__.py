"""Domain-specific error values."""

from secureguard.domain.errors.auth_errors import LockedAccountError, PrivilegeError

__all__ = ["LockedAccountError", "PrivilegeError"]
