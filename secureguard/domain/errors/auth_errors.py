"""Lockout and privilege errors.

Returned inside Failure values by the authentication state machine and the
administrative handlers. Never raised.
"""

from dataclasses import dataclass

from secureguard.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class LockedAccountError(DomainError):
    """Subject is past the failure threshold.

    Returned before the password is checked, so a locked account never
    reveals whether a password was correct.

    Attributes:
        subject_id: The locked subject.
    """

    subject_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class PrivilegeError(DomainError):
    """Caller lacks the role an administrative operation requires.

    Attributes:
        actor_id: Subject that attempted the operation.
        required_role: Role that would have been accepted.
    """

    actor_id: str
    required_role: str
