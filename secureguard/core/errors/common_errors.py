"""Common error classes shared by all layers.

Error Types:
- ValidationError: Incorrect or malformed auxiliary input (captcha, weak password)
- NotFoundError: Subject or resource not found
- ConflictError: Duplicate username and similar conflicts
- AuthenticationError: Bad credential or second factor
- AuthorizationError: One access model denied the request

Usage:
    from secureguard.core.errors import ValidationError
    from secureguard.core.enums import ErrorCode
    from secureguard.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.CAPTCHA_INCORRECT,
        message="Incorrect captcha",
        field="captcha_answer",
    ))
"""

from dataclasses import dataclass

from secureguard.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Name of the input that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Entity not found.

    Attributes:
        resource_type: Kind of entity (Subject, Resource).
        resource_id: Identifier that was looked up.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Entity conflict (duplicate key, state conflict).

    Attributes:
        resource_type: Kind of entity in conflict.
        conflicting_field: Field carrying the duplicate value.
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure.

    Attributes:
        reason: Short failure reason (unknown_user, bad_password,
            bad_second_factor).
    """

    reason: str


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Access denied by a single access model.

    Attributes:
        model: Name of the access model that denied (MAC, ABAC, RBAC, RuBAC, DAC).
    """

    model: str | None = None
