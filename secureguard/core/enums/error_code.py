"""Machine-readable error codes.

Codes follow ENTITY_ACTION_REASON naming and travel inside DomainError
values returned through Result types.

Categories:
- Validation errors (INVALID_*, *_TOO_WEAK, CAPTCHA_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS)
- Authentication errors (UNKNOWN_USER, INVALID_CREDENTIALS, INVALID_SECOND_FACTOR)
- Lockout / privilege / authorization errors
"""

from enum import Enum


class ErrorCode(Enum):
    """Error codes shared by every layer."""

    # Validation errors
    CAPTCHA_INCORRECT = "captcha_incorrect"
    PASSWORD_TOO_WEAK = "password_too_weak"
    PASSWORD_MISMATCH = "password_mismatch"
    INVALID_STATE_TRANSITION = "invalid_state_transition"
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    SUBJECT_NOT_FOUND = "subject_not_found"
    RESOURCE_NOT_FOUND = "resource_not_found"

    # Conflict errors
    USERNAME_ALREADY_EXISTS = "username_already_exists"
    RESOURCE_CONFLICT = "resource_conflict"

    # Authentication errors
    UNKNOWN_USER = "unknown_user"
    INVALID_CREDENTIALS = "invalid_credentials"
    INVALID_SECOND_FACTOR = "invalid_second_factor"

    # Lockout
    ACCOUNT_LOCKED = "account_locked"

    # Privilege and authorization errors
    PRIVILEGE_REQUIRED = "privilege_required"
    INVALID_ROLE_ACCESS_KEY = "invalid_role_access_key"
    ACCESS_DENIED = "access_denied"

    # Audit trail errors
    AUDIT_RECORD_FAILED = "audit_record_failed"
