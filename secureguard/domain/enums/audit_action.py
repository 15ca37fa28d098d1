"""Audit action types.

Actions recorded by the audit event handler after the engine has produced
a result. The engine itself never records audit entries.

Categories:
    - Authentication: LOGIN_*, MFA_*, ACCOUNT_*
    - Authorization: ACCESS_*, DAC_SHARE
    - Account: USER_REGISTER, PROFILE_UPDATE, PASSWORD_CHANGE
    - Administrative: USER_ADMIN_UPDATE, SYSTEM_CONFIG_CHANGE
"""

from enum import Enum


class AuditAction(str, Enum):
    """Audit action types.

    String Enum:
        Inherits from str for easy serialization.
    """

    # Authentication
    LOGIN_ATTEMPT = "login_attempt"
    LOGIN_SUCCESS = "login_success"
    MFA_VERIFY_FAILED = "mfa_verify_failed"
    ACCOUNT_LOCKED = "account_locked"
    ACCOUNT_UNLOCKED = "account_unlocked"

    # Authorization
    ACCESS_GRANTED = "access_granted"
    ACCESS_DENIED = "access_denied"
    DAC_SHARE = "dac_share"

    # Administrative
    USER_REGISTER = "user_register"
    PROFILE_UPDATE = "profile_update"
    PASSWORD_CHANGE = "password_change"
    USER_ADMIN_UPDATE = "user_admin_update"
    SYSTEM_CONFIG_CHANGE = "system_config_change"


class AuditStatus(str, Enum):
    """Outcome recorded with each audit entry."""

    SUCCESS = "success"
    DENIED = "denied"
    ERROR = "error"
