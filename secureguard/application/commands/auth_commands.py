"""Authentication and account commands (write operations).

Commands are immutable (frozen=True) keyword-only data containers.
Handlers hold the logic and return Result types.
"""

from dataclasses import dataclass

from secureguard.domain.enums import Role
from secureguard.domain.value_objects import CaptchaChallenge


@dataclass(frozen=True, kw_only=True)
class SubmitCredentials:
    """First login step.

    Attributes:
        username: Login name.
        password: Plain text password (never logged).
        captcha: Challenge shown to the user.
        captcha_answer: What the user typed.
    """

    username: str
    password: str
    captcha: CaptchaChallenge
    captcha_answer: str | int | None


@dataclass(frozen=True, kw_only=True)
class SubmitSecondFactor:
    """Second login step."""

    token: str


@dataclass(frozen=True, kw_only=True)
class UnlockSubject:
    """Administrative unlock of a locked subject.

    Attributes:
        actor_id: Subject performing the unlock (must be ADMIN).
        subject_id: Subject to unlock.
    """

    actor_id: str
    subject_id: str


@dataclass(frozen=True, kw_only=True)
class RegisterSubject:
    """Self-registration.

    Attributes:
        username: Desired login name (unique).
        password: Plain text password, checked against PasswordPolicy.
        full_name: Display name.
        email: Contact address.
        role: Requested role.
        department: Home department.
        role_access_key: Key proving entitlement to a privileged role.
        captcha: Challenge shown to the user.
        captcha_answer: What the user typed.

    Example:
        >>> command = RegisterSubject(
        ...     username="dave",
        ...     password="Str0ng!pass",
        ...     full_name="Dave Doe",
        ...     email="dave@example.com",
        ...     role=Role.STAFF,
        ...     department="SALES",
        ...     captcha=CaptchaChallenge(question="2 + 3", answer=5),
        ...     captcha_answer="5",
        ... )
        >>> result = await handler.handle(command)
    """

    username: str
    password: str
    full_name: str
    email: str
    role: Role | str
    department: str
    captcha: CaptchaChallenge
    captcha_answer: str | int | None
    role_access_key: str | None = None


@dataclass(frozen=True, kw_only=True)
class ChangePassword:
    """Password change by the subject itself."""

    subject_id: str
    current_password: str
    new_password: str
    confirm_password: str


@dataclass(frozen=True, kw_only=True)
class UpdateProfile:
    """Self-service profile change.

    Fields left as None are unchanged. Turning mfa_enabled off makes later
    logins finish after the password step.
    """

    subject_id: str
    full_name: str | None = None
    email: str | None = None
    mfa_enabled: bool | None = None
