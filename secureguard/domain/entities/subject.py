"""Subject domain entity (the user whose access is being decided).

Pure business logic, no framework dependencies.

Lockout:
    - failed_login_attempts counts consecutive failed password or second-factor
      attempts
    - is_locked becomes True once the counter reaches the lockout threshold
      (3 by default) and stays True until reset by a success or an
      administrative unlock; there is no time-based expiry
"""

from dataclasses import dataclass

from secureguard.domain.enums import Department, Role, SecurityLevel

DEFAULT_LOCKOUT_THRESHOLD = 3


@dataclass
class Subject:
    """Subject entity with lockout business rules.

    Mutated only through the methods below: the authentication state machine
    drives the lockout counter, administrative handlers drive role, department,
    clearance and password changes.

    Business Rules:
        - is_locked is True exactly when failed_login_attempts >= lockout_threshold
        - Lock is monotone until reset_failed_attempts() or unlock()
        - Role, department and clearance must be known enum values

    Attributes:
        id: Unique subject identifier.
        username: Unique login name.
        role: RBAC role.
        department: ABAC department.
        clearance_level: MAC clearance.
        password_hash: Credential digest (never plaintext).
        mfa_enabled: Whether login requires a second factor.
        is_locked: Lock flag derived from failed_login_attempts.
        failed_login_attempts: Consecutive failures since the last success.
        full_name: Display name.
        email: Contact address.
        otp_secret: Base32 TOTP secret (only used by the TOTP verifier).
        lockout_threshold: Threshold the lock flag is checked against; set by
            the last record_failed_attempt() call.

    Example:
        >>> subject = Subject(
        ...     id="u3",
        ...     username="bob_staff",
        ...     role=Role.STAFF,
        ...     department=Department.FINANCE,
        ...     clearance_level=SecurityLevel.INTERNAL,
        ...     password_hash="9f86d0...",
        ... )
        >>> subject.record_failed_attempt()
        False
        >>> subject.failed_login_attempts
        1
    """

    id: str
    username: str
    role: Role
    department: Department
    clearance_level: SecurityLevel
    password_hash: str
    mfa_enabled: bool = False
    is_locked: bool = False
    failed_login_attempts: int = 0
    full_name: str = ""
    email: str = ""
    otp_secret: str | None = None
    lockout_threshold: int = DEFAULT_LOCKOUT_THRESHOLD

    def __post_init__(self) -> None:
        """Coerce enum fields and reject impossible values.

        Raises:
            ValueError: Unknown role/department/level, negative counter,
                threshold below 1, or a lock flag that disagrees with the
                counter.
        """
        self.role = Role(self.role)
        self.department = Department(self.department)
        self.clearance_level = SecurityLevel(self.clearance_level)
        if self.failed_login_attempts < 0:
            raise ValueError("failed_login_attempts must be >= 0")
        if self.lockout_threshold < 1:
            raise ValueError("lockout_threshold must be >= 1")
        if self.is_locked != (self.failed_login_attempts >= self.lockout_threshold):
            raise ValueError(
                f"is_locked={self.is_locked} contradicts "
                f"failed_login_attempts={self.failed_login_attempts} "
                f"(threshold {self.lockout_threshold})"
            )

    @property
    def is_admin(self) -> bool:
        """True when the subject holds the ADMIN role."""
        return self.role is Role.ADMIN

    def record_failed_attempt(self, threshold: int | None = None) -> bool:
        """Increment the failure counter and lock at the threshold.

        Args:
            threshold: Number of consecutive failures that locks the account.
                Defaults to the stored lockout_threshold.

        Returns:
            bool: True if this call transitioned the subject into the locked
            state, False otherwise.
        """
        if threshold is not None and threshold < 1:
            raise ValueError("threshold must be >= 1")
        # A locked subject keeps the threshold it was locked under.
        if threshold is not None and not self.is_locked:
            self.lockout_threshold = threshold
        was_locked = self.is_locked
        self.failed_login_attempts += 1
        if self.failed_login_attempts >= self.lockout_threshold:
            self.is_locked = True
        return self.is_locked and not was_locked

    def reset_failed_attempts(self) -> None:
        """Clear the failure counter after a successful authentication step."""
        self.failed_login_attempts = 0
        self.is_locked = False

    def unlock(self) -> None:
        """Administrative unlock (counter to 0, lock cleared)."""
        self.reset_failed_attempts()

    def change_password_hash(self, password_hash: str) -> None:
        """Replace the stored credential digest."""
        self.password_hash = password_hash

    def apply_admin_update(
        self,
        *,
        role: Role | None = None,
        department: Department | None = None,
        clearance_level: SecurityLevel | None = None,
    ) -> None:
        """Administrative update of the access-relevant attributes.

        Fields left as None are unchanged.

        Raises:
            ValueError: If a value is not a known enum member.
        """
        if role is not None:
            self.role = Role(role)
        if department is not None:
            self.department = Department(department)
        if clearance_level is not None:
            self.clearance_level = SecurityLevel(clearance_level)

    def update_profile(
        self,
        *,
        full_name: str | None = None,
        email: str | None = None,
        mfa_enabled: bool | None = None,
    ) -> dict[str, str]:
        """Self-service update of the non-security attributes.

        Fields left as None are unchanged.

        Returns:
            dict[str, str]: Field name -> new value for the fields that
            actually changed.
        """
        changes: dict[str, str] = {}
        if full_name is not None and full_name != self.full_name:
            self.full_name = full_name
            changes["full_name"] = full_name
        if email is not None and email != self.email:
            self.email = email
            changes["email"] = email
        if mfa_enabled is not None and mfa_enabled != self.mfa_enabled:
            self.mfa_enabled = mfa_enabled
            changes["mfa_enabled"] = str(mfa_enabled)
        return changes
