"""Password strength policy.

One composed rule: at least 8 characters, an ASCII lowercase letter, an
ASCII uppercase letter, an ASCII digit and a symbol from SYMBOLS. Letters
and digits outside ASCII count toward the length only. Stateless.
"""

import string

MIN_LENGTH = 8
SYMBOLS = "!@#$%^&*"


class PasswordPolicy:
    """Stateless password strength validator.

    Example:
        >>> PasswordPolicy().validate_strength("SecurePass123!") is None
        True
        >>> PasswordPolicy().validate_strength("weakpass1!")
        'Password must be 8+ chars, include lowercase, uppercase, number, and symbol (missing: uppercase letter).'
    """

    def __init__(self, min_length: int = MIN_LENGTH, symbols: str = SYMBOLS) -> None:
        self._min_length = min_length
        self._symbols = symbols

    def missing_requirements(self, password: str) -> list[str]:
        """List unmet requirements in a fixed order (empty when strong)."""
        missing = []
        if len(password) < self._min_length:
            missing.append(f"at least {self._min_length} characters")
        if not any(c in string.ascii_lowercase for c in password):
            missing.append("lowercase letter")
        if not any(c in string.ascii_uppercase for c in password):
            missing.append("uppercase letter")
        if not any(c in string.digits for c in password):
            missing.append("digit")
        if not any(c in self._symbols for c in password):
            missing.append(f"symbol from {self._symbols}")
        return missing

    def validate_strength(self, password: str) -> str | None:
        """Return a violation message, or None when the password is strong."""
        missing = self.missing_requirements(password)
        if not missing:
            return None
        return (
            f"Password must be {self._min_length}+ chars, include lowercase, "
            f"uppercase, number, and symbol (missing: {', '.join(missing)})."
        )


def validate_strength(password: str) -> str | None:
    """Module-level shortcut using the default policy."""
    return PasswordPolicy().validate_strength(password)
