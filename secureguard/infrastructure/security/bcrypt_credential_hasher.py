"""Bcrypt credential hasher (adapter).

Implements CredentialHasherProtocol with bcrypt: random salt per digest,
adaptive cost factor, constant-time verification via bcrypt.checkpw.

Performance:
    - Cost factor 12 = ~250ms per hash (hash and verify)
    - Each +1 doubles computation time
"""

import bcrypt


class BcryptCredentialHasher:
    """Bcrypt credential hashing.

    Example:
        >>> hasher = BcryptCredentialHasher(cost_factor=12)
        >>> digest = hasher.hash("SecurePass123!")
        >>> digest != hasher.hash("SecurePass123!")  # different salts
        True
        >>> hasher.verify("SecurePass123!", digest)
        True
    """

    def __init__(self, cost_factor: int = 12) -> None:
        """Initialize bcrypt hasher.

        Args:
            cost_factor: Bcrypt rounds (10-20).

        Raises:
            ValueError: If cost_factor is outside 10-20.
        """
        if cost_factor < 10:
            msg = "Cost factor must be at least 10 for security"
            raise ValueError(msg)
        if cost_factor > 20:
            msg = "Cost factor above 20 is impractically slow"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    def hash(self, secret: str) -> str:
        """Hash secret with a fresh salt.

        Returns:
            bcrypt string ($2b$<cost>$<salt><hash>), 60 characters.
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        return bcrypt.hashpw(secret.encode("utf-8"), salt).decode("utf-8")

    def verify(self, secret: str, digest: str) -> bool:
        """Constant-time check; False for malformed digests."""
        try:
            return bcrypt.checkpw(secret.encode("utf-8"), digest.encode("utf-8"))
        except (ValueError, AttributeError):
            # Not a bcrypt digest
            return False
