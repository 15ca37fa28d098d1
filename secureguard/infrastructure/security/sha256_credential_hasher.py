"""SHA-256 credential hasher (adapter).

Implements CredentialHasherProtocol with a deterministic digest:
hex(SHA-256(secret + salt)), where salt is one system-wide constant.

Security:
    - Same secret always yields the same digest (static salt)
    - Verification is plain string equality, as the stored digests require
    - BcryptCredentialHasher is the per-digest-salt alternative; pick it with
      SECUREGUARD_CREDENTIAL_HASHER=bcrypt
"""

import hashlib

DEFAULT_SALT = "salt"


class Sha256CredentialHasher:
    """Deterministic salted SHA-256 digest.

    Example:
        >>> hasher = Sha256CredentialHasher()
        >>> hasher.hash("admin123") == hasher.hash("admin123")
        True
        >>> len(hasher.hash("admin123"))
        64
    """

    def __init__(self, salt: str = DEFAULT_SALT) -> None:
        """Initialize hasher.

        Args:
            salt: System-wide constant appended to every secret.
        """
        self._salt = salt

    def hash(self, secret: str) -> str:
        """Return lowercase hex SHA-256 of secret + salt."""
        return hashlib.sha256((secret + self._salt).encode("utf-8")).hexdigest()

    def verify(self, secret: str, digest: str) -> bool:
        """Digest equality."""
        return self.hash(secret) == digest
