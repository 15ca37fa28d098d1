"""Credential hashing protocol.

Implementations:
    - Sha256CredentialHasher: SHA-256 over secret + system-wide salt
      (deterministic digests, plain equality check)
    - BcryptCredentialHasher: bcrypt with a random salt per digest

Usage:
    digest = hasher.hash("SecurePass123!")
    ok = hasher.verify("SecurePass123!", digest)
"""

from typing import Protocol


class CredentialHasherProtocol(Protocol):
    """One-way credential digest and verification."""

    def hash(self, secret: str) -> str:
        """Return the digest of a plaintext secret.

        Note:
            - NEVER store plaintext secrets
            - Digest is one-way
        """
        ...

    def verify(self, secret: str, digest: str) -> bool:
        """Check a plaintext secret against a stored digest.

        Returns:
            True on match, False otherwise (including malformed digests).
        """
        ...
