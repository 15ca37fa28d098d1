"""Security adapters: credential hashers and second-factor verifiers."""

from secureguard.infrastructure.security.bcrypt_credential_hasher import (
    BcryptCredentialHasher,
)
from secureguard.infrastructure.security.second_factor_verifiers import (
    StaticCodeVerifier,
    TotpVerifier,
)
from secureguard.infrastructure.security.sha256_credential_hasher import (
    Sha256CredentialHasher,
)

__all__ = [
    "BcryptCredentialHasher",
    "Sha256CredentialHasher",
    "StaticCodeVerifier",
    "TotpVerifier",
]
