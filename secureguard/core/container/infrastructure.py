"""Infrastructure dependency factories.

Application-scoped singletons:
- Logging (structlog console adapter)
- Credential hashing (sha256 / bcrypt)
- Second factor (static code / TOTP)
- Per-subject locks
- Audit trail (in-memory)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from secureguard.core.config import get_settings

if TYPE_CHECKING:
    from secureguard.domain.protocols import (
        AuditProtocol,
        CredentialHasherProtocol,
        LoggerProtocol,
        SecondFactorVerifierProtocol,
        SubjectLockProtocol,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Get logger singleton (app-scoped).

    JSON rendering when ``log_json`` is set, coloured console otherwise.
    """
    from secureguard.infrastructure.logging import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(use_json=settings.log_json, level=settings.log_level)


@lru_cache()
def get_credential_hasher() -> "CredentialHasherProtocol":
    """Get credential hasher singleton (app-scoped).

    Returns:
        Sha256CredentialHasher (default) or BcryptCredentialHasher, chosen by
        ``credential_hasher``.
    """
    settings = get_settings()
    if settings.credential_hasher == "bcrypt":
        from secureguard.infrastructure.security import BcryptCredentialHasher

        return BcryptCredentialHasher(cost_factor=settings.bcrypt_rounds)

    from secureguard.infrastructure.security import Sha256CredentialHasher

    return Sha256CredentialHasher(salt=settings.credential_salt)


@lru_cache()
def get_second_factor_verifier() -> "SecondFactorVerifierProtocol":
    """Get second-factor verifier singleton (app-scoped).

    Returns:
        StaticCodeVerifier (default) or TotpVerifier, chosen by
        ``second_factor_backend``.
    """
    settings = get_settings()
    if settings.second_factor_backend == "totp":
        from secureguard.infrastructure.security import TotpVerifier

        return TotpVerifier(valid_window=settings.totp_valid_window)

    from secureguard.infrastructure.security import StaticCodeVerifier

    return StaticCodeVerifier(code=settings.static_second_factor_code)


@lru_cache()
def get_subject_locks() -> "SubjectLockProtocol":
    """Get per-subject lock registry singleton (app-scoped)."""
    from secureguard.infrastructure.concurrency import SubjectLockRegistry

    return SubjectLockRegistry()


@lru_cache()
def get_audit() -> "AuditProtocol":
    """Get audit trail singleton (app-scoped)."""
    from secureguard.infrastructure.audit import InMemoryAuditAdapter

    return InMemoryAuditAdapter()
