"""Second-factor verification protocol.

Implementations:
    - StaticCodeVerifier: fixed demo code shared by every subject
    - TotpVerifier: RFC 6238 codes from the subject's otp_secret
"""

from typing import Protocol

from secureguard.domain.entities import Subject


class SecondFactorVerifierProtocol(Protocol):
    """Checks a second-factor token for a subject."""

    def verify(self, subject: Subject, token: str) -> bool:
        """Return True if token is valid for subject right now."""
        ...
