"""Second-factor verifiers (adapters).

StaticCodeVerifier reproduces the fixed demo code: every subject accepts the
same token. TotpVerifier checks RFC 6238 codes generated from the subject's
base32 otp_secret with pyotp.
"""

import hmac

import pyotp

from secureguard.domain.entities import Subject

DEFAULT_STATIC_CODE = "123456"


class StaticCodeVerifier:
    """Fixed-value second factor."""

    def __init__(self, code: str = DEFAULT_STATIC_CODE) -> None:
        self._code = code

    def verify(self, subject: Subject, token: str) -> bool:
        """True only if token equals the configured code exactly."""
        return hmac.compare_digest(token.encode("utf-8"), self._code.encode("utf-8"))


class TotpVerifier:
    """Time-based one-time codes.

    Subjects without an otp_secret never pass.

    Args:
        valid_window: Accepted clock drift, in 30-second steps on each side.
    """

    def __init__(self, valid_window: int = 1) -> None:
        self._valid_window = valid_window

    def verify(self, subject: Subject, token: str) -> bool:
        """Check token against the subject's current TOTP code."""
        if not subject.otp_secret:
            return False
        totp = pyotp.TOTP(subject.otp_secret)
        return totp.verify(token.strip(), valid_window=self._valid_window)

    @staticmethod
    def generate_secret() -> str:
        """New random base32 secret for enrolling a subject."""
        return pyotp.random_base32()

    @staticmethod
    def provisioning_uri(subject: Subject, issuer: str) -> str:
        """otpauth:// URI for authenticator apps."""
        if not subject.otp_secret:
            raise ValueError(f"Subject {subject.id} has no otp_secret")
        return pyotp.TOTP(subject.otp_secret).provisioning_uri(
            name=subject.username, issuer_name=issuer
        )
