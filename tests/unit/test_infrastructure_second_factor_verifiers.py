"""Unit tests for second-factor verifiers."""

import pyotp
import pytest

from secureguard.infrastructure.security import StaticCodeVerifier, TotpVerifier
from tests.conftest import create_subject


@pytest.mark.unit
class TestStaticCodeVerifier:
    def test_accepts_default_code(self):
        assert StaticCodeVerifier().verify(create_subject(), "123456") is True

    @pytest.mark.parametrize("token", [" 123456", "123456\n", "123456 "])
    def test_surrounding_whitespace_rejected(self, token):
        assert StaticCodeVerifier().verify(create_subject(), token) is False

    @pytest.mark.parametrize("token", ["654321", "", "1234567", "１２３４５６"])
    def test_rejects_other_tokens(self, token):
        assert StaticCodeVerifier().verify(create_subject(), token) is False

    def test_custom_code(self):
        verifier = StaticCodeVerifier(code="999000")

        assert verifier.verify(create_subject(), "999000") is True
        assert verifier.verify(create_subject(), "123456") is False


@pytest.mark.unit
class TestTotpVerifier:
    def test_accepts_current_code(self):
        secret = TotpVerifier.generate_secret()
        subject = create_subject(otp_secret=secret)

        assert TotpVerifier().verify(subject, pyotp.TOTP(secret).now()) is True

    def test_rejects_wrong_code(self):
        secret = TotpVerifier.generate_secret()
        subject = create_subject(otp_secret=secret)
        wrong = str((int(pyotp.TOTP(secret).now()) + 500000) % 1000000).zfill(6)

        assert TotpVerifier(valid_window=0).verify(subject, wrong) is False

    def test_subject_without_secret_never_passes(self):
        assert TotpVerifier().verify(create_subject(), "123456") is False

    def test_provisioning_uri(self):
        subject = create_subject(username="alice", otp_secret=pyotp.random_base32())

        uri = TotpVerifier.provisioning_uri(subject, issuer="SecureGuard")

        assert uri.startswith("otpauth://totp/")
        assert "alice" in uri
        assert "issuer=SecureGuard" in uri

    def test_provisioning_uri_requires_secret(self):
        with pytest.raises(ValueError):
            TotpVerifier.provisioning_uri(create_subject(), issuer="SecureGuard")
