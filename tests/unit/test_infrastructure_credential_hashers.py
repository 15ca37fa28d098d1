"""Unit tests for the credential hashers.

Tests cover:
- Sha256CredentialHasher: deterministic digest over secret + salt
- BcryptCredentialHasher: per-digest salt, checkpw verification
- Cost factor validation
"""

import hashlib

import pytest

from secureguard.infrastructure.security import (
    BcryptCredentialHasher,
    Sha256CredentialHasher,
)


@pytest.mark.unit
class TestSha256CredentialHasher:
    def test_digest_is_sha256_of_secret_plus_salt(self):
        expected = hashlib.sha256(b"admin123salt").hexdigest()

        assert Sha256CredentialHasher().hash("admin123") == expected

    def test_same_secret_same_digest(self):
        hasher = Sha256CredentialHasher()

        assert hasher.hash("s3cret") == hasher.hash("s3cret")

    def test_salt_changes_digest(self):
        assert Sha256CredentialHasher(salt="a").hash("x") != Sha256CredentialHasher(
            salt="b"
        ).hash("x")

    def test_verify(self):
        hasher = Sha256CredentialHasher()
        digest = hasher.hash("Passw0rd!")

        assert hasher.verify("Passw0rd!", digest) is True
        assert hasher.verify("passw0rd!", digest) is False


@pytest.mark.unit
class TestBcryptCredentialHasher:
    def test_hash_and_verify(self):
        hasher = BcryptCredentialHasher(cost_factor=10)
        digest = hasher.hash("Passw0rd!")

        assert digest.startswith("$2b$10$")
        assert hasher.verify("Passw0rd!", digest) is True
        assert hasher.verify("wrong", digest) is False

    def test_random_salt_per_digest(self):
        hasher = BcryptCredentialHasher(cost_factor=10)

        assert hasher.hash("same") != hasher.hash("same")

    def test_malformed_digest_fails_closed(self):
        assert BcryptCredentialHasher(cost_factor=10).verify("x", "not-a-hash") is False

    @pytest.mark.parametrize("cost", [9, 21])
    def test_rejects_cost_out_of_range(self, cost):
        with pytest.raises(ValueError):
            BcryptCredentialHasher(cost_factor=cost)
