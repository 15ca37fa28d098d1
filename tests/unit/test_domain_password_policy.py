"""Unit tests for PasswordPolicy."""

import pytest

from secureguard.domain.policy import PasswordPolicy, validate_strength


@pytest.mark.unit
class TestPasswordPolicy:
    @pytest.mark.parametrize("password", ["Passw0rd!", "Xy9&abcd", "LongerPassword123$"])
    def test_strong_passwords_pass(self, password):
        assert validate_strength(password) is None

    @pytest.mark.parametrize(
        ("password", "missing"),
        [
            ("Pa0!", "at least 8 characters"),
            ("PASSWORD1!", "lowercase letter"),
            ("password1!", "uppercase letter"),
            ("Password!!", "digit"),
            ("Password12", "symbol from !@#$%^&*"),
        ],
    )
    def test_each_rule_is_reported(self, password, missing):
        message = validate_strength(password)

        assert message is not None
        assert message.startswith(
            "Password must be 8+ chars, include lowercase, uppercase, number, and symbol"
        )
        assert missing in message

    def test_symbol_outside_fixed_set_does_not_count(self):
        assert PasswordPolicy().missing_requirements("Password1?") == [
            "symbol from !@#$%^&*"
        ]

    def test_empty_password_lists_every_rule(self):
        assert len(PasswordPolicy().missing_requirements("")) == 5

    def test_custom_minimum_length(self):
        policy = PasswordPolicy(min_length=12)

        assert policy.validate_strength("Passw0rd!") is not None
        assert policy.validate_strength("Passw0rd!abc") is None

    @pytest.mark.parametrize(
        ("password", "missing"),
        [
            ("passwordÉ1!", "uppercase letter"),
            ("ÀÉÎõABC1!", "lowercase letter"),
            ("Passwörd١!", "digit"),
        ],
    )
    def test_non_ascii_characters_do_not_satisfy_classes(self, password, missing):
        assert PasswordPolicy().missing_requirements(password) == [missing]

    def test_non_ascii_characters_count_toward_length(self):
        assert validate_strength("Pässw0rd!") is None
