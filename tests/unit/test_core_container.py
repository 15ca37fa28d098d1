"""Unit tests for the container factories."""

import pytest

from secureguard.core.config import get_settings
from secureguard.core.container import (
    get_credential_hasher,
    get_event_bus,
    get_policy_config_repository,
    get_second_factor_verifier,
    get_subject_repository,
    new_authentication_flow,
    reset_container,
)
from secureguard.domain.enums import AuthState
from secureguard.domain.events import (
    SubjectLoginAttempted,
    SubjectLoginFailed,
)
from secureguard.infrastructure.security import (
    BcryptCredentialHasher,
    Sha256CredentialHasher,
    StaticCodeVerifier,
    TotpVerifier,
)


@pytest.mark.unit
class TestContainerSelection:
    def test_default_adapters(self):
        assert isinstance(get_credential_hasher(), Sha256CredentialHasher)
        assert isinstance(get_second_factor_verifier(), StaticCodeVerifier)

    def test_bcrypt_and_totp_opt_in(self, monkeypatch):
        monkeypatch.setenv("SECUREGUARD_CREDENTIAL_HASHER", "bcrypt")
        monkeypatch.setenv("SECUREGUARD_BCRYPT_ROUNDS", "10")
        monkeypatch.setenv("SECUREGUARD_SECOND_FACTOR_BACKEND", "totp")
        reset_container()

        assert isinstance(get_credential_hasher(), BcryptCredentialHasher)
        assert isinstance(get_second_factor_verifier(), TotpVerifier)

    def test_singletons(self):
        assert get_subject_repository() is get_subject_repository()
        assert get_event_bus() is get_event_bus()

    def test_reset_drops_singletons(self):
        repo = get_subject_repository()

        reset_container()

        assert get_subject_repository() is not repo

    @pytest.mark.asyncio
    async def test_policy_config_from_settings(self, monkeypatch):
        monkeypatch.setenv("SECUREGUARD_ENABLE_MAC", "false")
        reset_container()

        config = await get_policy_config_repository().get()

        assert config.enable_mac is False
        assert get_settings().enable_mac is False


@pytest.mark.unit
class TestEventBusWiring:
    def test_audited_event_has_two_subscribers(self):
        bus = get_event_bus()

        assert bus.handler_count(SubjectLoginFailed) == 2

    def test_unaudited_event_only_logged(self):
        bus = get_event_bus()

        assert bus.handler_count(SubjectLoginAttempted) == 1


@pytest.mark.unit
class TestNewAuthenticationFlow:
    def test_each_flow_is_independent(self):
        first = new_authentication_flow()
        second = new_authentication_flow()

        assert first is not second
        assert first.state is AuthState.AWAITING_CREDENTIALS
