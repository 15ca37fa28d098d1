"""Unit tests for Resource, PolicyConfig, Decision and CaptchaChallenge."""

from dataclasses import FrozenInstanceError

import pytest

from secureguard.domain.enums import AccessModel, ResourceKind, SecurityLevel
from secureguard.domain.value_objects import (
    GRANTED_REASON,
    CaptchaChallenge,
    Decision,
    PolicyConfig,
)
from tests.conftest import create_resource


@pytest.mark.unit
class TestResource:
    def test_with_share_returns_new_value(self):
        resource = create_resource(owner_id="u1")

        shared = resource.with_share("u2")

        assert shared.is_shared_with("u2") is True
        assert resource.is_shared_with("u2") is False
        assert shared.id == resource.id

    def test_is_immutable(self):
        resource = create_resource()

        with pytest.raises(FrozenInstanceError):
            resource.classification = SecurityLevel.PUBLIC

    def test_shared_with_normalised_to_frozenset(self):
        resource = create_resource(shared_with={"u2", "u3"})

        assert resource.shared_with == frozenset({"u2", "u3"})
        assert isinstance(resource.shared_with, frozenset)

    def test_coerces_kind(self):
        resource = create_resource(kind="REPORT")

        assert resource.kind is ResourceKind.REPORT


@pytest.mark.unit
class TestPolicyConfig:
    def test_defaults(self):
        config = PolicyConfig()

        assert (config.enable_mac, config.enable_dac, config.enable_rbac) == (
            True,
            True,
            True,
        )
        assert config.enable_rubac is False
        assert config.enable_abac is True
        assert (config.working_hours_start, config.working_hours_end) == (9, 17)

    @pytest.mark.parametrize("hour", [-1, 24, 100])
    def test_rejects_out_of_range_hours(self, hour):
        with pytest.raises(ValueError):
            PolicyConfig(working_hours_start=hour)

    def test_rejects_bool_hour(self):
        with pytest.raises(ValueError):
            PolicyConfig(working_hours_end=True)

    def test_with_changes_validates(self):
        with pytest.raises(ValueError):
            PolicyConfig().with_changes(working_hours_end=30)

    def test_with_changes_keeps_original(self):
        config = PolicyConfig()

        updated = config.with_changes(enable_rubac=True)

        assert updated.enable_rubac is True
        assert config.enable_rubac is False

    def test_working_hours_label(self):
        assert PolicyConfig().working_hours_label == "9:00 - 17:00"


@pytest.mark.unit
class TestDecision:
    def test_grant(self):
        decision = Decision.grant()

        assert decision.allowed is True
        assert decision.reason == GRANTED_REASON
        assert decision.model is None

    def test_deny_prefixes_model_tag(self):
        decision = Decision.deny(AccessModel.RUBAC, "outside hours")

        assert decision.allowed is False
        assert decision.reason == "RuBAC: outside hours"
        assert decision.model is AccessModel.RUBAC


@pytest.mark.unit
class TestCaptchaChallenge:
    @pytest.mark.parametrize("answer", ["7", " 7 ", 7])
    def test_correct_answers(self, answer):
        assert CaptchaChallenge(question="3 + 4", answer=7).is_solved_by(answer)

    @pytest.mark.parametrize("answer", ["8", "seven", "", None, True, 8])
    def test_wrong_answers(self, answer):
        assert not CaptchaChallenge(question="3 + 4", answer=7).is_solved_by(answer)
