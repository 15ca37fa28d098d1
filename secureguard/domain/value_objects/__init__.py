"""Domain value objects (immutable, no identity)."""

from secureguard.domain.value_objects.captcha import CaptchaChallenge
from secureguard.domain.value_objects.decision import GRANTED_REASON, Decision
from secureguard.domain.value_objects.policy_config import PolicyConfig

__all__ = ["CaptchaChallenge", "Decision", "GRANTED_REASON", "PolicyConfig"]
