"""Pure domain policies: the access decision engine and password strength."""

from secureguard.domain.policy.evaluator import (
    MODEL_CHECKS,
    PolicyEvaluator,
    evaluate,
)
from secureguard.domain.policy.password_policy import (
    PasswordPolicy,
    validate_strength,
)

__all__ = [
    "MODEL_CHECKS",
    "PasswordPolicy",
    "PolicyEvaluator",
    "evaluate",
    "validate_strength",
]
