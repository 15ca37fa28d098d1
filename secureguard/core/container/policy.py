"""Policy evaluator factory."""

from functools import lru_cache

from secureguard.domain.policy import PolicyEvaluator


@lru_cache()
def get_policy_evaluator() -> PolicyEvaluator:
    """Get evaluator singleton. Stateless, safe to share."""
    return PolicyEvaluator()
