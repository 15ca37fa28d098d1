"""Access decision value object."""

from dataclasses import dataclass

from secureguard.domain.enums import AccessModel

GRANTED_REASON = "granted"


@dataclass(frozen=True, slots=True, kw_only=True)
class Decision:
    """Outcome of one access evaluation.

    A denied decision names exactly one originating model, and its reason
    starts with that model's tag. An allowed decision carries the fixed
    GRANTED_REASON marker and no model.

    Attributes:
        allowed: Whether access is granted.
        reason: Human-auditable explanation.
        model: The denying model, None when allowed.
    """

    allowed: bool
    reason: str
    model: AccessModel | None = None

    @classmethod
    def grant(cls) -> "Decision":
        """Allowed decision."""
        return cls(allowed=True, reason=GRANTED_REASON)

    @classmethod
    def deny(cls, model: AccessModel, detail: str) -> "Decision":
        """Denied decision tagged with the originating model.

        Example:
            >>> Decision.deny(AccessModel.RBAC, "STAFF role cannot ...").reason
            'RBAC: STAFF role cannot ...'
        """
        return cls(allowed=False, reason=f"{model.value}: {detail}", model=model)
