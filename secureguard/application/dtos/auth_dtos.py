"""Authentication DTOs."""

from dataclasses import dataclass

from secureguard.domain.enums import AuthState


@dataclass(frozen=True, kw_only=True)
class AuthenticationStep:
    """State of a login flow after a successful step.

    Attributes:
        state: AWAITING_SECOND_FACTOR or AUTHENTICATED.
        subject_id: Subject bound to the flow.
    """

    state: AuthState
    subject_id: str

    @property
    def is_authenticated(self) -> bool:
        return self.state is AuthState.AUTHENTICATED

    @property
    def requires_second_factor(self) -> bool:
        return self.state is AuthState.AWAITING_SECOND_FACTOR
