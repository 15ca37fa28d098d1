"""States of one login flow."""

from enum import Enum


class AuthState(str, Enum):
    """Authentication flow state.

    Transitions:
        AWAITING_CREDENTIALS -> AWAITING_SECOND_FACTOR -> AUTHENTICATED
        AWAITING_CREDENTIALS -> AUTHENTICATED (second factor disabled)
        AWAITING_CREDENTIALS | AWAITING_SECOND_FACTOR -> LOCKED
        LOCKED -> AWAITING_CREDENTIALS (new attempt)
    """

    AWAITING_CREDENTIALS = "awaiting_credentials"
    AWAITING_SECOND_FACTOR = "awaiting_second_factor"
    AUTHENTICATED = "authenticated"
    LOCKED = "locked"
