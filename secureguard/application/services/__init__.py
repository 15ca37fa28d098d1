"""Application services."""

from secureguard.application.services.authentication_state_machine import (
    AuthenticationFailureReason,
    AuthenticationStateMachine,
)

__all__ = ["AuthenticationFailureReason", "AuthenticationStateMachine"]
