"""Handler factories.

Handlers are cheap and stateless, so each call builds a new one from the
app-scoped collaborators. ``new_authentication_flow`` is the exception: it
returns a fresh stateful login flow per client.
"""

from secureguard.application.commands.handlers import (
    AccessResourceHandler,
    ChangePasswordHandler,
    LoginHandler,
    RegisterSubjectHandler,
    ShareResourceHandler,
    UnlockSubjectHandler,
    UpdatePolicyConfigHandler,
    UpdateProfileHandler,
    UpdateSubjectHandler,
)
from secureguard.application.queries.handlers import ListAccessibleResourcesHandler
from secureguard.application.services import AuthenticationStateMachine
from secureguard.core.config import get_settings
from secureguard.core.container.events import get_event_bus
from secureguard.core.container.infrastructure import (
    get_credential_hasher,
    get_second_factor_verifier,
    get_subject_locks,
)
from secureguard.core.container.policy import get_policy_evaluator
from secureguard.core.container.repositories import (
    get_policy_config_repository,
    get_resource_repository,
    get_subject_repository,
)


def new_authentication_flow() -> LoginHandler:
    """Start a login flow (one per client).

    Example:
        >>> flow = new_authentication_flow()
        >>> result = await flow.handle_credentials(SubmitCredentials(...))
        >>> flow.state
        <AuthState.AWAITING_SECOND_FACTOR: 'awaiting_second_factor'>
    """
    machine = AuthenticationStateMachine(
        subject_repo=get_subject_repository(),
        hasher=get_credential_hasher(),
        second_factor=get_second_factor_verifier(),
        locks=get_subject_locks(),
        lockout_threshold=get_settings().lockout_threshold,
    )
    return LoginHandler(machine=machine, event_bus=get_event_bus())


def get_unlock_subject_handler() -> UnlockSubjectHandler:
    return UnlockSubjectHandler(
        subject_repo=get_subject_repository(),
        locks=get_subject_locks(),
        event_bus=get_event_bus(),
    )


def get_access_resource_handler() -> AccessResourceHandler:
    return AccessResourceHandler(
        subject_repo=get_subject_repository(),
        resource_repo=get_resource_repository(),
        config_repo=get_policy_config_repository(),
        evaluator=get_policy_evaluator(),
        event_bus=get_event_bus(),
    )


def get_list_accessible_resources_handler() -> ListAccessibleResourcesHandler:
    return ListAccessibleResourcesHandler(
        subject_repo=get_subject_repository(),
        resource_repo=get_resource_repository(),
        config_repo=get_policy_config_repository(),
        evaluator=get_policy_evaluator(),
    )


def get_share_resource_handler() -> ShareResourceHandler:
    return ShareResourceHandler(
        subject_repo=get_subject_repository(),
        resource_repo=get_resource_repository(),
        event_bus=get_event_bus(),
    )


def get_register_subject_handler() -> RegisterSubjectHandler:
    return RegisterSubjectHandler(
        subject_repo=get_subject_repository(),
        hasher=get_credential_hasher(),
        event_bus=get_event_bus(),
        role_access_keys=get_settings().role_access_keys,
    )


def get_change_password_handler() -> ChangePasswordHandler:
    return ChangePasswordHandler(
        subject_repo=get_subject_repository(),
        hasher=get_credential_hasher(),
        locks=get_subject_locks(),
        event_bus=get_event_bus(),
        lockout_threshold=get_settings().lockout_threshold,
    )


def get_update_subject_handler() -> UpdateSubjectHandler:
    return UpdateSubjectHandler(
        subject_repo=get_subject_repository(),
        locks=get_subject_locks(),
        event_bus=get_event_bus(),
    )


def get_update_policy_config_handler() -> UpdatePolicyConfigHandler:
    return UpdatePolicyConfigHandler(
        subject_repo=get_subject_repository(),
        config_repo=get_policy_config_repository(),
        event_bus=get_event_bus(),
    )


def get_update_profile_handler() -> UpdateProfileHandler:
    return UpdateProfileHandler(
        subject_repo=get_subject_repository(),
        locks=get_subject_locks(),
        event_bus=get_event_bus(),
    )
