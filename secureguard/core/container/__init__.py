"""Container module - composition root.

Re-exports every factory so callers import from one place:

    from secureguard.core.container import get_access_resource_handler

Modules:
- infrastructure: logger, hasher, second factor, locks, audit
- events: event bus and registry-driven subscriptions
- repositories: in-memory repositories
- policy: policy evaluator
- handlers: handler factories and new_authentication_flow

Tests call ``reset_container()`` to drop every cached singleton.
"""

from secureguard.core.config import get_settings
from secureguard.core.container.events import get_event_bus
from secureguard.core.container.handlers import (
    get_access_resource_handler,
    get_change_password_handler,
    get_list_accessible_resources_handler,
    get_register_subject_handler,
    get_share_resource_handler,
    get_unlock_subject_handler,
    get_update_policy_config_handler,
    get_update_profile_handler,
    get_update_subject_handler,
    new_authentication_flow,
)
from secureguard.core.container.infrastructure import (
    get_audit,
    get_credential_hasher,
    get_logger,
    get_second_factor_verifier,
    get_subject_locks,
)
from secureguard.core.container.policy import get_policy_evaluator
from secureguard.core.container.repositories import (
    get_policy_config_repository,
    get_resource_repository,
    get_subject_repository,
)


def reset_container() -> None:
    """Clear cached settings and singletons."""
    for factory in (
        get_settings,
        get_logger,
        get_credential_hasher,
        get_second_factor_verifier,
        get_subject_locks,
        get_audit,
        get_event_bus,
        get_subject_repository,
        get_resource_repository,
        get_policy_config_repository,
        get_policy_evaluator,
    ):
        factory.cache_clear()


__all__ = [
    "get_access_resource_handler",
    "get_audit",
    "get_change_password_handler",
    "get_credential_hasher",
    "get_event_bus",
    "get_list_accessible_resources_handler",
    "get_logger",
    "get_policy_config_repository",
    "get_policy_evaluator",
    "get_register_subject_handler",
    "get_resource_repository",
    "get_second_factor_verifier",
    "get_share_resource_handler",
    "get_subject_locks",
    "get_subject_repository",
    "get_unlock_subject_handler",
    "get_update_policy_config_handler",
    "get_update_profile_handler",
    "get_update_subject_handler",
    "new_authentication_flow",
    "reset_container",
]
