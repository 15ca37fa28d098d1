"""Command handlers."""

from secureguard.application.commands.handlers.access_resource_handler import (
    AccessResourceHandler,
)
from secureguard.application.commands.handlers.change_password_handler import (
    ChangePasswordHandler,
)
from secureguard.application.commands.handlers.login_handler import LoginHandler
from secureguard.application.commands.handlers.register_subject_handler import (
    DEFAULT_CLEARANCE,
    RegisterSubjectHandler,
)
from secureguard.application.commands.handlers.share_resource_handler import (
    ShareResourceHandler,
)
from secureguard.application.commands.handlers.unlock_subject_handler import (
    UnlockSubjectHandler,
)
from secureguard.application.commands.handlers.update_policy_config_handler import (
    UpdatePolicyConfigHandler,
)
from secureguard.application.commands.handlers.update_profile_handler import (
    UpdateProfileHandler,
)
from secureguard.application.commands.handlers.update_subject_handler import (
    UpdateSubjectHandler,
)

__all__ = [
    "AccessResourceHandler",
    "ChangePasswordHandler",
    "DEFAULT_CLEARANCE",
    "LoginHandler",
    "RegisterSubjectHandler",
    "ShareResourceHandler",
    "UnlockSubjectHandler",
    "UpdatePolicyConfigHandler",
    "UpdateProfileHandler",
    "UpdateSubjectHandler",
]
