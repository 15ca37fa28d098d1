"""Commands - write operations that change state.

Each command has a handler in commands/handlers/ returning a Result.
"""

from secureguard.application.commands.access_commands import (
    AccessResource,
    ShareResource,
)
from secureguard.application.commands.admin_commands import (
    UpdatePolicyConfig,
    UpdateSubject,
)
from secureguard.application.commands.auth_commands import (
    ChangePassword,
    RegisterSubject,
    SubmitCredentials,
    SubmitSecondFactor,
    UnlockSubject,
    UpdateProfile,
)

__all__ = [
    "AccessResource",
    "ChangePassword",
    "RegisterSubject",
    "ShareResource",
    "SubmitCredentials",
    "SubmitSecondFactor",
    "UnlockSubject",
    "UpdatePolicyConfig",
    "UpdateProfile",
    "UpdateSubject",
]
