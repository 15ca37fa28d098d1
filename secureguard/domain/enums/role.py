"""Subject roles.

Roles drive the RBAC model and several bypasses in the other models:
ADMIN bypasses ABAC, RuBAC and DAC; MANAGER gets implicit DAC access inside
its own department; STAFF is limited to INTERNAL data by RBAC.
"""

from enum import Enum


class Role(str, Enum):
    """Subject role.

    String Enum:
        Inherits from str for easy serialization and log context.
    """

    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    STAFF = "STAFF"
    AUDITOR = "AUDITOR"

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: ['ADMIN', 'MANAGER', 'STAFF', 'AUDITOR'].
        """
        return [role.value for role in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid role."""
        return value in cls.values()
