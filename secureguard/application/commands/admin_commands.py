"""Administrative commands (ADMIN role only)."""

from dataclasses import dataclass

from secureguard.domain.enums import Department, Role, SecurityLevel


@dataclass(frozen=True, kw_only=True)
class UpdateSubject:
    """Change access-relevant attributes of a subject.

    Fields left as None are unchanged.
    """

    actor_id: str
    subject_id: str
    role: Role | None = None
    department: Department | None = None
    clearance_level: SecurityLevel | None = None


@dataclass(frozen=True, kw_only=True)
class UpdatePolicyConfig:
    """Replace the active policy configuration.

    Fields left as None keep their current value.
    """

    actor_id: str
    enable_mac: bool | None = None
    enable_dac: bool | None = None
    enable_rbac: bool | None = None
    enable_rubac: bool | None = None
    enable_abac: bool | None = None
    working_hours_start: int | None = None
    working_hours_end: int | None = None

    def changes(self) -> dict[str, bool | int]:
        """Non-None fields as keyword arguments for PolicyConfig.with_changes."""
        fields = (
            "enable_mac",
            "enable_dac",
            "enable_rbac",
            "enable_rubac",
            "enable_abac",
            "working_hours_start",
            "working_hours_end",
        )
        return {
            name: getattr(self, name)
            for name in fields
            if getattr(self, name) is not None
        }
