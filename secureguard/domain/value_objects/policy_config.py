"""Policy configuration value object.

Immutable for the duration of an evaluation. Changes go through
with_changes(), which validates and returns a new instance.
"""

from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True, kw_only=True)
class PolicyConfig:
    """Toggles for the five access models plus the RuBAC working-hour window.

    The window is half-open: access is allowed for start <= hour < end.
    A window with start > end is NOT treated as wrapping past midnight; the
    literal check then matches no hour, so every non-admin request is denied
    while RuBAC is enabled.

    Attributes:
        enable_mac: Clearance vs. classification.
        enable_dac: Ownership / sharing.
        enable_rbac: Role vs. classification.
        enable_rubac: Working-hour window.
        enable_abac: Department match.
        working_hours_start: First allowed hour (0-23).
        working_hours_end: First disallowed hour (0-23).

    Raises:
        ValueError: If an hour is outside 0-23.

    Example:
        >>> config = PolicyConfig.all_disabled().with_changes(enable_rbac=True)
        >>> config.enable_rbac, config.enable_mac
        (True, False)
    """

    enable_mac: bool = True
    enable_dac: bool = True
    enable_rbac: bool = True
    enable_rubac: bool = False
    enable_abac: bool = True
    working_hours_start: int = 9
    working_hours_end: int = 17

    def __post_init__(self) -> None:
        """Validate the working-hour window."""
        for name in ("working_hours_start", "working_hours_end"):
            hour = getattr(self, name)
            if isinstance(hour, bool) or not isinstance(hour, int):
                raise ValueError(f"{name} must be an integer hour")
            if not 0 <= hour <= 23:
                raise ValueError(f"{name} must be between 0 and 23, got {hour}")

    @classmethod
    def all_enabled(cls, **overrides: Any) -> "PolicyConfig":
        """Strictest configuration: every model on."""
        values: dict[str, Any] = {
            "enable_mac": True,
            "enable_dac": True,
            "enable_rbac": True,
            "enable_rubac": True,
            "enable_abac": True,
        }
        values.update(overrides)
        return cls(**values)

    @classmethod
    def all_disabled(cls, **overrides: Any) -> "PolicyConfig":
        """Every model off (every request is allowed)."""
        values: dict[str, Any] = {
            "enable_mac": False,
            "enable_dac": False,
            "enable_rbac": False,
            "enable_rubac": False,
            "enable_abac": False,
        }
        values.update(overrides)
        return cls(**values)

    def with_changes(self, **changes: Any) -> "PolicyConfig":
        """Return a validated copy with the given fields replaced."""
        return replace(self, **changes)

    def is_within_working_hours(self, hour: int) -> bool:
        """Literal half-open check start <= hour < end."""
        return self.working_hours_start <= hour < self.working_hours_end

    @property
    def working_hours_label(self) -> str:
        """Human-readable window, e.g. '9:00 - 17:00'."""
        return f"{self.working_hours_start}:00 - {self.working_hours_end}:00"
