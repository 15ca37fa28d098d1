"""Access control models composed by the policy evaluator.

Declaration order is the evaluation order:
    MAC -> ABAC -> RBAC -> RuBAC -> DAC

The first enabled model that denies is the one reported in the Decision.
"""

from enum import Enum


class AccessModel(str, Enum):
    """Access control model tag carried by denied decisions."""

    MAC = "MAC"
    """Mandatory: clearance vs. classification."""

    ABAC = "ABAC"
    """Attribute-based: department match."""

    RBAC = "RBAC"
    """Role-based: role vs. classification."""

    RUBAC = "RuBAC"
    """Rule-based: working-hour window."""

    DAC = "DAC"
    """Discretionary: ownership and sharing."""
