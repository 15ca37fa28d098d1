"""Ordered security levels used for both clearance and classification.

Subjects carry a clearance level and resources carry a classification on the
same scale. Ordering is ordinal: PUBLIC < INTERNAL < CONFIDENTIAL < TOP_SECRET.
IntEnum gives native comparison operators.
"""

from enum import IntEnum


class SecurityLevel(IntEnum):
    """Ordinal security level (clearance / classification)."""

    PUBLIC = 0
    INTERNAL = 1
    CONFIDENTIAL = 2
    TOP_SECRET = 3
