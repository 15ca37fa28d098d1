"""Kinds of protected resources."""

from enum import Enum


class ResourceKind(str, Enum):
    """Resource type label (display only, not used by any access model)."""

    CONTACT = "CONTACT"
    DOCUMENT = "DOCUMENT"
    REPORT = "REPORT"
