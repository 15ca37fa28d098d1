"""Core enums package.

Usage:
    from secureguard.core.enums import ErrorCode, Environment
"""

from secureguard.core.enums.environment import Environment
from secureguard.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
