"""Core enums package.

Usage:
    from taskhub.core.enums import ErrorCode, Environment
"""

from taskhub.core.enums.environment import Environment
from taskhub.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
