"""Domain errors package.

Usage:
    from taskhub.domain.errors import AuthError, ForbiddenError, StoreError
"""

from taskhub.domain.errors.forbidden_error import ForbiddenError
from taskhub.domain.errors.store_error import AuthError, StoreError

__all__ = [
    "AuthError",
    "ForbiddenError",
    "StoreError",
]
