"""Core errors package.

Usage:
    from taskhub.core.errors import DomainError, ValidationError, NotFoundError
"""

from taskhub.core.errors.common_errors import (
    AuthorizationError,
    NotFoundError,
    ValidationError,
)
from taskhub.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "AuthorizationError",
]
