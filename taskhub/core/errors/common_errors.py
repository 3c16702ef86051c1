"""Common error classes used across all layers.

Error Types:
- ValidationError: Input validation failures
- NotFoundError: Resource not found
- AuthorizationError: Authorization failures (no permission)

Usage:
    from taskhub.core.errors import ValidationError
    from taskhub.core.enums import ErrorCode
    from taskhub.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.INVALID_PROGRESS,
        message="Progress must be between 0 and 100",
        field="progress_percentage",
    ))
"""

from dataclasses import dataclass

from taskhub.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (Task, Principal, KpiMetric).
        resource_id: ID of the resource that was not found.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure (no permission).

    Attributes:
        required_permission: Permission that was required ("tasks:delete").
    """

    required_permission: str | None = None
