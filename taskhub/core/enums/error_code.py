"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Authentication errors (INVALID_CREDENTIALS, SESSION_*)
- Authorization errors (PERMISSION_DENIED, ...)
- Record store errors (STORE_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_PROGRESS = "invalid_progress"
    INVALID_EMAIL = "invalid_email"
    EMPTY_UPDATE = "empty_update"

    # Resource errors
    PRINCIPAL_NOT_FOUND = "principal_not_found"
    TASK_NOT_FOUND = "task_not_found"
    KPI_NOT_FOUND = "kpi_not_found"
    RECORD_NOT_FOUND = "record_not_found"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"
    SESSION_INVALID = "session_invalid"
    EMAIL_ALREADY_EXISTS = "email_already_exists"
    AUTHENTICATION_FAILED = "authentication_failed"

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"
    NOT_AUTHENTICATED = "not_authenticated"
    TASK_NOT_ASSIGNED = "task_not_assigned"
    ROLE_GRANT_DENIED = "role_grant_denied"
    SELF_ROLE_CHANGE = "self_role_change"
    ADMIN_ACCOUNT_PROTECTED = "admin_account_protected"

    # Record store errors
    STORE_UNAVAILABLE = "store_unavailable"
    STORE_REJECTED = "store_rejected"
    STORE_INVALID_RESPONSE = "store_invalid_response"
