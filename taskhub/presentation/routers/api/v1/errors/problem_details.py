"""RFC 9457 Problem Details for HTTP APIs.

RFC 9457: https://www.rfc-editor.org/rfc/rfc9457
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Examples:
        >>> ErrorDetail(
        ...     field="progress_percentage",
        ...     code="invalid_progress",
        ...     message="Progress must be between 0 and 100",
        ... )
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 9457 Problem Details.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: URI reference identifying the specific occurrence
        errors: Optional list of field-specific errors (for validation failures)
        trace_id: Request trace ID for correlating with logs

    Examples:
        >>> ProblemDetails(
        ...     type="http://localhost:8000/errors/permission_denied",
        ...     title="Access Denied",
        ...     status=403,
        ...     detail="Role 'employee' may not perform tasks:create",
        ...     instance="/api/v1/tasks",
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
    """

    type: str = Field(..., description="Problem type URI")
    title: str = Field(..., description="Problem type summary")
    status: int = Field(..., description="HTTP status code")
    detail: str = Field(..., description="Occurrence-specific explanation")
    instance: str = Field(..., description="Request path")
    errors: list[ErrorDetail] | None = Field(None, description="Field errors")
    trace_id: str | None = Field(None, description="Request trace ID")
