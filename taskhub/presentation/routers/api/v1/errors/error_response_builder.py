"""Error response builder for RFC 9457 Problem Details.

Converts DomainError values returned by handlers into Problem Details
responses. The HTTP status follows the error type:

    ValidationError            -> 400
    AuthError                  -> 401 (EMAIL_ALREADY_EXISTS -> 409)
    ForbiddenError             -> 403 (NOT_AUTHENTICATED -> 401)
    NotFoundError              -> 404
    StoreError                 -> 502 (RECORD_NOT_FOUND -> 404)
    anything else              -> 500
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from taskhub.core.config import settings
from taskhub.core.enums import ErrorCode
from taskhub.core.errors import AuthorizationError, DomainError, NotFoundError, ValidationError
from taskhub.domain.errors import AuthError, StoreError
from taskhub.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

PROBLEM_MEDIA_TYPE = "application/problem+json"

_CODE_STATUS: dict[ErrorCode, int] = {
    ErrorCode.NOT_AUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.EMAIL_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.RECORD_NOT_FOUND: status.HTTP_404_NOT_FOUND,
}

_STATUS_TITLES: dict[int, str] = {
    400: "Validation Failed",
    401: "Authentication Required",
    403: "Access Denied",
    404: "Resource Not Found",
    409: "Resource Conflict",
    500: "Internal Server Error",
    502: "Backend Store Error",
}


class ErrorResponseBuilder:
    """Build RFC 9457 Problem Details error responses."""

    @staticmethod
    def from_domain_error(
        error: DomainError,
        request: Request,
        trace_id: str | None,
    ) -> JSONResponse:
        """Convert a DomainError to an RFC 9457 JSON response.

        Args:
            error: Error returned by a handler.
            request: Current request (for the instance path).
            trace_id: Request trace ID.

        Returns:
            JSONResponse with ProblemDetails content.
        """
        status_code = ErrorResponseBuilder.status_code_for(error)

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=_STATUS_TITLES.get(status_code, "Error"),
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            trace_id=trace_id,
        )

        if isinstance(error, ValidationError) and error.field:
            problem.errors = [
                ErrorDetail(field=error.field, code=error.code.value, message=error.message)
            ]

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
            media_type=PROBLEM_MEDIA_TYPE,
        )

    @staticmethod
    def status_code_for(error: DomainError) -> int:
        """Map a domain error to its HTTP status code."""
        if error.code in _CODE_STATUS:
            return _CODE_STATUS[error.code]

        match error:
            case ValidationError():
                return status.HTTP_400_BAD_REQUEST
            case AuthError():
                return status.HTTP_401_UNAUTHORIZED
            case AuthorizationError():
                return status.HTTP_403_FORBIDDEN
            case NotFoundError():
                return status.HTTP_404_NOT_FOUND
            case StoreError():
                return status.HTTP_502_BAD_GATEWAY
            case _:
                return status.HTTP_500_INTERNAL_SERVER_ERROR
