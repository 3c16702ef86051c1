"""RFC 9457 error response schemas and exception handlers.

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 9457 compliant error response schema
    ErrorResponseBuilder: Builds Problem Details responses from domain errors
    register_exception_handlers: Register global exception handlers with FastAPI
"""

from taskhub.presentation.routers.api.v1.errors.error_response_builder import (
    PROBLEM_MEDIA_TYPE,
    ErrorResponseBuilder,
)
from taskhub.presentation.routers.api.v1.errors.exception_handlers import (
    register_exception_handlers,
)
from taskhub.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

__all__ = [
    "PROBLEM_MEDIA_TYPE",
    "ErrorDetail",
    "ErrorResponseBuilder",
    "ProblemDetails",
    "register_exception_handlers",
]
