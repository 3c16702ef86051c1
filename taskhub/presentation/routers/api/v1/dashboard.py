"""Dashboard router."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from taskhub.application.queries import GetDashboardStats
from taskhub.application.queries.handlers.get_dashboard_stats_handler import (
    GetDashboardStatsHandler,
)
from taskhub.core.container import get_dashboard_stats_handler
from taskhub.core.result import Failure, Success
from taskhub.presentation.routers.api.middleware.auth_dependencies import CurrentPrincipal
from taskhub.presentation.routers.api.middleware.trace_middleware import get_trace_id
from taskhub.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from taskhub.schemas.dashboard_schemas import DashboardStatsResponse

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get(
    "",
    response_model=DashboardStatsResponse,
    responses={401: {"model": ProblemDetails}},
    summary="Dashboard statistics",
)
async def get_dashboard(
    request: Request,
    principal: CurrentPrincipal,
    handler: GetDashboardStatsHandler = Depends(get_dashboard_stats_handler),
) -> DashboardStatsResponse | JSONResponse:
    """Headline task statistics.

    GET /api/v1/dashboard -> 200 OK. Metrics that could not be fetched are
    reported as 0 and named in ``degraded_metrics``.
    """
    match await handler.handle(GetDashboardStats(principal=principal)):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())
        case Success(value=stats):
            return DashboardStatsResponse.from_stats(stats)
