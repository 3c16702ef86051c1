"""KPI resource router (admin only).

Endpoints:
    GET    /kpis        - List KPI records
    POST   /kpis        - Record a KPI value
    PATCH  /kpis/{id}   - Edit a KPI record
    DELETE /kpis/{id}   - Delete a KPI record
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request, status
from fastapi.responses import JSONResponse, Response

from taskhub.application.commands import CreateKpi, DeleteKpi, UpdateKpi
from taskhub.application.commands.handlers.kpi_handlers import (
    CreateKpiHandler,
    DeleteKpiHandler,
    UpdateKpiHandler,
)
from taskhub.application.queries import ListKpis
from taskhub.application.queries.handlers.list_kpis_handler import ListKpisHandler
from taskhub.core.container import (
    get_create_kpi_handler,
    get_delete_kpi_handler,
    get_list_kpis_handler,
    get_update_kpi_handler,
)
from taskhub.core.result import Failure, Success
from taskhub.presentation.routers.api.middleware.auth_dependencies import CurrentPrincipal
from taskhub.presentation.routers.api.middleware.trace_middleware import get_trace_id
from taskhub.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from taskhub.schemas.kpi_schemas import (
    KpiCreateRequest,
    KpiListResponse,
    KpiResponse,
    KpiUpdateRequest,
)

router = APIRouter(prefix="/kpis", tags=["KPIs"])

KpiId = Annotated[str, Path(description="KPI record identifier")]

_ERROR_RESPONSES = {
    400: {"model": ProblemDetails},
    401: {"model": ProblemDetails},
    403: {"model": ProblemDetails},
    404: {"model": ProblemDetails},
    502: {"model": ProblemDetails},
}


@router.get("", response_model=KpiListResponse, responses=_ERROR_RESPONSES, summary="List KPIs")
async def list_kpis(
    request: Request,
    principal: CurrentPrincipal,
    handler: ListKpisHandler = Depends(get_list_kpis_handler),
) -> KpiListResponse | JSONResponse:
    match await handler.handle(ListKpis(principal=principal)):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())
        case Success(value=kpis):
            return KpiListResponse.from_entities(kpis)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=KpiResponse,
    responses=_ERROR_RESPONSES,
    summary="Record KPI",
)
async def create_kpi(
    request: Request,
    principal: CurrentPrincipal,
    data: KpiCreateRequest,
    handler: CreateKpiHandler = Depends(get_create_kpi_handler),
) -> KpiResponse | JSONResponse:
    match await handler.handle(CreateKpi(principal=principal, **data.model_dump())):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())
        case Success(value=kpi):
            return KpiResponse.from_entity(kpi)


@router.patch(
    "/{kpi_id}", response_model=KpiResponse, responses=_ERROR_RESPONSES, summary="Edit KPI"
)
async def update_kpi(
    request: Request,
    principal: CurrentPrincipal,
    kpi_id: KpiId,
    data: KpiUpdateRequest,
    handler: UpdateKpiHandler = Depends(get_update_kpi_handler),
) -> KpiResponse | JSONResponse:
    command = UpdateKpi(
        principal=principal, kpi_id=kpi_id, changes=data.model_dump(exclude_unset=True)
    )

    match await handler.handle(command):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())
        case Success(value=kpi):
            return KpiResponse.from_entity(kpi)


@router.delete(
    "/{kpi_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_ERROR_RESPONSES,
    summary="Delete KPI",
)
async def delete_kpi(
    request: Request,
    principal: CurrentPrincipal,
    kpi_id: KpiId,
    handler: DeleteKpiHandler = Depends(get_delete_kpi_handler),
) -> Response:
    result = await handler.handle(DeleteKpi(principal=principal, kpi_id=kpi_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request, get_trace_id())
    return Response(status_code=status.HTTP_204_NO_CONTENT)
