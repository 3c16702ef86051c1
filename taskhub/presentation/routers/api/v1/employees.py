"""Employees resource router.

Endpoints:
    GET    /employees                       - Employee directory
    POST   /employees                       - Create employee
    GET    /employees/{id}                  - Get employee
    PATCH  /employees/{id}                  - Edit employee
    POST   /employees/{id}/deactivation     - Deactivate employee
    GET    /employees/{id}/stats            - Task statistics
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Request, status
from fastapi.responses import JSONResponse

from taskhub.application.commands import CreateEmployee, DeactivateEmployee, UpdateEmployee
from taskhub.application.commands.handlers.create_employee_handler import (
    CreateEmployeeHandler,
)
from taskhub.application.commands.handlers.update_employee_handler import (
    DeactivateEmployeeHandler,
    UpdateEmployeeHandler,
)
from taskhub.application.queries import GetEmployee, GetEmployeeStats, ListEmployees
from taskhub.application.queries.handlers.get_employee_handler import (
    GetEmployeeHandler,
    GetEmployeeStatsHandler,
)
from taskhub.application.queries.handlers.list_employees_handler import (
    ListEmployeesHandler,
)
from taskhub.core.container import (
    get_create_employee_handler,
    get_deactivate_employee_handler,
    get_get_employee_handler,
    get_get_employee_stats_handler,
    get_list_employees_handler,
    get_update_employee_handler,
)
from taskhub.core.result import Failure, Success
from taskhub.presentation.routers.api.middleware.auth_dependencies import CurrentPrincipal
from taskhub.presentation.routers.api.middleware.trace_middleware import get_trace_id
from taskhub.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from taskhub.schemas.employee_schemas import (
    EmployeeCreateRequest,
    EmployeeListResponse,
    EmployeeStatsResponse,
    EmployeeUpdateRequest,
)
from taskhub.schemas.principal_schemas import PrincipalResponse

router = APIRouter(prefix="/employees", tags=["Employees"])

EmployeeId = Annotated[str, Path(description="Principal identifier")]

_ERROR_RESPONSES = {
    400: {"model": ProblemDetails},
    401: {"model": ProblemDetails},
    403: {"model": ProblemDetails},
    404: {"model": ProblemDetails},
    409: {"model": ProblemDetails},
    502: {"model": ProblemDetails},
}


@router.get(
    "", response_model=EmployeeListResponse, responses=_ERROR_RESPONSES, summary="List employees"
)
async def list_employees(
    request: Request,
    principal: CurrentPrincipal,
    active_only: Annotated[bool, Query(description="Exclude deactivated employees")] = False,
    handler: ListEmployeesHandler = Depends(get_list_employees_handler),
) -> EmployeeListResponse | JSONResponse:
    """Employees and managers ordered by name. Requires employees:read."""
    match await handler.handle(ListEmployees(principal=principal, active_only=active_only)):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())
        case Success(value=principals):
            return EmployeeListResponse.from_entities(principals)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=PrincipalResponse,
    responses=_ERROR_RESPONSES,
    summary="Create employee",
)
async def create_employee(
    request: Request,
    principal: CurrentPrincipal,
    data: EmployeeCreateRequest,
    handler: CreateEmployeeHandler = Depends(get_create_employee_handler),
) -> PrincipalResponse | JSONResponse:
    """Create an identity and profile for a new staff member.

    POST /api/v1/employees -> 201 Created. Granting the admin role requires
    employees:grant_admin; the check happens before anything is written.
    """
    command = CreateEmployee(principal=principal, **data.model_dump())

    match await handler.handle(command):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())
        case Success(value=created):
            return PrincipalResponse.from_entity(created)


@router.get(
    "/{employee_id}",
    response_model=PrincipalResponse,
    responses=_ERROR_RESPONSES,
    summary="Get employee",
)
async def get_employee(
    request: Request,
    principal: CurrentPrincipal,
    employee_id: EmployeeId,
    handler: GetEmployeeHandler = Depends(get_get_employee_handler),
) -> PrincipalResponse | JSONResponse:
    match await handler.handle(GetEmployee(principal=principal, employee_id=employee_id)):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())
        case Success(value=employee):
            return PrincipalResponse.from_entity(employee)


@router.patch(
    "/{employee_id}",
    response_model=PrincipalResponse,
    responses=_ERROR_RESPONSES,
    summary="Edit employee",
)
async def update_employee(
    request: Request,
    principal: CurrentPrincipal,
    employee_id: EmployeeId,
    data: EmployeeUpdateRequest,
    handler: UpdateEmployeeHandler = Depends(get_update_employee_handler),
) -> PrincipalResponse | JSONResponse:
    command = UpdateEmployee(
        principal=principal,
        employee_id=employee_id,
        changes=data.model_dump(exclude_unset=True),
    )

    match await handler.handle(command):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())
        case Success(value=employee):
            return PrincipalResponse.from_entity(employee)


@router.post(
    "/{employee_id}/deactivation",
    response_model=PrincipalResponse,
    responses=_ERROR_RESPONSES,
    summary="Deactivate employee",
)
async def deactivate_employee(
    request: Request,
    principal: CurrentPrincipal,
    employee_id: EmployeeId,
    handler: DeactivateEmployeeHandler = Depends(get_deactivate_employee_handler),
) -> PrincipalResponse | JSONResponse:
    """Flip is_active to false; every other field is left untouched."""
    command = DeactivateEmployee(principal=principal, employee_id=employee_id)

    match await handler.handle(command):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())
        case Success(value=employee):
            return PrincipalResponse.from_entity(employee)


@router.get(
    "/{employee_id}/stats",
    response_model=EmployeeStatsResponse,
    responses=_ERROR_RESPONSES,
    summary="Employee task statistics",
)
async def get_employee_stats(
    request: Request,
    principal: CurrentPrincipal,
    employee_id: EmployeeId,
    handler: GetEmployeeStatsHandler = Depends(get_get_employee_stats_handler),
) -> EmployeeStatsResponse | JSONResponse:
    query = GetEmployeeStats(principal=principal, employee_id=employee_id)

    match await handler.handle(query):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())
        case Success(value=stats):
            return EmployeeStatsResponse.from_stats(stats)
