"""Tasks resource router.

Endpoints:
    GET    /tasks              - List visible tasks
    POST   /tasks              - Create task
    GET    /tasks/{id}         - Get task
    PATCH  /tasks/{id}         - Edit task
    PATCH  /tasks/{id}/status  - Change status/progress
    DELETE /tasks/{id}         - Delete task
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Request, status
from fastapi.responses import JSONResponse, Response

from taskhub.application.commands import CreateTask, DeleteTask, UpdateTask, UpdateTaskStatus
from taskhub.application.commands.handlers.create_task_handler import CreateTaskHandler
from taskhub.application.commands.handlers.delete_task_handler import DeleteTaskHandler
from taskhub.application.commands.handlers.update_task_handler import UpdateTaskHandler
from taskhub.application.commands.handlers.update_task_status_handler import (
    UpdateTaskStatusHandler,
)
from taskhub.application.queries import GetTask, ListTasks
from taskhub.application.queries.handlers.get_task_handler import GetTaskHandler
from taskhub.application.queries.handlers.list_tasks_handler import ListTasksHandler
from taskhub.core.container import (
    get_create_task_handler,
    get_delete_task_handler,
    get_get_task_handler,
    get_list_tasks_handler,
    get_update_task_handler,
    get_update_task_status_handler,
)
from taskhub.core.enums import ErrorCode
from taskhub.core.errors import NotFoundError
from taskhub.core.result import Failure, Success
from taskhub.presentation.routers.api.middleware.auth_dependencies import CurrentPrincipal
from taskhub.presentation.routers.api.middleware.trace_middleware import get_trace_id
from taskhub.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from taskhub.schemas.task_schemas import (
    TaskCreateRequest,
    TaskListResponse,
    TaskResponse,
    TaskStatusUpdateRequest,
    TaskUpdateRequest,
)

router = APIRouter(prefix="/tasks", tags=["Tasks"])

TaskId = Annotated[str, Path(description="Task identifier")]

_ERROR_RESPONSES = {
    400: {"model": ProblemDetails},
    401: {"model": ProblemDetails},
    403: {"model": ProblemDetails},
    404: {"model": ProblemDetails},
    502: {"model": ProblemDetails},
}


@router.get("", response_model=TaskListResponse, responses=_ERROR_RESPONSES, summary="List tasks")
async def list_tasks(
    request: Request,
    principal: CurrentPrincipal,
    assigned_to: Annotated[str | None, Query(description="Filter by assignee")] = None,
    handler: ListTasksHandler = Depends(get_list_tasks_handler),
) -> TaskListResponse | JSONResponse:
    """List the tasks visible to the caller, newest first.

    GET /api/v1/tasks -> 200 OK. Employees only ever receive their own tasks.
    """
    match await handler.handle(ListTasks(principal=principal, assigned_to=assigned_to)):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())
        case Success(value=tasks):
            return TaskListResponse.from_entities(tasks)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=TaskResponse,
    responses=_ERROR_RESPONSES,
    summary="Create task",
)
async def create_task(
    request: Request,
    principal: CurrentPrincipal,
    data: TaskCreateRequest,
    handler: CreateTaskHandler = Depends(get_create_task_handler),
) -> TaskResponse | JSONResponse:
    command = CreateTask(principal=principal, **data.model_dump())

    match await handler.handle(command):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())
        case Success(value=task):
            return TaskResponse.from_entity(task)


@router.get(
    "/{task_id}", response_model=TaskResponse, responses=_ERROR_RESPONSES, summary="Get task"
)
async def get_task(
    request: Request,
    principal: CurrentPrincipal,
    task_id: TaskId,
    handler: GetTaskHandler = Depends(get_get_task_handler),
) -> TaskResponse | JSONResponse:
    """Get one task. Tasks the caller may not see are reported as missing."""
    match await handler.handle(GetTask(principal=principal, task_id=task_id)):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())
        case Success(value=None):
            missing = NotFoundError(
                code=ErrorCode.TASK_NOT_FOUND,
                message="Task not found",
                resource_type="Task",
                resource_id=task_id,
            )
            return ErrorResponseBuilder.from_domain_error(missing, request, get_trace_id())
        case Success(value=task):
            return TaskResponse.from_entity(task)


@router.patch(
    "/{task_id}", response_model=TaskResponse, responses=_ERROR_RESPONSES, summary="Edit task"
)
async def update_task(
    request: Request,
    principal: CurrentPrincipal,
    task_id: TaskId,
    data: TaskUpdateRequest,
    handler: UpdateTaskHandler = Depends(get_update_task_handler),
) -> TaskResponse | JSONResponse:
    command = UpdateTask(
        principal=principal, task_id=task_id, changes=data.model_dump(exclude_unset=True)
    )

    match await handler.handle(command):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())
        case Success(value=task):
            return TaskResponse.from_entity(task)


@router.patch(
    "/{task_id}/status",
    response_model=TaskResponse,
    responses=_ERROR_RESPONSES,
    summary="Change task status",
)
async def update_task_status(
    request: Request,
    principal: CurrentPrincipal,
    task_id: TaskId,
    data: TaskStatusUpdateRequest,
    handler: UpdateTaskStatusHandler = Depends(get_update_task_status_handler),
) -> TaskResponse | JSONResponse:
    """Change status and/or progress.

    Employees may only progress tasks assigned to them. Moving to completed
    stamps completed_at; moving away clears it.
    """
    command = UpdateTaskStatus(
        principal=principal,
        task_id=task_id,
        status=data.status,
        progress_percentage=data.progress_percentage,
    )

    match await handler.handle(command):
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())
        case Success(value=task):
            return TaskResponse.from_entity(task)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_ERROR_RESPONSES,
    summary="Delete task",
)
async def delete_task(
    request: Request,
    principal: CurrentPrincipal,
    task_id: TaskId,
    handler: DeleteTaskHandler = Depends(get_delete_task_handler),
) -> Response:
    result = await handler.handle(DeleteTask(principal=principal, task_id=task_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request, get_trace_id())
    return Response(status_code=status.HTTP_204_NO_CONTENT)
