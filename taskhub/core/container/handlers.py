"""Handler factories (request-scoped).

Each factory assembles one handler from request-scoped repositories and
app-scoped services. Routers consume them through FastAPI ``Depends``.

Usage:
    @router.post("/tasks")
    async def create_task(
        handler: CreateTaskHandler = Depends(get_create_task_handler),
    ):
        result = await handler.handle(command)
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from taskhub.core.container.authorization import get_access_policy
from taskhub.core.container.infrastructure import get_identity_provider, get_logger
from taskhub.core.container.repositories import (
    get_kpi_repository,
    get_principal_repository,
    get_principal_resolver,
    get_task_repository,
)

if TYPE_CHECKING:
    from taskhub.application.commands.handlers.auth_handlers import (
        RefreshSessionHandler,
        RegisterPrincipalHandler,
        SignInHandler,
        SignOutHandler,
    )
    from taskhub.application.commands.handlers.create_employee_handler import (
        CreateEmployeeHandler,
    )
    from taskhub.application.commands.handlers.create_task_handler import CreateTaskHandler
    from taskhub.application.commands.handlers.delete_task_handler import DeleteTaskHandler
    from taskhub.application.commands.handlers.kpi_handlers import (
        CreateKpiHandler,
        DeleteKpiHandler,
        UpdateKpiHandler,
    )
    from taskhub.application.commands.handlers.update_employee_handler import (
        DeactivateEmployeeHandler,
        UpdateEmployeeHandler,
    )
    from taskhub.application.commands.handlers.update_task_handler import UpdateTaskHandler
    from taskhub.application.commands.handlers.update_task_status_handler import (
        UpdateTaskStatusHandler,
    )
    from taskhub.application.queries.handlers.get_dashboard_stats_handler import (
        GetDashboardStatsHandler,
    )
    from taskhub.application.queries.handlers.get_employee_handler import (
        GetEmployeeHandler,
        GetEmployeeStatsHandler,
    )
    from taskhub.application.queries.handlers.get_task_handler import GetTaskHandler
    from taskhub.application.queries.handlers.list_employees_handler import (
        ListEmployeesHandler,
    )
    from taskhub.application.queries.handlers.list_kpis_handler import ListKpisHandler
    from taskhub.application.queries.handlers.list_tasks_handler import ListTasksHandler
    from taskhub.application.services.session_watcher import PrincipalResolver
    from taskhub.domain.protocols import (
        IdentityProviderProtocol,
        KpiRepository,
        PrincipalRepository,
        TaskRepository,
    )


# ============================================================================
# Account and session handlers
# ============================================================================


def get_register_principal_handler(
    identity: "IdentityProviderProtocol" = Depends(get_identity_provider),
    principal_repo: "PrincipalRepository" = Depends(get_principal_repository),
) -> "RegisterPrincipalHandler":
    from taskhub.application.commands.handlers.auth_handlers import RegisterPrincipalHandler

    return RegisterPrincipalHandler(
        identity=identity, principal_repo=principal_repo, logger=get_logger()
    )


def get_sign_in_handler(
    identity: "IdentityProviderProtocol" = Depends(get_identity_provider),
    resolver: "PrincipalResolver" = Depends(get_principal_resolver),
) -> "SignInHandler":
    from taskhub.application.commands.handlers.auth_handlers import SignInHandler

    return SignInHandler(identity=identity, resolver=resolver, logger=get_logger())


def get_sign_out_handler(
    identity: "IdentityProviderProtocol" = Depends(get_identity_provider),
) -> "SignOutHandler":
    from taskhub.application.commands.handlers.auth_handlers import SignOutHandler

    return SignOutHandler(identity=identity, logger=get_logger())


def get_refresh_session_handler(
    identity: "IdentityProviderProtocol" = Depends(get_identity_provider),
) -> "RefreshSessionHandler":
    from taskhub.application.commands.handlers.auth_handlers import RefreshSessionHandler

    return RefreshSessionHandler(identity=identity)


# ============================================================================
# Task handlers
# ============================================================================


def get_list_tasks_handler(
    task_repo: "TaskRepository" = Depends(get_task_repository),
) -> "ListTasksHandler":
    from taskhub.application.queries.handlers.list_tasks_handler import ListTasksHandler

    return ListTasksHandler(task_repo=task_repo, access_policy=get_access_policy())


def get_get_task_handler(
    task_repo: "TaskRepository" = Depends(get_task_repository),
) -> "GetTaskHandler":
    from taskhub.application.queries.handlers.get_task_handler import GetTaskHandler

    return GetTaskHandler(task_repo=task_repo, access_policy=get_access_policy())


def get_create_task_handler(
    task_repo: "TaskRepository" = Depends(get_task_repository),
) -> "CreateTaskHandler":
    from taskhub.application.commands.handlers.create_task_handler import CreateTaskHandler

    return CreateTaskHandler(
        task_repo=task_repo, access_policy=get_access_policy(), logger=get_logger()
    )


def get_update_task_handler(
    task_repo: "TaskRepository" = Depends(get_task_repository),
) -> "UpdateTaskHandler":
    from taskhub.application.commands.handlers.update_task_handler import UpdateTaskHandler

    return UpdateTaskHandler(
        task_repo=task_repo, access_policy=get_access_policy(), logger=get_logger()
    )


def get_update_task_status_handler(
    task_repo: "TaskRepository" = Depends(get_task_repository),
) -> "UpdateTaskStatusHandler":
    from taskhub.application.commands.handlers.update_task_status_handler import (
        UpdateTaskStatusHandler,
    )

    return UpdateTaskStatusHandler(
        task_repo=task_repo, access_policy=get_access_policy(), logger=get_logger()
    )


def get_delete_task_handler(
    task_repo: "TaskRepository" = Depends(get_task_repository),
) -> "DeleteTaskHandler":
    from taskhub.application.commands.handlers.delete_task_handler import DeleteTaskHandler

    return DeleteTaskHandler(
        task_repo=task_repo, access_policy=get_access_policy(), logger=get_logger()
    )


# ============================================================================
# Employee handlers
# ============================================================================


def get_list_employees_handler(
    principal_repo: "PrincipalRepository" = Depends(get_principal_repository),
) -> "ListEmployeesHandler":
    from taskhub.application.queries.handlers.list_employees_handler import (
        ListEmployeesHandler,
    )

    return ListEmployeesHandler(principal_repo=principal_repo, access_policy=get_access_policy())


def get_get_employee_handler(
    principal_repo: "PrincipalRepository" = Depends(get_principal_repository),
) -> "GetEmployeeHandler":
    from taskhub.application.queries.handlers.get_employee_handler import GetEmployeeHandler

    return GetEmployeeHandler(principal_repo=principal_repo, access_policy=get_access_policy())


def get_get_employee_stats_handler(
    principal_repo: "PrincipalRepository" = Depends(get_principal_repository),
    task_repo: "TaskRepository" = Depends(get_task_repository),
) -> "GetEmployeeStatsHandler":
    from taskhub.application.queries.handlers.get_employee_handler import (
        GetEmployeeStatsHandler,
    )

    return GetEmployeeStatsHandler(
        principal_repo=principal_repo, task_repo=task_repo, access_policy=get_access_policy()
    )


def get_create_employee_handler(
    identity: "IdentityProviderProtocol" = Depends(get_identity_provider),
    principal_repo: "PrincipalRepository" = Depends(get_principal_repository),
) -> "CreateEmployeeHandler":
    from taskhub.application.commands.handlers.create_employee_handler import (
        CreateEmployeeHandler,
    )

    return CreateEmployeeHandler(
        identity=identity,
        principal_repo=principal_repo,
        access_policy=get_access_policy(),
        logger=get_logger(),
    )


def get_update_employee_handler(
    principal_repo: "PrincipalRepository" = Depends(get_principal_repository),
) -> "UpdateEmployeeHandler":
    from taskhub.application.commands.handlers.update_employee_handler import (
        UpdateEmployeeHandler,
    )

    return UpdateEmployeeHandler(
        principal_repo=principal_repo, access_policy=get_access_policy(), logger=get_logger()
    )


def get_deactivate_employee_handler(
    principal_repo: "PrincipalRepository" = Depends(get_principal_repository),
) -> "DeactivateEmployeeHandler":
    from taskhub.application.commands.handlers.update_employee_handler import (
        DeactivateEmployeeHandler,
    )

    return DeactivateEmployeeHandler(
        principal_repo=principal_repo, access_policy=get_access_policy(), logger=get_logger()
    )


# ============================================================================
# KPI and dashboard handlers
# ============================================================================


def get_list_kpis_handler(
    kpi_repo: "KpiRepository" = Depends(get_kpi_repository),
) -> "ListKpisHandler":
    from taskhub.application.queries.handlers.list_kpis_handler import ListKpisHandler

    return ListKpisHandler(kpi_repo=kpi_repo, access_policy=get_access_policy())


def get_create_kpi_handler(
    kpi_repo: "KpiRepository" = Depends(get_kpi_repository),
) -> "CreateKpiHandler":
    from taskhub.application.commands.handlers.kpi_handlers import CreateKpiHandler

    return CreateKpiHandler(
        kpi_repo=kpi_repo, access_policy=get_access_policy(), logger=get_logger()
    )


def get_update_kpi_handler(
    kpi_repo: "KpiRepository" = Depends(get_kpi_repository),
) -> "UpdateKpiHandler":
    from taskhub.application.commands.handlers.kpi_handlers import UpdateKpiHandler

    return UpdateKpiHandler(
        kpi_repo=kpi_repo, access_policy=get_access_policy(), logger=get_logger()
    )


def get_delete_kpi_handler(
    kpi_repo: "KpiRepository" = Depends(get_kpi_repository),
) -> "DeleteKpiHandler":
    from taskhub.application.commands.handlers.kpi_handlers import DeleteKpiHandler

    return DeleteKpiHandler(
        kpi_repo=kpi_repo, access_policy=get_access_policy(), logger=get_logger()
    )


def get_dashboard_stats_handler(
    principal_repo: "PrincipalRepository" = Depends(get_principal_repository),
    task_repo: "TaskRepository" = Depends(get_task_repository),
) -> "GetDashboardStatsHandler":
    from taskhub.application.queries.handlers.get_dashboard_stats_handler import (
        GetDashboardStatsHandler,
    )

    return GetDashboardStatsHandler(
        principal_repo=principal_repo,
        task_repo=task_repo,
        access_policy=get_access_policy(),
        logger=get_logger(),
    )
