"""Commands (CQRS write operations)."""

from taskhub.application.commands.auth_commands import (
    RefreshSession,
    RegisterPrincipal,
    SignIn,
    SignOut,
)
from taskhub.application.commands.employee_commands import (
    CreateEmployee,
    DeactivateEmployee,
    UpdateEmployee,
)
from taskhub.application.commands.kpi_commands import CreateKpi, DeleteKpi, UpdateKpi
from taskhub.application.commands.task_commands import (
    CreateTask,
    DeleteTask,
    UpdateTask,
    UpdateTaskStatus,
)

__all__ = [
    "CreateEmployee",
    "CreateKpi",
    "CreateTask",
    "DeactivateEmployee",
    "DeleteKpi",
    "DeleteTask",
    "RefreshSession",
    "RegisterPrincipal",
    "SignIn",
    "SignOut",
    "UpdateEmployee",
    "UpdateKpi",
    "UpdateTask",
    "UpdateTaskStatus",
]
