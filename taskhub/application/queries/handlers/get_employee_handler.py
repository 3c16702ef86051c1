"""GetEmployee and GetEmployeeStats query handlers."""

from datetime import date

from taskhub.application.queries.employee_queries import GetEmployee, GetEmployeeStats
from taskhub.application.services.access_policy import AccessPolicy
from taskhub.core.enums import ErrorCode
from taskhub.core.errors import DomainError, NotFoundError
from taskhub.core.result import Failure, Result, Success
from taskhub.domain.entities import EmployeeStats, Principal
from taskhub.domain.enums import Action, Resource
from taskhub.domain.protocols import PrincipalRepository, TaskRepository


def principal_not_found(principal_id: str) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.PRINCIPAL_NOT_FOUND,
        message="Employee not found",
        resource_type="Principal",
        resource_id=principal_id,
    )


class GetEmployeeHandler:
    """Handler for GetEmployee query."""

    def __init__(self, principal_repo: PrincipalRepository, access_policy: AccessPolicy) -> None:
        self._principal_repo = principal_repo
        self._access_policy = access_policy

    async def handle(self, query: GetEmployee) -> Result[Principal, DomainError]:
        match self._access_policy.authorize(query.principal, Resource.EMPLOYEES, Action.READ):
            case Failure(error=error):
                return Failure(error=error)

        match await self._principal_repo.find_by_id(query.employee_id):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=None):
                return Failure(error=principal_not_found(query.employee_id))
            case Success(value=employee):
                return Success(value=employee)


class GetEmployeeStatsHandler:
    """Handler for GetEmployeeStats query.

    Statistics are recomputed from the employee's assigned tasks on every
    call; nothing is cached or stored.
    """

    def __init__(
        self,
        principal_repo: PrincipalRepository,
        task_repo: TaskRepository,
        access_policy: AccessPolicy,
    ) -> None:
        self._principal_repo = principal_repo
        self._task_repo = task_repo
        self._access_policy = access_policy

    async def handle(self, query: GetEmployeeStats) -> Result[EmployeeStats, DomainError]:
        match self._access_policy.authorize(query.principal, Resource.EMPLOYEES, Action.READ):
            case Failure(error=error):
                return Failure(error=error)

        match await self._principal_repo.find_by_id(query.employee_id):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=None):
                return Failure(error=principal_not_found(query.employee_id))

        match await self._task_repo.list_all(assigned_to=query.employee_id):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=tasks):
                return Success(
                    value=EmployeeStats.from_tasks(query.employee_id, tasks, today=date.today())
                )
