"""ListEmployees query handler."""

from taskhub.application.queries.employee_queries import ListEmployees
from taskhub.application.services.access_policy import AccessPolicy
from taskhub.core.errors import DomainError
from taskhub.core.result import Failure, Result, Success
from taskhub.domain.entities import Principal
from taskhub.domain.enums import Action, Resource, UserRole
from taskhub.domain.protocols import PrincipalRepository

# Admins are not part of the employee directory
DIRECTORY_ROLES = (UserRole.EMPLOYEE, UserRole.MANAGER)


class ListEmployeesHandler:
    """Handler for ListEmployees query."""

    def __init__(self, principal_repo: PrincipalRepository, access_policy: AccessPolicy) -> None:
        self._principal_repo = principal_repo
        self._access_policy = access_policy

    async def handle(self, query: ListEmployees) -> Result[list[Principal], DomainError]:
        match self._access_policy.authorize(query.principal, Resource.EMPLOYEES, Action.READ):
            case Failure(error=error):
                return Failure(error=error)

        return await self._principal_repo.list_by_roles(
            DIRECTORY_ROLES, active_only=query.active_only
        )
