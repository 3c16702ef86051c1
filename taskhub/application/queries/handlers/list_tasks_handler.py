"""ListTasks query handler.

Employees are scoped twice: the assignee filter is pushed to the store and
the visibility rule is applied again to whatever comes back.
"""

from taskhub.application.queries.task_queries import ListTasks
from taskhub.application.services.access_policy import AccessPolicy
from taskhub.core.errors import DomainError
from taskhub.core.result import Failure, Result, Success
from taskhub.domain.entities import Task
from taskhub.domain.enums import Action, Resource
from taskhub.domain.protocols import TaskRepository


class ListTasksHandler:
    """Handler for ListTasks query."""

    def __init__(self, task_repo: TaskRepository, access_policy: AccessPolicy) -> None:
        self._task_repo = task_repo
        self._access_policy = access_policy

    async def handle(self, query: ListTasks) -> Result[list[Task], DomainError]:
        """List the tasks visible to the acting principal.

        Returns:
            Success(list[Task]): Visible tasks, newest first. An employee
                filtering on another assignee gets an empty list.
            Failure(ForbiddenError): Unauthenticated or no tasks:read.
            Failure(StoreError): Store failure.
        """
        match self._access_policy.authorize(query.principal, Resource.TASKS, Action.READ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=actor):
                pass

        scope = self._access_policy.task_scope(actor)
        if scope is not None and query.assigned_to not in (None, scope):
            return Success(value=[])
        assigned_to = scope if scope is not None else query.assigned_to

        match await self._task_repo.list_all(assigned_to=assigned_to):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=tasks):
                return Success(value=self._access_policy.visible_tasks(actor, tasks))
