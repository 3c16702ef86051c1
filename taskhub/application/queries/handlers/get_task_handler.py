"""GetTask query handler."""

from taskhub.application.queries.task_queries import GetTask
from taskhub.application.services.access_policy import AccessPolicy
from taskhub.core.errors import DomainError
from taskhub.core.result import Failure, Result, Success
from taskhub.domain.entities import Task
from taskhub.domain.enums import Action, Resource
from taskhub.domain.protocols import TaskRepository


class GetTaskHandler:
    """Handler for GetTask query.

    Visibility is a filter: a task the principal may not see reads exactly
    like a missing one.
    """

    def __init__(self, task_repo: TaskRepository, access_policy: AccessPolicy) -> None:
        self._task_repo = task_repo
        self._access_policy = access_policy

    async def handle(self, query: GetTask) -> Result[Task | None, DomainError]:
        match self._access_policy.authorize(query.principal, Resource.TASKS, Action.READ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=actor):
                pass

        match await self._task_repo.find_by_id(query.task_id):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=None):
                return Success(value=None)
            case Success(value=task):
                if not self._access_policy.can_read_task(actor, task):
                    return Success(value=None)
                return Success(value=task)
