"""DeleteTask command handler."""

from taskhub.application.commands.task_commands import DeleteTask
from taskhub.application.services.access_policy import AccessPolicy
from taskhub.core.errors import DomainError
from taskhub.core.result import Failure, Result, Success
from taskhub.domain.enums import Action, Resource
from taskhub.domain.protocols import LoggerProtocol, TaskRepository


class DeleteTaskHandler:
    """Handler for DeleteTask command. Deleting a missing task succeeds."""

    def __init__(
        self,
        task_repo: TaskRepository,
        access_policy: AccessPolicy,
        logger: LoggerProtocol,
    ) -> None:
        self._task_repo = task_repo
        self._access_policy = access_policy
        self._logger = logger

    async def handle(self, cmd: DeleteTask) -> Result[None, DomainError]:
        match self._access_policy.authorize(cmd.principal, Resource.TASKS, Action.DELETE):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=actor):
                pass

        result = await self._task_repo.delete(cmd.task_id)
        if isinstance(result, Success):
            self._logger.info("task_deleted", task_id=cmd.task_id, deleted_by=actor.id)
        return result
