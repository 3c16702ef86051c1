"""UpdateTaskStatus command handler.

Status and progress are the only task fields employees can change, and only
on tasks assigned to them. Admins and managers may progress any task.
"""

from taskhub.application.commands.task_commands import UpdateTaskStatus
from taskhub.application.services.access_policy import AccessPolicy
from taskhub.core.enums import ErrorCode
from taskhub.core.errors import DomainError, NotFoundError, ValidationError
from taskhub.core.result import Failure, Result, Success
from taskhub.domain.entities import Task, validate_progress
from taskhub.domain.enums import Action, Resource
from taskhub.domain.protocols import LoggerProtocol, TaskRepository


class UpdateTaskStatusHandler:
    """Handler for UpdateTaskStatus command."""

    def __init__(
        self,
        task_repo: TaskRepository,
        access_policy: AccessPolicy,
        logger: LoggerProtocol,
    ) -> None:
        self._task_repo = task_repo
        self._access_policy = access_policy
        self._logger = logger

    async def handle(self, cmd: UpdateTaskStatus) -> Result[Task, DomainError]:
        """Change status and/or progress.

        Order of checks: role capability, input, task existence, assignee.
        No write happens unless all pass.

        Returns:
            Success(Task): Updated task.
            Failure(ForbiddenError): No tasks:update_status, or the task is
                not assigned to an employee principal.
            Failure(ValidationError): Nothing to change or progress out of range.
            Failure(NotFoundError): No such task.
            Failure(StoreError): Store failure.
        """
        match self._access_policy.authorize(
            cmd.principal, Resource.TASKS, Action.UPDATE_STATUS
        ):
            case Failure(error=error):
                return Failure(error=error)

        if cmd.status is None and cmd.progress_percentage is None:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.EMPTY_UPDATE,
                    message="Provide a status or a progress percentage",
                )
            )
        if cmd.progress_percentage is not None:
            match validate_progress(cmd.progress_percentage):
                case Failure(error=error):
                    return Failure(error=error)

        match await self._task_repo.find_by_id(cmd.task_id):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=None):
                return Failure(
                    error=NotFoundError(
                        code=ErrorCode.TASK_NOT_FOUND,
                        message="Task not found",
                        resource_type="Task",
                        resource_id=cmd.task_id,
                    )
                )
            case Success(value=task):
                pass

        match self._access_policy.authorize_task_progress(cmd.principal, task):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=actor):
                pass

        fields: list[str] = []
        previous_status = task.status
        if cmd.status is not None:
            task.change_status(cmd.status)
            fields.extend(["status", "completed_at"])
        if cmd.progress_percentage is not None:
            task.set_progress(cmd.progress_percentage)
            fields.append("progress_percentage")

        result = await self._task_repo.save(task, fields)
        if isinstance(result, Success):
            self._logger.info(
                "task_status_changed",
                task_id=task.id,
                changed_by=actor.id,
                from_status=previous_status.value,
                to_status=task.status.value,
                progress=task.progress_percentage,
            )
        return result
