"""UpdateTask command handler.

Full edit for principals holding tasks:update. A status change goes through
Task.change_status so completed_at follows it.
"""

from typing import Any

from taskhub.application.commands.task_commands import UpdateTask
from taskhub.application.services.access_policy import AccessPolicy
from taskhub.application.validation import require_text, restrict_changes
from taskhub.core.enums import ErrorCode
from taskhub.core.errors import DomainError, NotFoundError
from taskhub.core.result import Failure, Result, Success
from taskhub.domain.entities import Task
from taskhub.domain.enums import Action, Resource
from taskhub.domain.protocols import LoggerProtocol, TaskRepository

EDITABLE_FIELDS = (
    "title",
    "description",
    "assigned_to",
    "status",
    "priority",
    "due_date",
    "progress_percentage",
    "notes",
)
NON_NULLABLE_FIELDS = ("title", "status", "priority", "progress_percentage")


class UpdateTaskHandler:
    """Handler for UpdateTask command."""

    def __init__(
        self,
        task_repo: TaskRepository,
        access_policy: AccessPolicy,
        logger: LoggerProtocol,
    ) -> None:
        self._task_repo = task_repo
        self._access_policy = access_policy
        self._logger = logger

    async def handle(self, cmd: UpdateTask) -> Result[Task, DomainError]:
        """Apply ``cmd.changes`` to the task.

        Returns:
            Success(Task): Updated task.
            Failure(ForbiddenError): No tasks:update.
            Failure(ValidationError): Empty/unknown changes, null required
                fields, blank title, progress out of range.
            Failure(NotFoundError): No such task.
            Failure(StoreError): Store failure.
        """
        match self._access_policy.authorize(cmd.principal, Resource.TASKS, Action.UPDATE):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=actor):
                pass

        match restrict_changes(cmd.changes, EDITABLE_FIELDS, NON_NULLABLE_FIELDS):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=changes):
                pass

        if "title" in changes:
            match require_text(changes["title"], "title"):
                case Failure(error=error):
                    return Failure(error=error)
                case Success(value=title):
                    changes["title"] = title

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

        match apply_task_changes(task, changes):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=fields):
                pass

        result = await self._task_repo.save(task, fields)
        if isinstance(result, Success):
            self._logger.info(
                "task_updated",
                task_id=task.id,
                updated_by=actor.id,
                fields=sorted(fields),
            )
        return result


def apply_task_changes(task: Task, changes: dict[str, Any]) -> Result[list[str], DomainError]:
    """Apply validated changes in place and list the fields to write back.

    A status change also writes completed_at.
    """
    fields: list[str] = []
    for name, value in changes.items():
        match name:
            case "status":
                task.change_status(value)
                fields.extend(["status", "completed_at"])
            case "progress_percentage":
                match task.set_progress(value):
                    case Failure(error=error):
                        return Failure(error=error)
                fields.append(name)
            case _:
                setattr(task, name, value)
                fields.append(name)
    return Success(value=fields)
