"""CreateTask command handler."""

from uuid_extensions import uuid7

from taskhub.application.commands.task_commands import CreateTask
from taskhub.application.services.access_policy import AccessPolicy
from taskhub.application.validation import require_text
from taskhub.core.errors import DomainError
from taskhub.core.result import Failure, Result, Success
from taskhub.domain.entities import Task, validate_progress
from taskhub.domain.enums import Action, Resource
from taskhub.domain.protocols import LoggerProtocol, TaskRepository


class CreateTaskHandler:
    """Handler for CreateTask command.

    Dependencies (injected via constructor):
        - TaskRepository: persistence
        - AccessPolicy: tasks:create gate
        - LoggerProtocol: audit-style event log
    """

    def __init__(
        self,
        task_repo: TaskRepository,
        access_policy: AccessPolicy,
        logger: LoggerProtocol,
    ) -> None:
        self._task_repo = task_repo
        self._access_policy = access_policy
        self._logger = logger

    async def handle(self, cmd: CreateTask) -> Result[Task, DomainError]:
        """Create the task with the acting principal as creator.

        Returns:
            Success(Task): Stored task.
            Failure(ForbiddenError): No tasks:create.
            Failure(ValidationError): Blank title or progress out of range.
            Failure(StoreError): Store failure.
        """
        match self._access_policy.authorize(cmd.principal, Resource.TASKS, Action.CREATE):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=actor):
                pass

        match require_text(cmd.title, "title"):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=title):
                pass

        match validate_progress(cmd.progress_percentage):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=progress):
                pass

        task = Task(
            id=str(uuid7()),
            title=title,
            created_by=actor.id,
            description=cmd.description,
            assigned_to=cmd.assigned_to,
            priority=cmd.priority,
            due_date=cmd.due_date,
            progress_percentage=progress,
            notes=cmd.notes,
        )
        task.change_status(cmd.status)

        result = await self._task_repo.add(task)
        if isinstance(result, Success):
            self._logger.info(
                "task_created",
                task_id=result.value.id,
                created_by=actor.id,
                assigned_to=result.value.assigned_to,
                status=result.value.status.value,
            )
        return result
