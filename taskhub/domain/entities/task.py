"""Task domain entity.

Business Rules:
    - completed_at is set if and only if status is COMPLETED. The rule is
      applied on every status change, not only at creation.
    - progress_percentage stays within [0, 100].
    - Any status may follow any other status.
"""

from dataclasses import dataclass
from datetime import UTC, date, datetime

from taskhub.core.enums import ErrorCode
from taskhub.core.errors import ValidationError
from taskhub.core.result import Failure, Result, Success
from taskhub.domain.enums import TaskPriority, TaskStatus

MIN_PROGRESS = 0
MAX_PROGRESS = 100


def validate_progress(value: int) -> Result[int, ValidationError]:
    """Check a progress percentage against the [0, 100] range.

    Args:
        value: Candidate progress percentage.

    Returns:
        Success(value) when in range, Failure(ValidationError) otherwise.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_PROGRESS,
                message="Progress must be an integer",
                field="progress_percentage",
            )
        )
    if not MIN_PROGRESS <= value <= MAX_PROGRESS:
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_PROGRESS,
                message=f"Progress must be between {MIN_PROGRESS} and {MAX_PROGRESS}",
                field="progress_percentage",
                details={"value": value},
            )
        )
    return Success(value=value)


@dataclass
class Task:
    """Unit of work created by a manager or admin and assigned to a principal.

    Attributes:
        id: Task identifier.
        title: Short title.
        created_by: Principal id of the creator.
        description: Optional long description.
        assigned_to: Principal id of the assignee (None when unassigned).
        status: Lifecycle status.
        priority: Urgency level.
        due_date: Optional due date.
        completed_at: Completion timestamp, present only while COMPLETED.
        progress_percentage: Integer progress in [0, 100].
        notes: Optional free-form notes.
        created_at: Row creation timestamp.
        updated_at: Row update timestamp.

    Example:
        >>> task = Task(id="t1", title="Ship", created_by="m1")
        >>> task.change_status(TaskStatus.COMPLETED)
        >>> task.completed_at is not None
        True
        >>> task.change_status(TaskStatus.ON_HOLD)
        >>> task.completed_at is None
        True
    """

    id: str
    title: str
    created_by: str
    description: str | None = None
    assigned_to: str | None = None
    status: TaskStatus = TaskStatus.NOT_STARTED
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: date | None = None
    completed_at: datetime | None = None
    progress_percentage: int = 0
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if isinstance(validate_progress(self.progress_percentage), Failure):
            raise ValueError(
                f"progress_percentage must be between {MIN_PROGRESS} and {MAX_PROGRESS}"
            )

    def change_status(self, status: TaskStatus, *, now: datetime | None = None) -> None:
        """Move the task to ``status`` and realign completed_at.

        COMPLETED stamps completed_at with ``now`` (current UTC time by
        default) unless the task is already completed; every other status
        clears it.

        Args:
            status: Target status. Any status is reachable from any other.
            now: Completion timestamp override.
        """
        already_completed = self.status.is_completed and self.completed_at is not None
        self.status = status
        if status.is_completed:
            if not already_completed:
                self.completed_at = now or datetime.now(UTC)
        else:
            self.completed_at = None

    def set_progress(self, value: int) -> Result[None, ValidationError]:
        """Update progress_percentage after range validation.

        Args:
            value: New progress percentage.

        Returns:
            Success(None) on update, Failure(ValidationError) when out of range.
        """
        match validate_progress(value):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=progress):
                self.progress_percentage = progress
        return Success(value=None)

    def is_assigned_to(self, principal_id: str) -> bool:
        """True when the task's assignee is ``principal_id``."""
        return self.assigned_to is not None and self.assigned_to == principal_id

    def is_overdue(self, today: date) -> bool:
        """Not completed and due strictly before ``today``."""
        if self.due_date is None or self.status.is_completed:
            return False
        return self.due_date < today
