"""Task commands (CQRS write operations).

Commands are immutable (frozen=True) keyword-only data containers; the
handlers hold the logic. ``principal`` is the acting principal, None when
the caller is unauthenticated.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from taskhub.domain.entities import Principal
from taskhub.domain.enums import TaskPriority, TaskStatus


@dataclass(frozen=True, kw_only=True)
class CreateTask:
    """Create a task; the acting principal becomes its creator.

    Attributes:
        principal: Acting principal.
        title: Non-blank title.
        description: Optional description.
        assigned_to: Assignee principal id.
        status: Initial status (completed stamps completed_at).
        priority: Urgency.
        due_date: Optional due date.
        progress_percentage: Initial progress in [0, 100].
        notes: Optional notes.
    """

    principal: Principal | None
    title: str
    description: str | None = None
    assigned_to: str | None = None
    status: TaskStatus = TaskStatus.NOT_STARTED
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: date | None = None
    progress_percentage: int = 0
    notes: str | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateTask:
    """Edit any task fields (admin/manager).

    Attributes:
        principal: Acting principal.
        task_id: Task to edit.
        changes: Field name to new value; only the listed fields change.
            Keys: title, description, assigned_to, status, priority,
            due_date, progress_percentage, notes.
    """

    principal: Principal | None
    task_id: str
    changes: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, kw_only=True)
class UpdateTaskStatus:
    """Change status and/or progress of a task.

    Employees may do this only on tasks assigned to them.

    Attributes:
        principal: Acting principal.
        task_id: Task to progress.
        status: New status, None to keep.
        progress_percentage: New progress, None to keep.
    """

    principal: Principal | None
    task_id: str
    status: TaskStatus | None = None
    progress_percentage: int | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteTask:
    """Delete a task."""

    principal: Principal | None
    task_id: str
