"""Task request and response schemas.

Update requests are partial: only the fields present in the request body
are changed (``model_dump(exclude_unset=True)``).
"""

from datetime import date, datetime

from pydantic import BaseModel, Field

from taskhub.domain.entities import Task
from taskhub.domain.enums import TaskPriority, TaskStatus

# =============================================================================
# Request Schemas
# =============================================================================


class TaskCreateRequest(BaseModel):
    """Create task request.

    Progress is range-checked by the domain so out-of-range values are
    reported as a 400 with the offending field.
    """

    title: str = Field(..., description="Short title", examples=["Restock aisle 4"])
    description: str | None = Field(None, description="Long description")
    assigned_to: str | None = Field(None, description="Assignee principal id")
    status: TaskStatus = Field(default=TaskStatus.NOT_STARTED, description="Initial status")
    priority: TaskPriority = Field(default=TaskPriority.MEDIUM, description="Urgency")
    due_date: date | None = Field(None, description="Due date")
    progress_percentage: int = Field(default=0, description="Progress in [0, 100]")
    notes: str | None = Field(None, description="Free-form notes")


class TaskUpdateRequest(BaseModel):
    """Partial task edit."""

    title: str | None = None
    description: str | None = None
    assigned_to: str | None = None
    status: TaskStatus | None = None
    priority: TaskPriority | None = None
    due_date: date | None = None
    progress_percentage: int | None = None
    notes: str | None = None


class TaskStatusUpdateRequest(BaseModel):
    """Status and/or progress change (the only edit employees may make)."""

    status: TaskStatus | None = Field(None, description="New status")
    progress_percentage: int | None = Field(None, description="New progress")


# =============================================================================
# Response Schemas
# =============================================================================


class TaskResponse(BaseModel):
    """Single task."""

    id: str
    title: str
    description: str | None = None
    assigned_to: str | None = None
    created_by: str
    status: TaskStatus
    priority: TaskPriority
    due_date: date | None = None
    completed_at: datetime | None = None
    progress_percentage: int
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, task: Task) -> "TaskResponse":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            assigned_to=task.assigned_to,
            created_by=task.created_by,
            status=task.status,
            priority=task.priority,
            due_date=task.due_date,
            completed_at=task.completed_at,
            progress_percentage=task.progress_percentage,
            notes=task.notes,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )


class TaskListResponse(BaseModel):
    """Visible tasks, newest first."""

    tasks: list[TaskResponse] = Field(default_factory=list)
    total_count: int = Field(..., description="Number of tasks returned")

    @classmethod
    def from_entities(cls, tasks: list[Task]) -> "TaskListResponse":
        return cls(tasks=[TaskResponse.from_entity(t) for t in tasks], total_count=len(tasks))
