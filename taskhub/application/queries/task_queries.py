"""Task queries (CQRS read operations). Queries never change state."""

from dataclasses import dataclass

from taskhub.domain.entities import Principal


@dataclass(frozen=True, kw_only=True)
class ListTasks:
    """List the tasks visible to the principal, newest first.

    Attributes:
        principal: Acting principal.
        assigned_to: Optional assignee filter. Employees only ever see their
            own tasks, whatever this is set to.
    """

    principal: Principal | None
    assigned_to: str | None = None


@dataclass(frozen=True, kw_only=True)
class GetTask:
    """Get a single task; an invisible task reads as absent."""

    principal: Principal | None
    task_id: str
