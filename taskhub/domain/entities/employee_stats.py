"""Per-employee task statistics.

Derived read model: recomputed from Task records on every request and
never written back to the store.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from taskhub.domain.entities.task import Task
from taskhub.domain.enums import TaskStatus


def completion_rate(completed: int, total: int) -> float:
    """Percentage of completed tasks, 0 when there are no tasks."""
    return (completed / total) * 100 if total > 0 else 0.0


@dataclass(frozen=True, slots=True, kw_only=True)
class EmployeeStats:
    """Task counts and completion rate for one principal.

    Attributes:
        principal_id: Principal the statistics describe.
        total_tasks_assigned: Tasks currently assigned to the principal.
        tasks_completed: Assigned tasks in COMPLETED status.
        tasks_in_progress: Assigned tasks in IN_PROGRESS status.
        tasks_overdue: Assigned tasks past due and not completed.
        completion_rate: tasks_completed / total_tasks_assigned * 100.
    """

    principal_id: str
    total_tasks_assigned: int
    tasks_completed: int
    tasks_in_progress: int
    tasks_overdue: int
    completion_rate: float

    @classmethod
    def from_tasks(
        cls, principal_id: str, tasks: Iterable[Task], *, today: date
    ) -> "EmployeeStats":
        """Aggregate the tasks assigned to ``principal_id``.

        Tasks assigned to anyone else are ignored.
        """
        assigned = [t for t in tasks if t.is_assigned_to(principal_id)]
        completed = sum(1 for t in assigned if t.status == TaskStatus.COMPLETED)
        return cls(
            principal_id=principal_id,
            total_tasks_assigned=len(assigned),
            tasks_completed=completed,
            tasks_in_progress=sum(1 for t in assigned if t.status == TaskStatus.IN_PROGRESS),
            tasks_overdue=sum(1 for t in assigned if t.is_overdue(today)),
            completion_rate=completion_rate(completed, len(assigned)),
        )
