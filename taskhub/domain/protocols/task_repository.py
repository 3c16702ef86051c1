"""TaskRepository protocol for task persistence."""

from collections.abc import Iterable
from datetime import date
from typing import Protocol

from taskhub.core.result import Result
from taskhub.domain.entities import Task
from taskhub.domain.enums import TaskStatus
from taskhub.domain.errors import StoreError


class TaskRepository(Protocol):
    """Task persistence port.

    Lists are ordered newest first (created_at descending).
    """

    async def list_all(
        self, *, assigned_to: str | None = None
    ) -> Result[list[Task], StoreError]:
        """List tasks, optionally only those assigned to ``assigned_to``."""
        ...

    async def find_by_id(self, task_id: str) -> Result[Task | None, StoreError]:
        """Find a task by id. Success(None) when missing."""
        ...

    async def add(self, task: Task) -> Result[Task, StoreError]:
        """Insert a task and return it as stored (generated id and timestamps)."""
        ...

    async def save(self, task: Task, fields: Iterable[str]) -> Result[Task, StoreError]:
        """Write the named ``fields`` of ``task`` back to the store.

        Only the listed fields are sent; others are left untouched.
        """
        ...

    async def delete(self, task_id: str) -> Result[None, StoreError]:
        """Delete a task."""
        ...

    async def count_all(self) -> Result[int, StoreError]:
        """Count every task."""
        ...

    async def count_by_status(self, status: TaskStatus) -> Result[int, StoreError]:
        """Count tasks in ``status``."""
        ...

    async def count_overdue(self, today: date) -> Result[int, StoreError]:
        """Count tasks not completed whose due date is before ``today``."""
        ...
