"""TaskRepository: tasks over a record store.

Lists are newest first. Counting helpers back the dashboard metrics.
"""

from collections.abc import Iterable
from datetime import date

from taskhub.core.result import Failure, Result, Success
from taskhub.domain.entities import Task
from taskhub.domain.enums import Collection, TaskStatus
from taskhub.domain.errors import StoreError
from taskhub.domain.protocols import RecordStoreProtocol
from taskhub.domain.value_objects import RecordQuery
from taskhub.infrastructure.persistence.mappers import (
    map_record,
    map_records,
    task_from_record,
    task_to_record,
)

COLLECTION = Collection.TASKS


class TaskRepository:
    """Tasks stored in the `tasks` collection."""

    def __init__(self, store: RecordStoreProtocol) -> None:
        self._store = store

    async def list_all(
        self, *, assigned_to: str | None = None
    ) -> Result[list[Task], StoreError]:
        query = RecordQuery()
        if assigned_to is not None:
            query = query.where_eq("assigned_to", assigned_to)
        query = query.order_by("created_at", descending=True)

        match await self._store.select(COLLECTION, query):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=records):
                return map_records(records, task_from_record, COLLECTION)

    async def find_by_id(self, task_id: str) -> Result[Task | None, StoreError]:
        query = RecordQuery().where_eq("id", task_id).limited(1)
        match await self._store.select(COLLECTION, query):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=[]):
                return Success(value=None)
            case Success(value=[record, *_]):
                return map_record(record, task_from_record, COLLECTION)

    async def add(self, task: Task) -> Result[Task, StoreError]:
        record = {"id": task.id, **task_to_record(task)}
        match await self._store.insert(COLLECTION, record):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=stored):
                return map_record(stored, task_from_record, COLLECTION)

    async def save(self, task: Task, fields: Iterable[str]) -> Result[Task, StoreError]:
        patch = task_to_record(task, tuple(fields))
        match await self._store.update(COLLECTION, task.id, patch):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=stored):
                return map_record(stored, task_from_record, COLLECTION)

    async def delete(self, task_id: str) -> Result[None, StoreError]:
        return await self._store.delete(COLLECTION, task_id)

    async def count_all(self) -> Result[int, StoreError]:
        return await self._count(RecordQuery())

    async def count_by_status(self, status: TaskStatus) -> Result[int, StoreError]:
        return await self._count(RecordQuery().where_eq("status", status.value))

    async def count_overdue(self, today: date) -> Result[int, StoreError]:
        query = (
            RecordQuery()
            .where_neq("status", TaskStatus.COMPLETED.value)
            .where_lt("due_date", today.isoformat())
        )
        return await self._count(query)

    async def _count(self, query: RecordQuery) -> Result[int, StoreError]:
        match await self._store.select(COLLECTION, query.selecting("id")):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=records):
                return Success(value=len(records))
