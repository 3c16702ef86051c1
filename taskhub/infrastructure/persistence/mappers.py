"""Record <-> entity mapping.

Records are what the record store speaks: flat dicts of JSON scalars with
dates and timestamps as ISO 8601 strings and enums as their values.
"""

from collections.abc import Callable
from datetime import date, datetime
from enum import Enum
from typing import Any

from taskhub.core.enums import ErrorCode
from taskhub.core.result import Failure, Result, Success
from taskhub.domain.entities import KpiMetric, Principal, Task
from taskhub.domain.enums import (
    Collection,
    KpiDataSource,
    KpiPeriod,
    TaskPriority,
    TaskStatus,
    UserRole,
)
from taskhub.domain.errors import StoreError

type Record = dict[str, Any]


def to_store_value(value: Any) -> Any:
    """Convert an entity field value into its record representation."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime | date):
        return value.isoformat()
    return value


def to_store_patch(changes: dict[str, Any]) -> Record:
    return {field: to_store_value(value) for field, value in changes.items()}


def _parse_date(raw: Any) -> date | None:
    if raw is None or isinstance(raw, date):
        return raw
    return date.fromisoformat(str(raw)[:10])


def _parse_datetime(raw: Any) -> datetime | None:
    if raw is None or isinstance(raw, datetime):
        return raw
    return datetime.fromisoformat(str(raw))


def principal_from_record(record: Record) -> Principal:
    """Build a Principal from a `users` row.

    Raises:
        KeyError: Required column missing.
        ValueError: Unknown role or malformed timestamp.
    """
    return Principal(
        id=str(record["id"]),
        email=record["email"],
        full_name=record.get("full_name") or "",
        role=UserRole(record["role"]),
        department=record.get("department"),
        is_active=record.get("is_active", True) is not False,
        avatar_url=record.get("avatar_url"),
        created_at=_parse_datetime(record.get("created_at")),
        updated_at=_parse_datetime(record.get("updated_at")),
    )


def principal_to_record(principal: Principal) -> Record:
    """`users` row for a new profile; store-managed timestamps are omitted."""
    return {
        "id": principal.id,
        "email": principal.email,
        "full_name": principal.full_name,
        "role": principal.role.value,
        "department": principal.department,
        "is_active": principal.is_active,
        "avatar_url": principal.avatar_url,
    }


def task_from_record(record: Record) -> Task:
    """Build a Task from a `tasks` row.

    Raises:
        KeyError: Required column missing.
        ValueError: Unknown enum value, malformed date or progress out of range.
    """
    return Task(
        id=str(record["id"]),
        title=record["title"],
        created_by=str(record["created_by"]),
        description=record.get("description"),
        assigned_to=record.get("assigned_to"),
        status=TaskStatus(record.get("status") or TaskStatus.NOT_STARTED.value),
        priority=TaskPriority(record.get("priority") or TaskPriority.MEDIUM.value),
        due_date=_parse_date(record.get("due_date")),
        completed_at=_parse_datetime(record.get("completed_at")),
        progress_percentage=int(record.get("progress_percentage") or 0),
        notes=record.get("notes"),
        created_at=_parse_datetime(record.get("created_at")),
        updated_at=_parse_datetime(record.get("updated_at")),
    )


TASK_WRITABLE_FIELDS = (
    "title",
    "description",
    "assigned_to",
    "created_by",
    "status",
    "priority",
    "due_date",
    "completed_at",
    "progress_percentage",
    "notes",
)


def task_to_record(task: Task, fields: tuple[str, ...] = TASK_WRITABLE_FIELDS) -> Record:
    """Serialize the named task fields.

    Raises:
        ValueError: A field outside TASK_WRITABLE_FIELDS was requested.
    """
    unknown = set(fields) - set(TASK_WRITABLE_FIELDS)
    if unknown:
        raise ValueError(f"Not writable task fields: {sorted(unknown)}")
    return {field: to_store_value(getattr(task, field)) for field in fields}


def kpi_from_record(record: Record) -> KpiMetric:
    metric_value = record.get("metric_value")
    return KpiMetric(
        id=str(record["id"]),
        metric_name=record["metric_name"],
        metric_date=_parse_date(record["metric_date"]),
        metric_value=float(metric_value) if metric_value is not None else None,
        period=KpiPeriod(record.get("period") or KpiPeriod.DAILY.value),
        data_source=KpiDataSource(record.get("data_source") or KpiDataSource.GOOGLE_SHEETS.value),
        created_at=_parse_datetime(record.get("created_at")),
        updated_at=_parse_datetime(record.get("updated_at")),
    )


def kpi_to_record(metric: KpiMetric) -> Record:
    return {
        "id": metric.id,
        "metric_name": metric.metric_name,
        "metric_value": metric.metric_value,
        "metric_date": to_store_value(metric.metric_date),
        "period": metric.period.value,
        "data_source": metric.data_source.value,
    }


def map_records[T](
    records: list[Record], mapper: Callable[[Record], T], collection: Collection
) -> Result[list[T], StoreError]:
    """Apply ``mapper`` to every record; a malformed record fails the whole batch."""
    mapped: list[T] = []
    for record in records:
        match map_record(record, mapper, collection):
            case Success(value=entity):
                mapped.append(entity)
            case Failure(error=error):
                return Failure(error=error)
    return Success(value=mapped)


def map_record[T](
    record: Record, mapper: Callable[[Record], T], collection: Collection
) -> Result[T, StoreError]:
    """Apply ``mapper`` to one record, reporting malformed rows as StoreError."""
    try:
        return Success(value=mapper(record))
    except (KeyError, TypeError, ValueError) as e:
        return Failure(
            error=StoreError(
                code=ErrorCode.STORE_INVALID_RESPONSE,
                message=f"Malformed {collection.value} record",
                collection=collection.value,
                details={"id": record.get("id"), "reason": str(e)},
            )
        )
