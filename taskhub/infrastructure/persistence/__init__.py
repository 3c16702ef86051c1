"""Record store adapters and repositories."""

from taskhub.infrastructure.persistence.in_memory_record_store import InMemoryRecordStore
from taskhub.infrastructure.persistence.kpi_repository import KpiRepository
from taskhub.infrastructure.persistence.principal_repository import PrincipalRepository
from taskhub.infrastructure.persistence.task_repository import TaskRepository

__all__ = [
    "InMemoryRecordStore",
    "KpiRepository",
    "PrincipalRepository",
    "TaskRepository",
]
