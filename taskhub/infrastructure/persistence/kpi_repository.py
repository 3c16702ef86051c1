"""KpiRepository: KPI metrics over a record store."""

from typing import Any

from taskhub.core.result import Failure, Result, Success
from taskhub.domain.entities import KpiMetric
from taskhub.domain.enums import Collection
from taskhub.domain.errors import StoreError
from taskhub.domain.protocols import RecordStoreProtocol
from taskhub.domain.value_objects import RecordQuery
from taskhub.infrastructure.persistence.mappers import (
    kpi_from_record,
    kpi_to_record,
    map_record,
    map_records,
    to_store_patch,
)

COLLECTION = Collection.KPIS


class KpiRepository:
    """KPI metrics stored in the `amazon_kpis` collection, newest metric_date first."""

    def __init__(self, store: RecordStoreProtocol) -> None:
        self._store = store

    async def list_all(self) -> Result[list[KpiMetric], StoreError]:
        query = RecordQuery().order_by("metric_date", descending=True)
        match await self._store.select(COLLECTION, query):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=records):
                return map_records(records, kpi_from_record, COLLECTION)

    async def add(self, metric: KpiMetric) -> Result[KpiMetric, StoreError]:
        match await self._store.insert(COLLECTION, kpi_to_record(metric)):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=record):
                return map_record(record, kpi_from_record, COLLECTION)

    async def update(
        self, metric_id: str, changes: dict[str, Any]
    ) -> Result[KpiMetric, StoreError]:
        match await self._store.update(COLLECTION, metric_id, to_store_patch(changes)):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=record):
                return map_record(record, kpi_from_record, COLLECTION)

    async def delete(self, metric_id: str) -> Result[None, StoreError]:
        return await self._store.delete(COLLECTION, metric_id)
