"""KpiRepository protocol for KPI metric persistence."""

from typing import Any, Protocol

from taskhub.core.result import Result
from taskhub.domain.entities import KpiMetric
from taskhub.domain.errors import StoreError


class KpiRepository(Protocol):
    """KPI metric persistence port. Lists are ordered by metric_date descending."""

    async def list_all(self) -> Result[list[KpiMetric], StoreError]:
        ...

    async def add(self, metric: KpiMetric) -> Result[KpiMetric, StoreError]:
        ...

    async def update(
        self, metric_id: str, changes: dict[str, Any]
    ) -> Result[KpiMetric, StoreError]:
        ...

    async def delete(self, metric_id: str) -> Result[None, StoreError]:
        ...
