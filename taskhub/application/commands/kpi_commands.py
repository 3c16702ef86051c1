"""KPI metric commands (CQRS write operations). Admin only."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from taskhub.domain.entities import Principal
from taskhub.domain.enums import KpiDataSource, KpiPeriod


@dataclass(frozen=True, kw_only=True)
class CreateKpi:
    """Record a KPI metric value.

    Attributes:
        principal: Acting principal.
        metric_name: Non-blank metric name.
        metric_value: Value, None when unknown.
        metric_date: Date the value refers to; today when None.
        period: Aggregation window.
        data_source: Origin of the value.
    """

    principal: Principal | None
    metric_name: str
    metric_value: float | None = None
    metric_date: date | None = None
    period: KpiPeriod = KpiPeriod.DAILY
    data_source: KpiDataSource = KpiDataSource.GOOGLE_SHEETS


@dataclass(frozen=True, kw_only=True)
class UpdateKpi:
    """Edit KPI fields (metric_name, metric_value, metric_date, period, data_source)."""

    principal: Principal | None
    kpi_id: str
    changes: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, kw_only=True)
class DeleteKpi:
    principal: Principal | None
    kpi_id: str
