"""KPI metric domain entity."""

from dataclasses import dataclass
from datetime import date, datetime

from taskhub.domain.enums import KpiDataSource, KpiPeriod


@dataclass
class KpiMetric:
    """A single business KPI observation.

    Attributes:
        id: Record identifier.
        metric_name: Name of the metric (e.g., "Units Sold").
        metric_date: Date the value refers to.
        metric_value: Numeric value, None when not yet known.
        period: Aggregation window.
        data_source: Origin of the value.
        created_at: Row creation timestamp.
        updated_at: Row update timestamp.
    """

    id: str
    metric_name: str
    metric_date: date
    metric_value: float | None = None
    period: KpiPeriod = KpiPeriod.DAILY
    data_source: KpiDataSource = KpiDataSource.GOOGLE_SHEETS
    created_at: datetime | None = None
    updated_at: datetime | None = None
