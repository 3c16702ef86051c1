"""KPI metric request and response schemas."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from taskhub.domain.entities import KpiMetric
from taskhub.domain.enums import KpiDataSource, KpiPeriod


class KpiCreateRequest(BaseModel):
    """Record a KPI value. ``metric_date`` defaults to today."""

    metric_name: str = Field(..., description="Metric name", examples=["Units Sold"])
    metric_value: float | None = Field(None, description="Metric value")
    metric_date: date | None = Field(None, description="Date the value refers to")
    period: KpiPeriod = Field(default=KpiPeriod.DAILY)
    data_source: KpiDataSource = Field(default=KpiDataSource.GOOGLE_SHEETS)


class KpiUpdateRequest(BaseModel):
    """Partial KPI edit."""

    metric_name: str | None = None
    metric_value: float | None = None
    metric_date: date | None = None
    period: KpiPeriod | None = None
    data_source: KpiDataSource | None = None


class KpiResponse(BaseModel):
    id: str
    metric_name: str
    metric_date: date
    metric_value: float | None = None
    period: KpiPeriod
    data_source: KpiDataSource
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, kpi: KpiMetric) -> "KpiResponse":
        return cls(
            id=kpi.id,
            metric_name=kpi.metric_name,
            metric_date=kpi.metric_date,
            metric_value=kpi.metric_value,
            period=kpi.period,
            data_source=kpi.data_source,
            created_at=kpi.created_at,
            updated_at=kpi.updated_at,
        )


class KpiListResponse(BaseModel):
    """KPI records, most recent metric date first."""

    kpis: list[KpiResponse] = Field(default_factory=list)
    total_count: int

    @classmethod
    def from_entities(cls, kpis: list[KpiMetric]) -> "KpiListResponse":
        return cls(kpis=[KpiResponse.from_entity(k) for k in kpis], total_count=len(kpis))
