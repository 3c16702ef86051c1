"""KPI metric queries."""

from dataclasses import dataclass

from taskhub.domain.entities import Principal


@dataclass(frozen=True, kw_only=True)
class ListKpis:
    """List KPI metrics, newest metric_date first."""

    principal: Principal | None
