"""KPI metric enumerations.

KpiPeriod: aggregation window a metric value covers.
KpiDataSource: where the metric value was obtained.
"""

from enum import Enum


class KpiPeriod(str, Enum):
    """Aggregation window of a KPI metric."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class KpiDataSource(str, Enum):
    """Origin of a KPI metric value."""

    GOOGLE_SHEETS = "google_sheets"
    AMAZON_API = "amazon_api"
    MANUAL = "manual"
    OTHER = "other"
