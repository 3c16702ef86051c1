"""Dashboard response schema."""

from pydantic import BaseModel, Field

from taskhub.application.queries.handlers.get_dashboard_stats_handler import DashboardStats


class DashboardStatsResponse(BaseModel):
    """Organisation-wide task statistics.

    Metrics whose fetch failed are reported as 0 and listed in
    ``degraded_metrics``.
    """

    total_employees: int
    total_tasks: int
    completed_tasks: int
    overdue_tasks: int
    average_completion_rate: float
    degraded_metrics: list[str] = Field(default_factory=list)

    @classmethod
    def from_stats(cls, stats: DashboardStats) -> "DashboardStatsResponse":
        return cls(
            total_employees=stats.total_employees,
            total_tasks=stats.total_tasks,
            completed_tasks=stats.completed_tasks,
            overdue_tasks=stats.overdue_tasks,
            average_completion_rate=stats.average_completion_rate,
            degraded_metrics=list(stats.degraded_metrics),
        )
