"""GetDashboardStats query handler.

The four headline counts are independent reads issued concurrently. Each
read reduces to an integer on its own: a failed read (Failure or raised
exception) contributes 0 and is logged, and the aggregate is still
returned.
"""

import asyncio
from dataclasses import dataclass
from datetime import date

from taskhub.application.queries.dashboard_queries import GetDashboardStats
from taskhub.application.services.access_policy import AccessPolicy
from taskhub.core.errors import DomainError
from taskhub.core.result import Failure, Result, Success
from taskhub.domain.entities import completion_rate
from taskhub.domain.enums import TaskStatus, UserRole
from taskhub.domain.errors import StoreError
from taskhub.domain.protocols import LoggerProtocol, PrincipalRepository, TaskRepository

METRIC_FALLBACK = 0


@dataclass(frozen=True, slots=True, kw_only=True)
class DashboardStats:
    """Dashboard headline numbers.

    Attributes:
        total_employees: Principals with role employee.
        total_tasks: All tasks.
        completed_tasks: Tasks in completed status.
        overdue_tasks: Tasks past due and not completed.
        average_completion_rate: completed_tasks / total_tasks * 100, 0 with no tasks.
        degraded_metrics: Names of metrics that fell back to 0.
    """

    total_employees: int
    total_tasks: int
    completed_tasks: int
    overdue_tasks: int
    average_completion_rate: float
    degraded_metrics: tuple[str, ...] = ()


class GetDashboardStatsHandler:
    """Handler for GetDashboardStats query. Any authenticated principal may read it."""

    def __init__(
        self,
        principal_repo: PrincipalRepository,
        task_repo: TaskRepository,
        access_policy: AccessPolicy,
        logger: LoggerProtocol,
    ) -> None:
        self._principal_repo = principal_repo
        self._task_repo = task_repo
        self._access_policy = access_policy
        self._logger = logger

    async def handle(self, query: GetDashboardStats) -> Result[DashboardStats, DomainError]:
        match self._access_policy.authenticated(query.principal):
            case Failure(error=error):
                return Failure(error=error)

        names = ("total_employees", "total_tasks", "completed_tasks", "overdue_tasks")
        outcomes = await asyncio.gather(
            self._principal_repo.count_by_role(UserRole.EMPLOYEE),
            self._task_repo.count_all(),
            self._task_repo.count_by_status(TaskStatus.COMPLETED),
            self._task_repo.count_overdue(date.today()),
            return_exceptions=True,
        )

        counts: dict[str, int] = {}
        degraded: list[str] = []
        for name, outcome in zip(names, outcomes, strict=True):
            counts[name] = self._metric_value(name, outcome, degraded)

        return Success(
            value=DashboardStats(
                **counts,
                average_completion_rate=completion_rate(
                    counts["completed_tasks"], counts["total_tasks"]
                ),
                degraded_metrics=tuple(degraded),
            )
        )

    def _metric_value(
        self,
        name: str,
        outcome: Result[int, StoreError] | BaseException,
        degraded: list[str],
    ) -> int:
        match outcome:
            case Success(value=count):
                return count
            case Failure(error=error):
                self._logger.warning(
                    "dashboard_metric_failed",
                    metric=name,
                    error_code=error.code.value,
                    error_message=error.message,
                )
            case BaseException() as exc:
                self._logger.warning(
                    "dashboard_metric_failed",
                    metric=name,
                    error_type=type(exc).__name__,
                    error_message=str(exc),
                )
        degraded.append(name)
        return METRIC_FALLBACK
