"""Domain entities."""

from taskhub.domain.entities.auth_session import AuthSession, AuthUser
from taskhub.domain.entities.employee_stats import EmployeeStats, completion_rate
from taskhub.domain.entities.kpi_metric import KpiMetric
from taskhub.domain.entities.principal import Principal
from taskhub.domain.entities.task import Task, validate_progress

__all__ = [
    "AuthSession",
    "AuthUser",
    "EmployeeStats",
    "KpiMetric",
    "Principal",
    "Task",
    "completion_rate",
    "validate_progress",
]
