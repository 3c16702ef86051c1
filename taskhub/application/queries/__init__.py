"""Queries (CQRS read operations)."""

from taskhub.application.queries.dashboard_queries import GetDashboardStats
from taskhub.application.queries.employee_queries import (
    GetEmployee,
    GetEmployeeStats,
    ListEmployees,
)
from taskhub.application.queries.kpi_queries import ListKpis
from taskhub.application.queries.task_queries import GetTask, ListTasks

__all__ = [
    "GetDashboardStats",
    "GetEmployee",
    "GetEmployeeStats",
    "GetTask",
    "ListEmployees",
    "ListKpis",
    "ListTasks",
]
