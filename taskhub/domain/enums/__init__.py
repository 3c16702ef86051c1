"""Domain enums.

Available Enums:
    - UserRole: RBAC roles (admin, manager, employee)
    - Resource, Action: Permission components
    - TaskStatus, TaskPriority: Task lifecycle and urgency
    - KpiPeriod, KpiDataSource: KPI metric classification
    - Section: Navigation sections
    - Collection: Record store collection names
"""

from taskhub.domain.enums.collection import Collection
from taskhub.domain.enums.kpi import KpiDataSource, KpiPeriod
from taskhub.domain.enums.permission import Action, Resource, permission_name
from taskhub.domain.enums.section import Section
from taskhub.domain.enums.task_priority import TaskPriority
from taskhub.domain.enums.task_status import TaskStatus
from taskhub.domain.enums.user_role import UserRole

__all__ = [
    "Action",
    "Collection",
    "KpiDataSource",
    "KpiPeriod",
    "Resource",
    "Section",
    "TaskPriority",
    "TaskStatus",
    "UserRole",
    "permission_name",
]
