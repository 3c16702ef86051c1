"""API v1 routers.

RESTful resource-based endpoints; resource nouns, not action verbs.

Resources:
    /auth         - Registration, sessions, current principal
    /navigation   - Role-conditional sections
    /dashboard    - Headline statistics
    /tasks        - Tasks and their lifecycle
    /employees    - Employee directory
    /kpis         - KPI metric records
"""

from fastapi import APIRouter

from taskhub.core.config import settings
from taskhub.presentation.routers.api.v1 import (
    auth,
    dashboard,
    employees,
    kpis,
    navigation,
    tasks,
)

v1_router = APIRouter(prefix=settings.api_v1_prefix)
for _module in (auth, navigation, dashboard, tasks, employees, kpis):
    v1_router.include_router(_module.router)

__all__ = ["v1_router"]
