"""Container module - centralized dependency injection.

Re-exports every factory so callers import from one place:

    from taskhub.core.container import get_logger, get_create_task_handler

Organized by concern:
- infrastructure: logging, record store, identity provider, request store
- authorization: Casbin adapter and AccessPolicy
- repositories: request-scoped repositories and principal resolver
- handlers: request-scoped command/query handlers
"""

from taskhub.core.container.authorization import get_access_policy, get_authorization
from taskhub.core.container.handlers import (
    get_create_employee_handler,
    get_create_kpi_handler,
    get_create_task_handler,
    get_dashboard_stats_handler,
    get_deactivate_employee_handler,
    get_delete_kpi_handler,
    get_delete_task_handler,
    get_get_employee_handler,
    get_get_employee_stats_handler,
    get_get_task_handler,
    get_list_employees_handler,
    get_list_kpis_handler,
    get_list_tasks_handler,
    get_refresh_session_handler,
    get_register_principal_handler,
    get_sign_in_handler,
    get_sign_out_handler,
    get_update_employee_handler,
    get_update_kpi_handler,
    get_update_task_handler,
    get_update_task_status_handler,
)
from taskhub.core.container.infrastructure import (
    bearer_scheme,
    get_access_token,
    get_identity_provider,
    get_logger,
    get_record_store,
    get_request_store,
)
from taskhub.core.container.repositories import (
    get_kpi_repository,
    get_principal_repository,
    get_principal_resolver,
    get_task_repository,
)

__all__ = [
    # Infrastructure
    "bearer_scheme",
    "get_access_token",
    "get_identity_provider",
    "get_logger",
    "get_record_store",
    "get_request_store",
    # Authorization
    "get_access_policy",
    "get_authorization",
    # Repositories
    "get_kpi_repository",
    "get_principal_repository",
    "get_principal_resolver",
    "get_task_repository",
    # Handlers
    "get_create_employee_handler",
    "get_create_kpi_handler",
    "get_create_task_handler",
    "get_dashboard_stats_handler",
    "get_deactivate_employee_handler",
    "get_delete_kpi_handler",
    "get_delete_task_handler",
    "get_get_employee_handler",
    "get_get_employee_stats_handler",
    "get_get_task_handler",
    "get_list_employees_handler",
    "get_list_kpis_handler",
    "get_list_tasks_handler",
    "get_refresh_session_handler",
    "get_register_principal_handler",
    "get_sign_in_handler",
    "get_sign_out_handler",
    "get_update_employee_handler",
    "get_update_kpi_handler",
    "get_update_task_handler",
    "get_update_task_status_handler",
]
