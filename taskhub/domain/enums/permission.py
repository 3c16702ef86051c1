"""Permission components for RBAC authorization.

Permissions are resource:action pairs (e.g., "tasks:delete") and match the
rows of the Casbin policy file one to one.

Usage:
    from taskhub.domain.enums import Action, Resource

    result = access_policy.authorize(principal, Resource.TASKS, Action.CREATE)
"""

from enum import Enum


class Resource(str, Enum):
    """Resources protected by authorization.

    String Enum:
        Values are lowercase to match Casbin policy format.
    """

    EMPLOYEES = "employees"
    """Employee directory (principals with role employee or manager)."""

    TASKS = "tasks"
    """Tasks and their lifecycle."""

    KPIS = "kpis"
    """Business KPI metric records."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all resource values as strings."""
        return [resource.value for resource in cls]


class Action(str, Enum):
    """Actions that can be performed on resources.

    Action Semantics:
        READ: View, list, get operations (no side effects)
        CREATE/UPDATE/DELETE: Record mutations
        UPDATE_STATUS: Task status/progress changes (assignee-scoped for employees)
        DEACTIVATE: Soft removal of an employee
        GRANT_ADMIN: Assign the admin role to a principal
    """

    READ = "read"
    CREATE = "create"
    UPDATE = "update"
    UPDATE_STATUS = "update_status"
    DELETE = "delete"
    DEACTIVATE = "deactivate"
    GRANT_ADMIN = "grant_admin"

    @classmethod
    def values(cls) -> list[str]:
        """Get all action values as strings."""
        return [action.value for action in cls]


def permission_name(resource: Resource, action: Action) -> str:
    """Render a permission as "resource:action"."""
    return f"{resource.value}:{action.value}"
