"""User roles for RBAC authorization.

Every principal holds exactly one role. Roles are flat (no inheritance);
the capability of each role is spelled out in the Casbin policy file.

    - admin: Full access, including KPI administration and admin role grants
    - manager: Employee and task management, cannot grant the admin role
    - employee: Sees and progresses only the tasks assigned to them

Usage:
    from taskhub.domain.enums import UserRole

    if principal.role == UserRole.ADMIN:
        ...
"""

from enum import Enum


class UserRole(str, Enum):
    """User roles for RBAC authorization.

    String Enum:
        Inherits from str for easy serialization and Casbin compatibility.
        Values are lowercase to match the policy file.
    """

    ADMIN = "admin"
    MANAGER = "manager"
    EMPLOYEE = "employee"

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: ['admin', 'manager', 'employee'].
        """
        return [role.value for role in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid role.

        Args:
            value: String to check.

        Returns:
            bool: True if value is a valid role.
        """
        return value in cls.values()

    @property
    def manages_staff(self) -> bool:
        """Admins and managers see every task and the employee directory."""
        return self in (UserRole.ADMIN, UserRole.MANAGER)
