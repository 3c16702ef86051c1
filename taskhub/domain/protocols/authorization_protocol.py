"""Authorization protocol (port) for role capability checks.

The port answers one question: may a role perform an action on a resource?
Conditional rules (assignee ownership, admin grants, self role change) are
layered on top by the AccessPolicy application service.

Implementations:
    - CasbinAdapter: Casbin enforcer over the packaged policy file

Usage:
    authz: AuthorizationProtocol = get_authorization()
    if not authz.check_permission(UserRole.MANAGER, Resource.TASKS, Action.CREATE):
        ...
"""

from typing import Protocol

from taskhub.domain.enums import Action, Resource, UserRole


class AuthorizationProtocol(Protocol):
    """Role capability checks.

    Checks are local and synchronous. Implementations fail closed: any
    internal error is reported as a denial.
    """

    def check_permission(self, role: UserRole, resource: Resource, action: Action) -> bool:
        """Check whether ``role`` may perform ``action`` on ``resource``.

        Args:
            role: Principal role.
            resource: Protected resource.
            action: Requested action.

        Returns:
            bool: True if allowed, False if denied.
        """
        ...

    def get_permissions_for_role(self, role: UserRole) -> list[tuple[Resource, Action]]:
        """List every (resource, action) pair granted to ``role``.

        Args:
            role: Principal role.

        Returns:
            list[tuple[Resource, Action]]: Granted pairs, policy order.
        """
        ...
