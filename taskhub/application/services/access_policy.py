"""Access policy service.

Combines the role capability table (AuthorizationProtocol, backed by the
Casbin policy) with the conditional rules that depend on the records
involved:

    - Employees see and progress only tasks assigned to them
    - Only principals allowed to grant admin may assign or revoke the admin
      role, or change an admin account at all
    - Nobody changes their own role

Every decision is local and synchronous and happens before any store call.
A missing principal (None) is unauthenticated and is denied everything.

Usage:
    policy = AccessPolicy(authorization=get_authorization(), logger=get_logger())

    match policy.authorize(principal, Resource.TASKS, Action.CREATE):
        case Failure(error=forbidden):
            return Failure(error=forbidden)
        case Success(value=actor):
            ...
"""

from collections.abc import Iterable

from taskhub.core.enums import ErrorCode
from taskhub.core.result import Failure, Result, Success
from taskhub.domain.entities import Principal, Task
from taskhub.domain.enums import Action, Resource, UserRole, permission_name
from taskhub.domain.errors import ForbiddenError
from taskhub.domain.protocols import AuthorizationProtocol, LoggerProtocol


class AccessPolicy:
    """Authorization and task visibility decisions.

    Dependencies (injected via constructor):
        - AuthorizationProtocol: role capability checks
        - LoggerProtocol: denial logging
    """

    def __init__(self, authorization: AuthorizationProtocol, logger: LoggerProtocol) -> None:
        self._authorization = authorization
        self._logger = logger

    def authorize(
        self, principal: Principal | None, resource: Resource, action: Action
    ) -> Result[Principal, ForbiddenError]:
        """Check that ``principal`` may perform ``action`` on ``resource``.

        Returns:
            Success(principal) when permitted.
            Failure(ForbiddenError) with NOT_AUTHENTICATED for a missing or
            inactive principal, PERMISSION_DENIED when the role lacks the
            capability.
        """
        required = permission_name(resource, action)

        match self.authenticated(principal, required_permission=required):
            case Failure(error=error):
                return Failure(error=error)

        if not self._authorization.check_permission(principal.role, resource, action):
            return self._deny(
                principal,
                ErrorCode.PERMISSION_DENIED,
                f"Role '{principal.role.value}' may not perform {required}",
                required,
            )

        return Success(value=principal)

    def authenticated(
        self, principal: Principal | None, *, required_permission: str = "authenticated"
    ) -> Result[Principal, ForbiddenError]:
        """Require an active principal, with no capability check."""
        if principal is None or not principal.is_active:
            return self._deny(
                principal,
                ErrorCode.NOT_AUTHENTICATED,
                "Authentication required",
                required_permission,
            )
        return Success(value=principal)

    def permissions_for(self, principal: Principal) -> list[str]:
        """Permission names granted to the principal's role, as "resource:action"."""
        return [
            permission_name(resource, action)
            for resource, action in self._authorization.get_permissions_for_role(principal.role)
        ]

    def task_scope(self, principal: Principal) -> str | None:
        """Assignee filter for task reads: None for staff managers, own id otherwise."""
        return None if principal.manages_staff else principal.id

    def can_read_task(self, principal: Principal | None, task: Task) -> bool:
        """Visibility rule for a single task.

        Admins and managers see every task; employees see a task only when it
        is assigned to them.
        """
        if principal is None or not principal.is_active:
            return False
        if not self._authorization.check_permission(principal.role, Resource.TASKS, Action.READ):
            return False
        return principal.manages_staff or task.is_assigned_to(principal.id)

    def visible_tasks(self, principal: Principal | None, tasks: Iterable[Task]) -> list[Task]:
        """Filter ``tasks`` down to those ``principal`` may see, order preserved."""
        return [task for task in tasks if self.can_read_task(principal, task)]

    def authorize_task_progress(
        self, principal: Principal | None, task: Task
    ) -> Result[Principal, ForbiddenError]:
        """Gate status/progress changes on ``task``.

        Requires tasks:update_status; principals who do not manage staff must
        also be the task's assignee.
        """
        match self.authorize(principal, Resource.TASKS, Action.UPDATE_STATUS):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=actor):
                pass

        if not actor.manages_staff and not task.is_assigned_to(actor.id):
            return self._deny(
                actor,
                ErrorCode.TASK_NOT_ASSIGNED,
                "Task is not assigned to you",
                permission_name(Resource.TASKS, Action.UPDATE_STATUS),
                task_id=task.id,
            )
        return Success(value=actor)

    def authorize_role_assignment(
        self,
        principal: Principal,
        role: UserRole,
        *,
        target_id: str | None = None,
        current_role: UserRole | None = None,
    ) -> Result[Principal, ForbiddenError]:
        """Gate assigning ``role`` to a new (target_id None) or existing principal.

        Args:
            principal: Actor performing the assignment.
            role: Role being assigned.
            target_id: Id of the principal being changed, None on creation.
            current_role: Target's role before the change, when known.

        Returns:
            Success(principal), or Failure(ForbiddenError) with
            SELF_ROLE_CHANGE or ROLE_GRANT_DENIED.
        """
        if target_id == principal.id and role != principal.role:
            return self._deny(
                principal,
                ErrorCode.SELF_ROLE_CHANGE,
                "You cannot change your own role",
                permission_name(Resource.EMPLOYEES, Action.UPDATE),
            )

        touches_admin = role != current_role and UserRole.ADMIN in (role, current_role)
        if touches_admin and not self._can_grant_admin(principal):
            return self._deny(
                principal,
                ErrorCode.ROLE_GRANT_DENIED,
                f"Role '{principal.role.value}' may not assign or revoke the admin role",
                permission_name(Resource.EMPLOYEES, Action.GRANT_ADMIN),
            )

        return Success(value=principal)

    def authorize_admin_target(
        self, principal: Principal, target: Principal
    ) -> Result[Principal, ForbiddenError]:
        """Gate any change to an existing admin account.

        Editing or deactivating an admin requires employees:grant_admin, so
        a manager cannot demote or lock out an administrator.
        """
        if target.role == UserRole.ADMIN and not self._can_grant_admin(principal):
            return self._deny(
                principal,
                ErrorCode.ADMIN_ACCOUNT_PROTECTED,
                f"Role '{principal.role.value}' may not change an admin account",
                permission_name(Resource.EMPLOYEES, Action.GRANT_ADMIN),
                target_id=target.id,
            )
        return Success(value=principal)

    def _can_grant_admin(self, principal: Principal) -> bool:
        return self._authorization.check_permission(
            principal.role, Resource.EMPLOYEES, Action.GRANT_ADMIN
        )

    def _deny(
        self,
        principal: Principal | None,
        code: ErrorCode,
        message: str,
        required_permission: str,
        **context: str,
    ) -> Failure[ForbiddenError]:
        role = principal.role.value if principal else None
        self._logger.warning(
            "authorization_denied",
            principal_id=principal.id if principal else None,
            role=role,
            required_permission=required_permission,
            reason=code.value,
            **context,
        )
        return Failure(
            error=ForbiddenError(
                code=code,
                message=message,
                required_permission=required_permission,
                role=role,
            )
        )
