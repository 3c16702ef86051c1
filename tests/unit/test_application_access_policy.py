"""Unit tests for AccessPolicy over the packaged Casbin policy.

Tests cover:
- Role capability checks for each role
- Unauthenticated and inactive principals are denied
- Task visibility (employees see only their assigned tasks)
- Status/progress changes restricted to the assignee for employees
- Admin role grants, revocations and self role changes
- Admin accounts protected from principals who cannot grant admin
- Denials are logged
"""

import pytest

from taskhub.core.enums import ErrorCode
from taskhub.core.result import Failure, Success
from taskhub.domain.enums import Action, Resource, UserRole
from taskhub.domain.errors import ForbiddenError
from tests.conftest import make_principal, make_task


@pytest.mark.unit
class TestAuthorize:
    @pytest.mark.parametrize(
        ("role", "resource", "action", "allowed"),
        [
            (UserRole.ADMIN, Resource.KPIS, Action.CREATE, True),
            (UserRole.ADMIN, Resource.EMPLOYEES, Action.DEACTIVATE, True),
            (UserRole.MANAGER, Resource.TASKS, Action.DELETE, True),
            (UserRole.MANAGER, Resource.EMPLOYEES, Action.CREATE, True),
            (UserRole.MANAGER, Resource.KPIS, Action.CREATE, False),
            (UserRole.MANAGER, Resource.KPIS, Action.READ, False),
            (UserRole.EMPLOYEE, Resource.TASKS, Action.READ, True),
            (UserRole.EMPLOYEE, Resource.TASKS, Action.UPDATE_STATUS, True),
            (UserRole.EMPLOYEE, Resource.TASKS, Action.CREATE, False),
            (UserRole.EMPLOYEE, Resource.EMPLOYEES, Action.READ, False),
        ],
    )
    def test_role_capabilities(self, access_policy, role, resource, action, allowed):
        principal = make_principal("p1", role)

        result = access_policy.authorize(principal, resource, action)

        assert isinstance(result, Success) is allowed

    def test_denial_carries_role_and_permission(self, access_policy, employee, mock_logger):
        # Act
        result = access_policy.authorize(employee, Resource.TASKS, Action.CREATE)

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, ForbiddenError)
        assert result.error.code == ErrorCode.PERMISSION_DENIED
        assert result.error.role == "employee"
        assert result.error.required_permission == "tasks:create"
        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args[0][0] == "authorization_denied"

    def test_missing_principal_is_not_authenticated(self, access_policy):
        result = access_policy.authorize(None, Resource.TASKS, Action.READ)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.NOT_AUTHENTICATED
        assert result.error.role is None

    def test_inactive_principal_is_denied_everything(self, access_policy):
        inactive = make_principal("a1", UserRole.ADMIN, is_active=False)

        result = access_policy.authorize(inactive, Resource.TASKS, Action.READ)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.NOT_AUTHENTICATED

    def test_success_returns_the_principal(self, access_policy, manager):
        assert access_policy.authorize(manager, Resource.TASKS, Action.CREATE) == Success(
            value=manager
        )


@pytest.mark.unit
class TestPermissionsFor:
    def test_employee_permissions(self, access_policy, employee):
        assert sorted(access_policy.permissions_for(employee)) == [
            "tasks:read",
            "tasks:update_status",
        ]

    def test_admin_holds_every_permission(self, access_policy, admin):
        permissions = access_policy.permissions_for(admin)

        assert len(permissions) == 14
        assert "employees:grant_admin" in permissions

    def test_manager_cannot_grant_admin(self, access_policy, manager):
        assert "employees:grant_admin" not in access_policy.permissions_for(manager)


@pytest.mark.unit
class TestTaskVisibility:
    def test_employee_sees_only_assigned_tasks(self, access_policy, employee):
        tasks = [
            make_task("t1", assigned_to="u1"),
            make_task("t2", assigned_to="u2"),
            make_task("t3", assigned_to=None),
        ]

        visible = access_policy.visible_tasks(employee, tasks)

        assert [t.id for t in visible] == ["t1"]

    @pytest.mark.parametrize("role", [UserRole.ADMIN, UserRole.MANAGER])
    def test_staff_managers_see_every_task(self, access_policy, role):
        tasks = [make_task("t1", assigned_to="u1"), make_task("t2", assigned_to=None)]

        visible = access_policy.visible_tasks(make_principal("p1", role), tasks)

        assert [t.id for t in visible] == ["t1", "t2"]

    def test_unauthenticated_sees_nothing(self, access_policy):
        assert access_policy.visible_tasks(None, [make_task()]) == []

    def test_task_scope(self, access_policy, employee, manager):
        assert access_policy.task_scope(employee) == "u1"
        assert access_policy.task_scope(manager) is None


@pytest.mark.unit
class TestTaskProgressAuthorization:
    def test_employee_may_progress_own_task(self, access_policy, employee):
        result = access_policy.authorize_task_progress(employee, make_task(assigned_to="u1"))

        assert isinstance(result, Success)

    def test_employee_may_not_progress_others_task(self, access_policy, employee):
        result = access_policy.authorize_task_progress(employee, make_task(assigned_to="u2"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TASK_NOT_ASSIGNED

    def test_manager_may_progress_any_task(self, access_policy, manager):
        result = access_policy.authorize_task_progress(manager, make_task(assigned_to="u2"))

        assert isinstance(result, Success)


@pytest.mark.unit
class TestRoleAssignment:
    def test_manager_cannot_assign_admin(self, access_policy, manager):
        result = access_policy.authorize_role_assignment(manager, UserRole.ADMIN)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.ROLE_GRANT_DENIED
        assert result.error.required_permission == "employees:grant_admin"

    def test_manager_may_assign_employee_and_manager(self, access_policy, manager):
        for role in (UserRole.EMPLOYEE, UserRole.MANAGER):
            assert isinstance(
                access_policy.authorize_role_assignment(manager, role), Success
            )

    def test_admin_may_assign_admin(self, access_policy, admin):
        result = access_policy.authorize_role_assignment(admin, UserRole.ADMIN, target_id="u9")

        assert isinstance(result, Success)

    def test_manager_may_keep_existing_admin_role(self, access_policy, manager):
        result = access_policy.authorize_role_assignment(
            manager, UserRole.ADMIN, target_id="a1", current_role=UserRole.ADMIN
        )

        assert isinstance(result, Success)

    def test_nobody_changes_their_own_role(self, access_policy, admin):
        result = access_policy.authorize_role_assignment(
            admin, UserRole.EMPLOYEE, target_id=admin.id, current_role=UserRole.ADMIN
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.SELF_ROLE_CHANGE

    def test_manager_cannot_demote_admin(self, access_policy, manager):
        result = access_policy.authorize_role_assignment(
            manager, UserRole.EMPLOYEE, target_id="a1", current_role=UserRole.ADMIN
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.ROLE_GRANT_DENIED

    def test_admin_may_demote_another_admin(self, access_policy, admin):
        result = access_policy.authorize_role_assignment(
            admin, UserRole.MANAGER, target_id="a2", current_role=UserRole.ADMIN
        )

        assert isinstance(result, Success)


@pytest.mark.unit
class TestAdminTarget:
    def test_manager_cannot_change_admin_account(self, access_policy, manager, mock_logger):
        target = make_principal("a1", UserRole.ADMIN)

        result = access_policy.authorize_admin_target(manager, target)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ForbiddenError)
        assert result.error.code == ErrorCode.ADMIN_ACCOUNT_PROTECTED
        assert result.error.required_permission == "employees:grant_admin"
        assert mock_logger.warning.call_args[1]["target_id"] == "a1"

    @pytest.mark.parametrize("role", [UserRole.EMPLOYEE, UserRole.MANAGER])
    def test_manager_may_change_staff(self, access_policy, manager, role):
        target = make_principal("u9", role)

        assert isinstance(access_policy.authorize_admin_target(manager, target), Success)

    def test_admin_may_change_admin(self, access_policy, admin):
        target = make_principal("a2", UserRole.ADMIN)

        assert isinstance(access_policy.authorize_admin_target(admin, target), Success)
