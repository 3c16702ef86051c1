"""API tests for employees, KPIs, dashboard and navigation.

Tests cover:
- Employee directory: list, create, edit, deactivate, stats
- Admin-only role grants, admin accounts protected from managers
- Self role change protection and null required fields rejected
- KPI endpoints restricted to admins
- Dashboard statistics and role-conditional navigation
"""

import pytest


@pytest.mark.api
class TestEmployeeDirectory:
    def test_manager_lists_staff_by_name(self, client, manager, employee):
        response = client.get("/api/v1/employees", headers=manager.headers)

        assert response.status_code == 200
        body = response.json()
        assert body["total_count"] == 2
        assert [e["full_name"] for e in body["employees"]] == ["Eve Employee", "Max Manager"]

    def test_admins_are_not_listed(self, client, admin, employee):
        response = client.get("/api/v1/employees", headers=admin.headers)

        assert [e["id"] for e in response.json()["employees"]] == [employee.id]

    def test_employee_cannot_list(self, client, employee):
        response = client.get("/api/v1/employees", headers=employee.headers)

        assert response.status_code == 403

    def test_manager_creates_employee(self, client, manager):
        response = client.post(
            "/api/v1/employees",
            json={"email": "New@Example.com", "full_name": "New Hire", "department": "Ops"},
            headers=manager.headers,
        )

        assert response.status_code == 201
        body = response.json()
        assert body["email"] == "new@example.com"
        assert body["role"] == "employee"
        assert body["department"] == "Ops"

    def test_manager_cannot_create_admin(self, client, manager):
        response = client.post(
            "/api/v1/employees",
            json={"email": "boss@example.com", "full_name": "Boss", "role": "admin"},
            headers=manager.headers,
        )

        assert response.status_code == 403
        assert response.json()["type"].endswith("/errors/role_grant_denied")

    def test_create_with_existing_email_is_conflict(self, client, manager, employee):
        response = client.post(
            "/api/v1/employees",
            json={"email": employee.email, "full_name": "Twin"},
            headers=manager.headers,
        )

        assert response.status_code == 409

    def test_manager_edits_employee(self, client, manager, employee):
        response = client.patch(
            f"/api/v1/employees/{employee.id}",
            json={"department": "Warehouse"},
            headers=manager.headers,
        )

        assert response.status_code == 200
        assert response.json()["department"] == "Warehouse"
        assert response.json()["full_name"] == "Eve Employee"

    def test_admin_cannot_change_own_role(self, client, admin):
        response = client.patch(
            f"/api/v1/employees/{admin.id}", json={"role": "manager"}, headers=admin.headers
        )

        assert response.status_code == 403
        assert response.json()["type"].endswith("/errors/self_role_change")

    def test_manager_cannot_demote_admin(self, client, manager, admin):
        response = client.patch(
            f"/api/v1/employees/{admin.id}", json={"role": "employee"}, headers=manager.headers
        )

        assert response.status_code == 403
        assert response.json()["type"].endswith("/errors/admin_account_protected")
        me = client.get("/api/v1/auth/me", headers=admin.headers)
        assert me.json()["principal"]["role"] == "admin"

    def test_manager_cannot_deactivate_admin(self, client, manager, admin):
        response = client.post(
            f"/api/v1/employees/{admin.id}/deactivation", headers=manager.headers
        )

        assert response.status_code == 403
        assert client.get("/api/v1/auth/me", headers=admin.headers).status_code == 200

    @pytest.mark.parametrize("field", ["role", "full_name"])
    def test_null_for_required_field_is_rejected(self, client, manager, employee, field):
        response = client.patch(
            f"/api/v1/employees/{employee.id}", json={field: None}, headers=manager.headers
        )

        assert response.status_code == 400
        me = client.get("/api/v1/auth/me", headers=employee.headers)
        assert me.status_code == 200
        assert me.json()["principal"]["role"] == "employee"
        assert me.json()["principal"]["full_name"] == "Eve Employee"

    def test_deactivation_hides_from_active_listing(self, client, manager, employee):
        # Act
        deactivated = client.post(
            f"/api/v1/employees/{employee.id}/deactivation", headers=manager.headers
        )
        active = client.get(
            "/api/v1/employees", params={"active_only": True}, headers=manager.headers
        )

        # Assert
        assert deactivated.status_code == 200
        assert deactivated.json()["is_active"] is False
        assert [e["id"] for e in active.json()["employees"]] == [manager.id]

    def test_deactivated_employee_cannot_sign_in(self, client, manager, employee):
        client.post(f"/api/v1/employees/{employee.id}/deactivation", headers=manager.headers)

        response = client.post(
            "/api/v1/auth/sessions",
            json={"email": employee.email, "password": "secret123"},
        )

        assert response.status_code == 401

    def test_get_missing_employee_is_404(self, client, manager):
        response = client.get("/api/v1/employees/nobody", headers=manager.headers)

        assert response.status_code == 404

    def test_employee_stats(self, client, manager, employee):
        for title in ("Count stock", "Sweep floor"):
            client.post(
                "/api/v1/tasks",
                json={"title": title, "assigned_to": employee.id},
                headers=manager.headers,
            )
        task_id = client.get("/api/v1/tasks", headers=employee.headers).json()["tasks"][0]["id"]
        client.patch(
            f"/api/v1/tasks/{task_id}/status",
            json={"status": "completed"},
            headers=employee.headers,
        )

        response = client.get(f"/api/v1/employees/{employee.id}/stats", headers=manager.headers)

        assert response.status_code == 200
        body = response.json()
        assert body["principal_id"] == employee.id
        assert body["total_tasks_assigned"] == 2
        assert body["tasks_completed"] == 1
        assert body["completion_rate"] == 50.0


@pytest.mark.api
class TestKpis:
    def test_admin_records_and_lists_kpis(self, client, admin):
        created = client.post(
            "/api/v1/kpis",
            json={"metric_name": "Units Sold", "metric_value": 42, "metric_date": "2024-03-01"},
            headers=admin.headers,
        )

        listed = client.get("/api/v1/kpis", headers=admin.headers)

        assert created.status_code == 201
        assert created.json()["period"] == "daily"
        assert listed.json()["total_count"] == 1
        assert listed.json()["kpis"][0]["metric_value"] == 42.0

    def test_admin_edits_and_deletes_kpi(self, client, admin):
        kpi = client.post(
            "/api/v1/kpis", json={"metric_name": "Returns"}, headers=admin.headers
        ).json()

        edited = client.patch(
            f"/api/v1/kpis/{kpi['id']}", json={"metric_value": 3.5}, headers=admin.headers
        )
        deleted = client.delete(f"/api/v1/kpis/{kpi['id']}", headers=admin.headers)

        assert edited.json()["metric_value"] == 3.5
        assert deleted.status_code == 204
        assert client.get("/api/v1/kpis", headers=admin.headers).json()["total_count"] == 0

    def test_null_period_is_rejected(self, client, admin):
        kpi = client.post(
            "/api/v1/kpis", json={"metric_name": "Returns"}, headers=admin.headers
        ).json()

        response = client.patch(
            f"/api/v1/kpis/{kpi['id']}", json={"period": None}, headers=admin.headers
        )

        assert response.status_code == 400
        listed = client.get("/api/v1/kpis", headers=admin.headers).json()
        assert listed["kpis"][0]["period"] == "daily"

    def test_manager_is_forbidden(self, client, manager):
        response = client.get("/api/v1/kpis", headers=manager.headers)

        assert response.status_code == 403


@pytest.mark.api
class TestDashboardAndNavigation:
    def test_dashboard_counts(self, client, manager, employee):
        client.post(
            "/api/v1/tasks",
            json={"title": "Overdue", "assigned_to": employee.id, "due_date": "2000-01-01"},
            headers=manager.headers,
        )
        client.post("/api/v1/tasks", json={"title": "Fresh"}, headers=manager.headers)

        response = client.get("/api/v1/dashboard", headers=employee.headers)

        assert response.status_code == 200
        body = response.json()
        assert body["total_employees"] == 1
        assert body["total_tasks"] == 2
        assert body["completed_tasks"] == 0
        assert body["overdue_tasks"] == 1
        assert body["average_completion_rate"] == 0.0

    def test_dashboard_requires_sign_in(self, client):
        response = client.get("/api/v1/dashboard")

        assert response.status_code == 401

    @pytest.mark.parametrize(
        ("account", "expected"),
        [
            ("employee", ["dashboard", "tasks"]),
            ("manager", ["dashboard", "employees", "tasks"]),
            ("admin", ["dashboard", "employees", "tasks", "settings"]),
        ],
    )
    def test_navigation_by_role(self, client, request, account, expected):
        signed_in = request.getfixturevalue(account)

        response = client.get("/api/v1/navigation", headers=signed_in.headers)

        assert response.status_code == 200
        assert [s["key"] for s in response.json()["sections"]] == expected
