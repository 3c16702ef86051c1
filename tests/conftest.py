"""Shared pytest fixtures and entity factories.

Factories build domain entities with sensible defaults so each test only
spells out the fields it cares about. Authorization fixtures use the real
Casbin policy shipped with the package.
"""

from datetime import date
from unittest.mock import Mock

import pytest

from taskhub.application.services.access_policy import AccessPolicy
from taskhub.core.config import settings
from taskhub.domain.entities import KpiMetric, Principal, Task
from taskhub.domain.enums import TaskStatus, UserRole
from taskhub.infrastructure.authorization.casbin_adapter import CasbinAdapter
from taskhub.infrastructure.persistence.in_memory_record_store import InMemoryRecordStore


def make_principal(
    principal_id: str = "u1",
    role: UserRole = UserRole.EMPLOYEE,
    *,
    email: str | None = None,
    full_name: str | None = None,
    is_active: bool = True,
    department: str | None = None,
) -> Principal:
    """Helper to create a Principal for testing."""
    return Principal(
        id=principal_id,
        email=email or f"{principal_id}@example.com",
        full_name=full_name or f"User {principal_id}",
        role=role,
        is_active=is_active,
        department=department,
    )


def make_task(
    task_id: str = "t1",
    *,
    assigned_to: str | None = "u1",
    created_by: str = "m1",
    status: TaskStatus = TaskStatus.NOT_STARTED,
    **fields,
) -> Task:
    """Helper to create a Task for testing."""
    return Task(
        id=task_id,
        title=fields.pop("title", f"Task {task_id}"),
        created_by=created_by,
        assigned_to=assigned_to,
        status=status,
        **fields,
    )


def make_kpi(kpi_id: str = "k1", **fields) -> KpiMetric:
    """Helper to create a KpiMetric for testing."""
    return KpiMetric(
        id=kpi_id,
        metric_name=fields.pop("metric_name", "Units Sold"),
        metric_date=fields.pop("metric_date", date(2024, 3, 1)),
        **fields,
    )


# =============================================================================
# Centralized Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_logger():
    """Provide a mock logger for testing.

    Usage:
        def test_something(mock_logger):
            service = MyService(logger=mock_logger)
            service.do_something()
            mock_logger.info.assert_called_once()
    """
    logger = Mock()
    logger.debug = Mock()
    logger.info = Mock()
    logger.warning = Mock()
    logger.error = Mock()
    logger.critical = Mock()
    return logger


@pytest.fixture
def casbin_adapter(mock_logger):
    """CasbinAdapter over the packaged model and policy files."""
    return CasbinAdapter.from_files(
        settings.casbin_model_path, settings.casbin_policy_path, mock_logger
    )


@pytest.fixture
def access_policy(casbin_adapter, mock_logger):
    """AccessPolicy backed by the real role capability table."""
    return AccessPolicy(authorization=casbin_adapter, logger=mock_logger)


@pytest.fixture
def record_store():
    """Fresh, empty in-memory record store."""
    return InMemoryRecordStore()


@pytest.fixture
def admin():
    return make_principal("a1", UserRole.ADMIN)


@pytest.fixture
def manager():
    return make_principal("m1", UserRole.MANAGER)


@pytest.fixture
def employee():
    return make_principal("u1", UserRole.EMPLOYEE)
