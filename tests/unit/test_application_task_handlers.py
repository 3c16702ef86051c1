"""Unit tests for task command and query handlers.

Tests cover:
- CreateTaskHandler (permission, validation, completed_at on creation)
- UpdateTaskHandler (partial updates, unknown and nulled fields, missing task)
- UpdateTaskStatusHandler (assignee rule, completed_at, progress range)
- DeleteTaskHandler
- ListTasksHandler / GetTaskHandler visibility

Architecture:
- Real AccessPolicy over the packaged Casbin policy
- Repositories mocked with AsyncMock(spec=...)
- No store call happens when a request is rejected
"""

from unittest.mock import AsyncMock

import pytest

from taskhub.application.commands import CreateTask, DeleteTask, UpdateTask, UpdateTaskStatus
from taskhub.application.commands.handlers.create_task_handler import CreateTaskHandler
from taskhub.application.commands.handlers.delete_task_handler import DeleteTaskHandler
from taskhub.application.commands.handlers.update_task_handler import UpdateTaskHandler
from taskhub.application.commands.handlers.update_task_status_handler import (
    UpdateTaskStatusHandler,
)
from taskhub.application.queries import GetTask, ListTasks
from taskhub.application.queries.handlers.get_task_handler import GetTaskHandler
from taskhub.application.queries.handlers.list_tasks_handler import ListTasksHandler
from taskhub.core.enums import ErrorCode
from taskhub.core.errors import NotFoundError, ValidationError
from taskhub.core.result import Failure, Success
from taskhub.domain.enums import TaskPriority, TaskStatus
from taskhub.domain.errors import ForbiddenError
from taskhub.infrastructure.persistence import TaskRepository
from tests.conftest import make_task


async def _echo_add(task):
    return Success(value=task)


async def _echo_save(task, _fields):
    return Success(value=task)


@pytest.fixture
def task_repo():
    repo = AsyncMock(spec=TaskRepository)
    repo.add.side_effect = _echo_add
    repo.save.side_effect = _echo_save
    return repo


@pytest.mark.unit
class TestCreateTaskHandler:
    async def test_manager_creates_task(self, task_repo, access_policy, manager, mock_logger):
        # Arrange
        handler = CreateTaskHandler(task_repo, access_policy, mock_logger)
        cmd = CreateTask(
            principal=manager,
            title="  Restock shelf A ",
            assigned_to="u1",
            priority=TaskPriority.HIGH,
            progress_percentage=10,
        )

        # Act
        result = await handler.handle(cmd)

        # Assert
        assert isinstance(result, Success)
        task = result.value
        assert task.title == "Restock shelf A"
        assert task.created_by == manager.id
        assert task.assigned_to == "u1"
        assert task.status == TaskStatus.NOT_STARTED
        assert task.completed_at is None
        task_repo.add.assert_awaited_once()
        assert mock_logger.info.call_args[0][0] == "task_created"

    async def test_created_completed_task_has_completion_time(
        self, task_repo, access_policy, admin, mock_logger
    ):
        handler = CreateTaskHandler(task_repo, access_policy, mock_logger)

        result = await handler.handle(
            CreateTask(principal=admin, title="Done already", status=TaskStatus.COMPLETED)
        )

        assert isinstance(result, Success)
        assert result.value.completed_at is not None

    async def test_employee_cannot_create(self, task_repo, access_policy, employee, mock_logger):
        handler = CreateTaskHandler(task_repo, access_policy, mock_logger)

        result = await handler.handle(CreateTask(principal=employee, title="Mine"))

        assert isinstance(result, Failure)
        assert isinstance(result.error, ForbiddenError)
        task_repo.add.assert_not_called()

    async def test_unauthenticated_cannot_create(self, task_repo, access_policy, mock_logger):
        handler = CreateTaskHandler(task_repo, access_policy, mock_logger)

        result = await handler.handle(CreateTask(principal=None, title="Anon"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.NOT_AUTHENTICATED
        task_repo.add.assert_not_called()

    async def test_blank_title_is_rejected(self, task_repo, access_policy, manager, mock_logger):
        handler = CreateTaskHandler(task_repo, access_policy, mock_logger)

        result = await handler.handle(CreateTask(principal=manager, title="   "))

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.field == "title"
        task_repo.add.assert_not_called()

    async def test_progress_out_of_range_is_rejected(
        self, task_repo, access_policy, manager, mock_logger
    ):
        handler = CreateTaskHandler(task_repo, access_policy, mock_logger)

        result = await handler.handle(
            CreateTask(principal=manager, title="Too far", progress_percentage=120)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_PROGRESS
        task_repo.add.assert_not_called()


@pytest.mark.unit
class TestUpdateTaskHandler:
    async def test_partial_update_writes_only_changed_fields(
        self, task_repo, access_policy, manager, mock_logger
    ):
        # Arrange
        task_repo.find_by_id.return_value = Success(value=make_task("t1"))
        handler = UpdateTaskHandler(task_repo, access_policy, mock_logger)

        # Act
        result = await handler.handle(
            UpdateTask(principal=manager, task_id="t1", changes={"notes": "check stock"})
        )

        # Assert
        assert isinstance(result, Success)
        assert result.value.notes == "check stock"
        task_repo.save.assert_awaited_once()
        assert task_repo.save.await_args[0][1] == ["notes"]

    async def test_status_change_also_writes_completed_at(
        self, task_repo, access_policy, manager, mock_logger
    ):
        task_repo.find_by_id.return_value = Success(value=make_task("t1"))
        handler = UpdateTaskHandler(task_repo, access_policy, mock_logger)

        result = await handler.handle(
            UpdateTask(
                principal=manager, task_id="t1", changes={"status": TaskStatus.COMPLETED}
            )
        )

        assert isinstance(result, Success)
        assert result.value.completed_at is not None
        assert task_repo.save.await_args[0][1] == ["status", "completed_at"]

    @pytest.mark.parametrize("field", ["title", "status", "priority", "progress_percentage"])
    async def test_null_for_required_field_is_rejected(
        self, task_repo, access_policy, manager, mock_logger, field
    ):
        handler = UpdateTaskHandler(task_repo, access_policy, mock_logger)

        result = await handler.handle(
            UpdateTask(principal=manager, task_id="t1", changes={field: None})
        )

        assert isinstance(result, Failure)
        assert result.error.field == field
        task_repo.find_by_id.assert_not_called()
        task_repo.save.assert_not_called()

    async def test_unknown_field_is_rejected(self, task_repo, access_policy, manager, mock_logger):
        handler = UpdateTaskHandler(task_repo, access_policy, mock_logger)

        result = await handler.handle(
            UpdateTask(principal=manager, task_id="t1", changes={"created_by": "x"})
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.VALIDATION_FAILED
        task_repo.find_by_id.assert_not_called()

    async def test_empty_update_is_rejected(self, task_repo, access_policy, manager, mock_logger):
        handler = UpdateTaskHandler(task_repo, access_policy, mock_logger)

        result = await handler.handle(UpdateTask(principal=manager, task_id="t1", changes={}))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.EMPTY_UPDATE

    async def test_missing_task_is_not_found(self, task_repo, access_policy, manager, mock_logger):
        task_repo.find_by_id.return_value = Success(value=None)
        handler = UpdateTaskHandler(task_repo, access_policy, mock_logger)

        result = await handler.handle(
            UpdateTask(principal=manager, task_id="nope", changes={"title": "x"})
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        task_repo.save.assert_not_called()

    async def test_invalid_progress_is_not_written(
        self, task_repo, access_policy, manager, mock_logger
    ):
        task_repo.find_by_id.return_value = Success(value=make_task("t1"))
        handler = UpdateTaskHandler(task_repo, access_policy, mock_logger)

        result = await handler.handle(
            UpdateTask(principal=manager, task_id="t1", changes={"progress_percentage": -5})
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_PROGRESS
        task_repo.save.assert_not_called()

    async def test_employee_cannot_edit(self, task_repo, access_policy, employee, mock_logger):
        handler = UpdateTaskHandler(task_repo, access_policy, mock_logger)

        result = await handler.handle(
            UpdateTask(principal=employee, task_id="t1", changes={"title": "x"})
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PERMISSION_DENIED


@pytest.mark.unit
class TestUpdateTaskStatusHandler:
    async def test_assignee_completes_then_reopens(
        self, task_repo, access_policy, employee, mock_logger
    ):
        # Arrange
        task = make_task("t1", assigned_to=employee.id, status=TaskStatus.IN_PROGRESS)
        task_repo.find_by_id.return_value = Success(value=task)
        handler = UpdateTaskStatusHandler(task_repo, access_policy, mock_logger)

        # Act
        completed = await handler.handle(
            UpdateTaskStatus(principal=employee, task_id="t1", status=TaskStatus.COMPLETED)
        )
        completed_at = completed.value.completed_at
        reopened = await handler.handle(
            UpdateTaskStatus(principal=employee, task_id="t1", status=TaskStatus.ON_HOLD)
        )

        # Assert
        assert completed_at is not None
        assert reopened.value.status == TaskStatus.ON_HOLD
        assert reopened.value.completed_at is None

    async def test_progress_only(self, task_repo, access_policy, employee, mock_logger):
        task_repo.find_by_id.return_value = Success(value=make_task("t1", assigned_to="u1"))
        handler = UpdateTaskStatusHandler(task_repo, access_policy, mock_logger)

        result = await handler.handle(
            UpdateTaskStatus(principal=employee, task_id="t1", progress_percentage=60)
        )

        assert result.value.progress_percentage == 60
        assert task_repo.save.await_args[0][1] == ["progress_percentage"]

    async def test_employee_cannot_progress_others_task(
        self, task_repo, access_policy, employee, mock_logger
    ):
        task_repo.find_by_id.return_value = Success(value=make_task("t2", assigned_to="u2"))
        handler = UpdateTaskStatusHandler(task_repo, access_policy, mock_logger)

        result = await handler.handle(
            UpdateTaskStatus(principal=employee, task_id="t2", status=TaskStatus.COMPLETED)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TASK_NOT_ASSIGNED
        task_repo.save.assert_not_called()

    async def test_nothing_to_change(self, task_repo, access_policy, employee, mock_logger):
        handler = UpdateTaskStatusHandler(task_repo, access_policy, mock_logger)

        result = await handler.handle(UpdateTaskStatus(principal=employee, task_id="t1"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.EMPTY_UPDATE
        task_repo.find_by_id.assert_not_called()

    async def test_progress_out_of_range(self, task_repo, access_policy, employee, mock_logger):
        handler = UpdateTaskStatusHandler(task_repo, access_policy, mock_logger)

        result = await handler.handle(
            UpdateTaskStatus(principal=employee, task_id="t1", progress_percentage=101)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_PROGRESS
        task_repo.find_by_id.assert_not_called()

    async def test_missing_task(self, task_repo, access_policy, manager, mock_logger):
        task_repo.find_by_id.return_value = Success(value=None)
        handler = UpdateTaskStatusHandler(task_repo, access_policy, mock_logger)

        result = await handler.handle(
            UpdateTaskStatus(principal=manager, task_id="t9", status=TaskStatus.IN_PROGRESS)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TASK_NOT_FOUND


@pytest.mark.unit
class TestDeleteTaskHandler:
    async def test_manager_deletes(self, task_repo, access_policy, manager, mock_logger):
        task_repo.delete.return_value = Success(value=None)
        handler = DeleteTaskHandler(task_repo, access_policy, mock_logger)

        result = await handler.handle(DeleteTask(principal=manager, task_id="t1"))

        assert isinstance(result, Success)
        task_repo.delete.assert_awaited_once_with("t1")

    async def test_employee_cannot_delete(self, task_repo, access_policy, employee, mock_logger):
        handler = DeleteTaskHandler(task_repo, access_policy, mock_logger)

        result = await handler.handle(DeleteTask(principal=employee, task_id="t1"))

        assert isinstance(result, Failure)
        task_repo.delete.assert_not_called()


@pytest.mark.unit
class TestTaskQueries:
    async def test_employee_list_is_scoped_to_self(self, task_repo, access_policy, employee):
        task_repo.list_all.return_value = Success(value=[make_task("t1", assigned_to="u1")])
        handler = ListTasksHandler(task_repo, access_policy)

        result = await handler.handle(ListTasks(principal=employee))

        assert [t.id for t in result.value] == ["t1"]
        task_repo.list_all.assert_awaited_once_with(assigned_to="u1")

    async def test_employee_filtering_on_someone_else_gets_nothing(
        self, task_repo, access_policy, employee
    ):
        handler = ListTasksHandler(task_repo, access_policy)

        result = await handler.handle(ListTasks(principal=employee, assigned_to="u2"))

        assert result == Success(value=[])
        task_repo.list_all.assert_not_called()

    async def test_manager_lists_everything(self, task_repo, access_policy, manager):
        tasks = [make_task("t1", assigned_to="u1"), make_task("t2", assigned_to="u2")]
        task_repo.list_all.return_value = Success(value=tasks)
        handler = ListTasksHandler(task_repo, access_policy)

        result = await handler.handle(ListTasks(principal=manager))

        assert [t.id for t in result.value] == ["t1", "t2"]
        task_repo.list_all.assert_awaited_once_with(assigned_to=None)

    async def test_manager_filter_is_passed_through(self, task_repo, access_policy, manager):
        task_repo.list_all.return_value = Success(value=[])
        handler = ListTasksHandler(task_repo, access_policy)

        await handler.handle(ListTasks(principal=manager, assigned_to="u2"))

        task_repo.list_all.assert_awaited_once_with(assigned_to="u2")

    async def test_employee_cannot_get_others_task(self, task_repo, access_policy, employee):
        task_repo.find_by_id.return_value = Success(value=make_task("t2", assigned_to="u2"))
        handler = GetTaskHandler(task_repo, access_policy)

        result = await handler.handle(GetTask(principal=employee, task_id="t2"))

        assert result == Success(value=None)

    async def test_employee_gets_own_task(self, task_repo, access_policy, employee):
        task = make_task("t1", assigned_to="u1")
        task_repo.find_by_id.return_value = Success(value=task)
        handler = GetTaskHandler(task_repo, access_policy)

        result = await handler.handle(GetTask(principal=employee, task_id="t1"))

        assert result == Success(value=task)

    async def test_unauthenticated_list_is_denied(self, task_repo, access_policy):
        handler = ListTasksHandler(task_repo, access_policy)

        result = await handler.handle(ListTasks(principal=None))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.NOT_AUTHENTICATED
