"""Employee directory request and response schemas."""

from pydantic import BaseModel, Field

from taskhub.domain.entities import EmployeeStats, Principal
from taskhub.domain.enums import UserRole
from taskhub.schemas.principal_schemas import PrincipalResponse


class EmployeeCreateRequest(BaseModel):
    """Create employee request.

    Only admins may create another admin.
    """

    email: str = Field(..., description="Sign-in email")
    full_name: str = Field(..., description="Display name")
    role: UserRole = Field(default=UserRole.EMPLOYEE, description="Role of the new principal")
    department: str | None = Field(None, description="Department name")


class EmployeeUpdateRequest(BaseModel):
    """Partial employee edit."""

    full_name: str | None = None
    role: UserRole | None = None
    department: str | None = None
    avatar_url: str | None = None


class EmployeeListResponse(BaseModel):
    """Employees and managers, ordered by name."""

    employees: list[PrincipalResponse] = Field(default_factory=list)
    total_count: int

    @classmethod
    def from_entities(cls, principals: list[Principal]) -> "EmployeeListResponse":
        return cls(
            employees=[PrincipalResponse.from_entity(p) for p in principals],
            total_count=len(principals),
        )


class EmployeeStatsResponse(BaseModel):
    """Per-employee task statistics."""

    principal_id: str
    total_tasks_assigned: int
    tasks_completed: int
    tasks_in_progress: int
    tasks_overdue: int
    completion_rate: float = Field(..., description="Completed / assigned * 100")

    @classmethod
    def from_stats(cls, stats: EmployeeStats) -> "EmployeeStatsResponse":
        return cls(
            principal_id=stats.principal_id,
            total_tasks_assigned=stats.total_tasks_assigned,
            tasks_completed=stats.tasks_completed,
            tasks_in_progress=stats.tasks_in_progress,
            tasks_overdue=stats.tasks_overdue,
            completion_rate=stats.completion_rate,
        )
