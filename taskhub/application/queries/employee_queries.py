"""Employee directory queries."""

from dataclasses import dataclass

from taskhub.domain.entities import Principal


@dataclass(frozen=True, kw_only=True)
class ListEmployees:
    """List principals with role employee or manager.

    Attributes:
        principal: Acting principal.
        active_only: Exclude deactivated principals.
    """

    principal: Principal | None
    active_only: bool = False


@dataclass(frozen=True, kw_only=True)
class GetEmployee:
    principal: Principal | None
    employee_id: str


@dataclass(frozen=True, kw_only=True)
class GetEmployeeStats:
    """Task statistics for one principal, derived from their assigned tasks."""

    principal: Principal | None
    employee_id: str
