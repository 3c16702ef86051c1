"""Employee commands (CQRS write operations)."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from taskhub.domain.entities import Principal
from taskhub.domain.enums import UserRole


@dataclass(frozen=True, kw_only=True)
class CreateEmployee:
    """Create an identity and a profile for a new staff member.

    The identity is created with a generated password; the new principal
    sets their own through the identity provider.

    Attributes:
        principal: Acting principal.
        email: Sign-in email.
        full_name: Display name.
        role: Role of the new principal. Admin requires the admin-grant capability.
        department: Optional department.
    """

    principal: Principal | None
    email: str
    full_name: str
    role: UserRole = UserRole.EMPLOYEE
    department: str | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateEmployee:
    """Edit profile fields of a principal.

    Attributes:
        principal: Acting principal.
        employee_id: Principal being edited.
        changes: Keys full_name, role, department, avatar_url.
    """

    principal: Principal | None
    employee_id: str
    changes: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, kw_only=True)
class DeactivateEmployee:
    """Soft-remove a principal (is_active = false); records are retained."""

    principal: Principal | None
    employee_id: str
