"""Principal (employee profile) response schemas.

Shared by the auth and employee routers.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from taskhub.domain.entities import Principal
from taskhub.domain.enums import UserRole


class PrincipalResponse(BaseModel):
    """Single principal profile.

    Attributes:
        id: Identity user id.
        email: Email address.
        full_name: Display name.
        role: admin, manager or employee.
        department: Optional department.
        is_active: False once deactivated.
        avatar_url: Optional avatar image URL.
        created_at: Row creation timestamp.
        updated_at: Row update timestamp.
    """

    id: str = Field(..., description="Principal identifier")
    email: str = Field(..., description="Email address")
    full_name: str = Field(..., description="Display name")
    role: UserRole = Field(..., description="RBAC role")
    department: str | None = Field(None, description="Department name")
    is_active: bool = Field(..., description="Whether the principal is active")
    avatar_url: str | None = Field(None, description="Avatar image URL")
    created_at: datetime | None = Field(None, description="Creation timestamp")
    updated_at: datetime | None = Field(None, description="Last update timestamp")

    @classmethod
    def from_entity(cls, principal: Principal) -> "PrincipalResponse":
        return cls(
            id=principal.id,
            email=principal.email,
            full_name=principal.full_name,
            role=principal.role,
            department=principal.department,
            is_active=principal.is_active,
            avatar_url=principal.avatar_url,
            created_at=principal.created_at,
            updated_at=principal.updated_at,
        )
