"""Principal domain entity.

An authenticated actor with exactly one role. Principals are immutable
snapshots: any change (role, department, deactivation) produces a new
record in the store and a new snapshot when next resolved.
"""

from dataclasses import dataclass, replace
from datetime import datetime

from taskhub.domain.enums import UserRole


@dataclass(frozen=True, slots=True, kw_only=True)
class Principal:
    """Authenticated actor with an assigned role.

    Attributes:
        id: Identity-provider user id (also the `users` row id).
        email: Email address.
        full_name: Display name.
        role: Exactly one of admin, manager, employee.
        department: Optional department name.
        is_active: False once the principal has been deactivated.
        avatar_url: Optional avatar image URL.
        created_at: Row creation timestamp.
        updated_at: Row update timestamp.

    Example:
        >>> p = Principal(id="u1", email="a@b.co", full_name="Ada", role=UserRole.EMPLOYEE)
        >>> p.deactivated().is_active
        False
    """

    id: str
    email: str
    full_name: str
    role: UserRole
    department: str | None = None
    is_active: bool = True
    avatar_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Principal id must not be empty")

    @property
    def is_admin(self) -> bool:
        """True for the admin role."""
        return self.role == UserRole.ADMIN

    @property
    def manages_staff(self) -> bool:
        """True for admin and manager roles."""
        return self.role.manages_staff

    def deactivated(self) -> "Principal":
        """Return a copy with is_active cleared; every other field is unchanged."""
        return replace(self, is_active=False)
