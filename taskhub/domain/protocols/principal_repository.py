"""PrincipalRepository protocol for `users` profile persistence."""

from collections.abc import Iterable
from typing import Any, Protocol

from taskhub.core.result import Result
from taskhub.domain.entities import Principal
from taskhub.domain.enums import UserRole
from taskhub.domain.errors import StoreError


class PrincipalRepository(Protocol):
    """Principal persistence port.

    Methods:
        find_by_id: Load one principal profile
        list_by_roles: Directory listing filtered by role
        count_by_role: Number of profiles holding a role
        add: Insert a new profile
        update: Patch profile fields
    """

    async def find_by_id(self, principal_id: str) -> Result[Principal | None, StoreError]:
        """Find a principal by id.

        Returns:
            Success(Principal), Success(None) when no profile exists, or
            Failure(StoreError).
        """
        ...

    async def list_by_roles(
        self, roles: Iterable[UserRole], *, active_only: bool = False
    ) -> Result[list[Principal], StoreError]:
        """List principals whose role is one of ``roles``."""
        ...

    async def count_by_role(self, role: UserRole) -> Result[int, StoreError]:
        """Count principals holding ``role``."""
        ...

    async def add(self, principal: Principal) -> Result[Principal, StoreError]:
        """Insert a principal profile and return it as stored."""
        ...

    async def update(
        self, principal_id: str, changes: dict[str, Any]
    ) -> Result[Principal, StoreError]:
        """Patch the named profile fields and return the updated principal.

        Args:
            principal_id: Target profile.
            changes: Field name to new value. Enum values are accepted.
        """
        ...
