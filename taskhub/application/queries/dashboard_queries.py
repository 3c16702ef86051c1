"""Dashboard queries."""

from dataclasses import dataclass

from taskhub.domain.entities import Principal


@dataclass(frozen=True, kw_only=True)
class GetDashboardStats:
    """Organisation-wide headline statistics for any authenticated principal."""

    principal: Principal | None
