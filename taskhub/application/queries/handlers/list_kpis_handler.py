"""ListKpis query handler."""

from taskhub.application.queries.kpi_queries import ListKpis
from taskhub.application.services.access_policy import AccessPolicy
from taskhub.core.errors import DomainError
from taskhub.core.result import Failure, Result
from taskhub.domain.entities import KpiMetric
from taskhub.domain.enums import Action, Resource
from taskhub.domain.protocols import KpiRepository


class ListKpisHandler:
    def __init__(self, kpi_repo: KpiRepository, access_policy: AccessPolicy) -> None:
        self._kpi_repo = kpi_repo
        self._access_policy = access_policy

    async def handle(self, query: ListKpis) -> Result[list[KpiMetric], DomainError]:
        match self._access_policy.authorize(query.principal, Resource.KPIS, Action.READ):
            case Failure(error=error):
                return Failure(error=error)
        return await self._kpi_repo.list_all()
