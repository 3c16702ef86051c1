"""KPI metric command handlers (create, update, delete)."""

from datetime import date

from uuid_extensions import uuid7

from taskhub.application.commands.kpi_commands import CreateKpi, DeleteKpi, UpdateKpi
from taskhub.application.services.access_policy import AccessPolicy
from taskhub.application.validation import require_text, restrict_changes
from taskhub.core.errors import DomainError
from taskhub.core.result import Failure, Result, Success
from taskhub.domain.entities import KpiMetric
from taskhub.domain.enums import Action, Resource
from taskhub.domain.protocols import KpiRepository, LoggerProtocol

EDITABLE_FIELDS = ("metric_name", "metric_value", "metric_date", "period", "data_source")
NON_NULLABLE_FIELDS = ("metric_name", "metric_date", "period", "data_source")


class CreateKpiHandler:
    """Handler for CreateKpi command. metric_date defaults to today."""

    def __init__(
        self, kpi_repo: KpiRepository, access_policy: AccessPolicy, logger: LoggerProtocol
    ) -> None:
        self._kpi_repo = kpi_repo
        self._access_policy = access_policy
        self._logger = logger

    async def handle(self, cmd: CreateKpi) -> Result[KpiMetric, DomainError]:
        match self._access_policy.authorize(cmd.principal, Resource.KPIS, Action.CREATE):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=actor):
                pass

        match require_text(cmd.metric_name, "metric_name"):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=metric_name):
                pass

        metric = KpiMetric(
            id=str(uuid7()),
            metric_name=metric_name,
            metric_value=cmd.metric_value,
            metric_date=cmd.metric_date or date.today(),
            period=cmd.period,
            data_source=cmd.data_source,
        )
        result = await self._kpi_repo.add(metric)
        if isinstance(result, Success):
            self._logger.info(
                "kpi_recorded",
                kpi_id=result.value.id,
                metric_name=metric_name,
                recorded_by=actor.id,
            )
        return result


class UpdateKpiHandler:
    """Handler for UpdateKpi command."""

    def __init__(
        self, kpi_repo: KpiRepository, access_policy: AccessPolicy, logger: LoggerProtocol
    ) -> None:
        self._kpi_repo = kpi_repo
        self._access_policy = access_policy
        self._logger = logger

    async def handle(self, cmd: UpdateKpi) -> Result[KpiMetric, DomainError]:
        match self._access_policy.authorize(cmd.principal, Resource.KPIS, Action.UPDATE):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=actor):
                pass

        match restrict_changes(cmd.changes, EDITABLE_FIELDS, NON_NULLABLE_FIELDS):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=changes):
                pass

        if "metric_name" in changes:
            match require_text(changes["metric_name"], "metric_name"):
                case Failure(error=error):
                    return Failure(error=error)
                case Success(value=metric_name):
                    changes["metric_name"] = metric_name

        result = await self._kpi_repo.update(cmd.kpi_id, changes)
        if isinstance(result, Success):
            self._logger.info(
                "kpi_updated", kpi_id=cmd.kpi_id, updated_by=actor.id, fields=sorted(changes)
            )
        return result


class DeleteKpiHandler:
    """Handler for DeleteKpi command."""

    def __init__(
        self, kpi_repo: KpiRepository, access_policy: AccessPolicy, logger: LoggerProtocol
    ) -> None:
        self._kpi_repo = kpi_repo
        self._access_policy = access_policy
        self._logger = logger

    async def handle(self, cmd: DeleteKpi) -> Result[None, DomainError]:
        match self._access_policy.authorize(cmd.principal, Resource.KPIS, Action.DELETE):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=actor):
                pass

        result = await self._kpi_repo.delete(cmd.kpi_id)
        if isinstance(result, Success):
            self._logger.info("kpi_deleted", kpi_id=cmd.kpi_id, deleted_by=actor.id)
        return result
