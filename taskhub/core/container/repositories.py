"""Repository factories (request-scoped).

Each repository wraps the request's record store, so every read and write
runs with the caller's credentials.
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from taskhub.core.container.infrastructure import get_logger, get_request_store

if TYPE_CHECKING:
    from taskhub.application.services.session_watcher import PrincipalResolver
    from taskhub.domain.protocols import (
        KpiRepository,
        PrincipalRepository,
        RecordStoreProtocol,
        TaskRepository,
    )


def get_principal_repository(
    store: "RecordStoreProtocol" = Depends(get_request_store),
) -> "PrincipalRepository":
    from taskhub.infrastructure.persistence import PrincipalRepository

    return PrincipalRepository(store)


def get_task_repository(
    store: "RecordStoreProtocol" = Depends(get_request_store),
) -> "TaskRepository":
    from taskhub.infrastructure.persistence import TaskRepository

    return TaskRepository(store)


def get_kpi_repository(
    store: "RecordStoreProtocol" = Depends(get_request_store),
) -> "KpiRepository":
    from taskhub.infrastructure.persistence import KpiRepository

    return KpiRepository(store)


def get_principal_resolver(
    principal_repo: "PrincipalRepository" = Depends(get_principal_repository),
) -> "PrincipalResolver":
    """Resolver reading profiles with the caller's credentials."""
    from taskhub.application.services.session_watcher import PrincipalResolver

    return PrincipalResolver(principals=principal_repo, logger=get_logger())
