"""Domain protocols (ports).

Infrastructure adapters implement these structurally; nothing inherits them.
"""

from taskhub.domain.protocols.authorization_protocol import AuthorizationProtocol
from taskhub.domain.protocols.identity_provider_protocol import (
    AuthChangeListener,
    AuthEvent,
    IdentityProviderProtocol,
    Unsubscribe,
)
from taskhub.domain.protocols.kpi_repository import KpiRepository
from taskhub.domain.protocols.logger_protocol import LoggerProtocol
from taskhub.domain.protocols.principal_repository import PrincipalRepository
from taskhub.domain.protocols.record_store_protocol import Record, RecordStoreProtocol
from taskhub.domain.protocols.task_repository import TaskRepository

__all__ = [
    "AuthChangeListener",
    "AuthEvent",
    "AuthorizationProtocol",
    "IdentityProviderProtocol",
    "KpiRepository",
    "LoggerProtocol",
    "PrincipalRepository",
    "Record",
    "RecordStoreProtocol",
    "TaskRepository",
    "Unsubscribe",
]
