"""Authorization dependency factories.

The Casbin enforcer is loaded once from the model and policy files named in
settings; the AccessPolicy service is layered on top of it.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from taskhub.core.config import settings
from taskhub.core.container.infrastructure import get_logger

if TYPE_CHECKING:
    from taskhub.application.services.access_policy import AccessPolicy
    from taskhub.domain.protocols import AuthorizationProtocol


@lru_cache()
def get_authorization() -> "AuthorizationProtocol":
    """Return the application-scoped Casbin adapter."""
    from taskhub.infrastructure.authorization import CasbinAdapter

    return CasbinAdapter.from_files(
        settings.casbin_model_path, settings.casbin_policy_path, get_logger()
    )


@lru_cache()
def get_access_policy() -> "AccessPolicy":
    """Return the application-scoped AccessPolicy service."""
    from taskhub.application.services.access_policy import AccessPolicy

    return AccessPolicy(authorization=get_authorization(), logger=get_logger())
