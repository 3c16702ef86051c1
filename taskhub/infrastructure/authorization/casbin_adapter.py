"""Casbin implementation of AuthorizationProtocol.

Role capabilities live in a Casbin policy file (one ``p, role, resource,
action`` row per grant) evaluated against a flat request/policy matcher. No
role inheritance: every role's grants are listed explicitly.

Following hexagonal architecture:
- Infrastructure implements the domain protocol (AuthorizationProtocol)
- Domain and application layers never import casbin
"""

from pathlib import Path
from typing import TYPE_CHECKING

import casbin

from taskhub.domain.enums import Action, Resource, UserRole

if TYPE_CHECKING:
    from taskhub.domain.protocols.logger_protocol import LoggerProtocol


class CasbinAdapter:
    """Casbin-based role capability checks.

    Attributes:
        _enforcer: Synchronous Casbin enforcer loaded from model and policy files.
        _logger: Structured logger.
    """

    def __init__(self, enforcer: casbin.Enforcer, logger: "LoggerProtocol") -> None:
        self._enforcer = enforcer
        self._logger = logger

    @classmethod
    def from_files(
        cls, model_path: Path, policy_path: Path, logger: "LoggerProtocol"
    ) -> "CasbinAdapter":
        """Build an adapter over a model file and a CSV policy file."""
        enforcer = casbin.Enforcer(str(model_path), str(policy_path))
        logger.info(
            "casbin_policy_loaded",
            model_path=str(model_path),
            policy_path=str(policy_path),
            policy_count=len(enforcer.get_policy()),
        )
        return cls(enforcer, logger)

    def check_permission(self, role: UserRole, resource: Resource, action: Action) -> bool:
        """Check a (role, resource, action) triple against the policy.

        Fails closed: enforcer errors are logged and reported as a denial.
        """
        try:
            allowed = bool(self._enforcer.enforce(role.value, resource.value, action.value))
        except Exception as e:
            self._logger.error(
                "authorization_check_error",
                error=e,
                role=role.value,
                resource=resource.value,
                action=action.value,
            )
            return False

        self._logger.debug(
            "authorization_checked",
            role=role.value,
            resource=resource.value,
            action=action.value,
            allowed=allowed,
        )
        return allowed

    def get_permissions_for_role(self, role: UserRole) -> list[tuple[Resource, Action]]:
        """List the (resource, action) pairs granted to ``role``.

        Policy rows naming unknown resources or actions are skipped.
        """
        permissions: list[tuple[Resource, Action]] = []
        for _sub, obj, act in self._enforcer.get_permissions_for_user(role.value):
            if obj in Resource.values() and act in Action.values():
                permissions.append((Resource(obj), Action(act)))
        return permissions
