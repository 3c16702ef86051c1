"""UpdateEmployee and DeactivateEmployee command handlers."""

from taskhub.application.commands.employee_commands import DeactivateEmployee, UpdateEmployee
from taskhub.application.queries.handlers.get_employee_handler import principal_not_found
from taskhub.application.services.access_policy import AccessPolicy
from taskhub.application.validation import require_text, restrict_changes
from taskhub.core.errors import DomainError
from taskhub.core.result import Failure, Result, Success
from taskhub.domain.entities import Principal
from taskhub.domain.enums import Action, Resource
from taskhub.domain.protocols import LoggerProtocol, PrincipalRepository

EDITABLE_FIELDS = ("full_name", "role", "department", "avatar_url")
NON_NULLABLE_FIELDS = ("full_name", "role")


class UpdateEmployeeHandler:
    """Handler for UpdateEmployee command.

    Admin accounts are changed only by principals allowed to grant admin.
    A role change is also checked against the admin-grant rule and the
    no-self-role-change rule. All checks run before anything is written.
    """

    def __init__(
        self,
        principal_repo: PrincipalRepository,
        access_policy: AccessPolicy,
        logger: LoggerProtocol,
    ) -> None:
        self._principal_repo = principal_repo
        self._access_policy = access_policy
        self._logger = logger

    async def handle(self, cmd: UpdateEmployee) -> Result[Principal, DomainError]:
        match self._access_policy.authorize(cmd.principal, Resource.EMPLOYEES, Action.UPDATE):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=actor):
                pass

        match restrict_changes(cmd.changes, EDITABLE_FIELDS, NON_NULLABLE_FIELDS):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=changes):
                pass

        if "full_name" in changes:
            match require_text(changes["full_name"], "full_name"):
                case Failure(error=error):
                    return Failure(error=error)
                case Success(value=full_name):
                    changes["full_name"] = full_name

        match await load_changeable_principal(
            self._principal_repo, self._access_policy, actor, cmd.employee_id
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=target):
                pass

        if "role" in changes:
            match self._access_policy.authorize_role_assignment(
                actor,
                changes["role"],
                target_id=target.id,
                current_role=target.role,
            ):
                case Failure(error=error):
                    return Failure(error=error)

        result = await self._principal_repo.update(cmd.employee_id, changes)
        if isinstance(result, Success):
            self._logger.info(
                "employee_updated",
                employee_id=cmd.employee_id,
                updated_by=actor.id,
                fields=sorted(changes),
            )
        return result


class DeactivateEmployeeHandler:
    """Handler for DeactivateEmployee command.

    Soft removal: the only field written is is_active. The profile and its
    task history stay in place.
    """

    def __init__(
        self,
        principal_repo: PrincipalRepository,
        access_policy: AccessPolicy,
        logger: LoggerProtocol,
    ) -> None:
        self._principal_repo = principal_repo
        self._access_policy = access_policy
        self._logger = logger

    async def handle(self, cmd: DeactivateEmployee) -> Result[Principal, DomainError]:
        match self._access_policy.authorize(
            cmd.principal, Resource.EMPLOYEES, Action.DEACTIVATE
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=actor):
                pass

        match await load_changeable_principal(
            self._principal_repo, self._access_policy, actor, cmd.employee_id
        ):
            case Failure(error=error):
                return Failure(error=error)

        result = await self._principal_repo.update(cmd.employee_id, {"is_active": False})
        if isinstance(result, Success):
            self._logger.info(
                "employee_deactivated", employee_id=cmd.employee_id, deactivated_by=actor.id
            )
        return result


async def load_changeable_principal(
    principal_repo: PrincipalRepository,
    access_policy: AccessPolicy,
    actor: Principal,
    employee_id: str,
) -> Result[Principal, DomainError]:
    """Load the principal about to be changed and check ``actor`` may change it."""
    match await principal_repo.find_by_id(employee_id):
        case Failure(error=error):
            return Failure(error=error)
        case Success(value=None):
            return Failure(error=principal_not_found(employee_id))
        case Success(value=target):
            pass

    match access_policy.authorize_admin_target(actor, target):
        case Failure(error=error):
            return Failure(error=error)
    return Success(value=target)
