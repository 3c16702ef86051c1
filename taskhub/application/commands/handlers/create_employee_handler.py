"""CreateEmployee command handler.

Creates the identity first (with a generated password), then the `users`
profile keyed by the new identity id. Role grants are checked before the
identity provider is contacted.
"""

import secrets

from taskhub.application.commands.employee_commands import CreateEmployee
from taskhub.application.services.access_policy import AccessPolicy
from taskhub.application.validation import require_email, require_text
from taskhub.core.errors import DomainError
from taskhub.core.result import Failure, Result, Success
from taskhub.domain.entities import Principal
from taskhub.domain.enums import Action, Resource
from taskhub.domain.protocols import (
    IdentityProviderProtocol,
    LoggerProtocol,
    PrincipalRepository,
)

GENERATED_PASSWORD_BYTES = 24


class CreateEmployeeHandler:
    """Handler for CreateEmployee command.

    Dependencies (injected via constructor):
        - IdentityProviderProtocol: identity creation
        - PrincipalRepository: profile persistence
        - AccessPolicy: employees:create and admin-grant gates
        - LoggerProtocol: event log
    """

    def __init__(
        self,
        identity: IdentityProviderProtocol,
        principal_repo: PrincipalRepository,
        access_policy: AccessPolicy,
        logger: LoggerProtocol,
    ) -> None:
        self._identity = identity
        self._principal_repo = principal_repo
        self._access_policy = access_policy
        self._logger = logger

    async def handle(self, cmd: CreateEmployee) -> Result[Principal, DomainError]:
        """Create identity and profile.

        Returns:
            Success(Principal): Stored profile.
            Failure(ForbiddenError): No employees:create, or admin role
                requested without the admin-grant capability.
            Failure(ValidationError): Invalid email or blank name.
            Failure(AuthError): Identity provider refused the sign-up.
            Failure(StoreError): Profile insert failed.
        """
        match self._access_policy.authorize(cmd.principal, Resource.EMPLOYEES, Action.CREATE):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=actor):
                pass

        match require_email(cmd.email):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=email):
                pass

        match require_text(cmd.full_name, "full_name"):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=full_name):
                pass

        match self._access_policy.authorize_role_assignment(actor, cmd.role):
            case Failure(error=error):
                return Failure(error=error)

        match await self._identity.sign_up(
            email,
            secrets.token_urlsafe(GENERATED_PASSWORD_BYTES),
            {"full_name": full_name},
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=user):
                pass

        profile = Principal(
            id=user.id,
            email=email,
            full_name=full_name,
            role=cmd.role,
            department=cmd.department,
        )
        result = await self._principal_repo.add(profile)
        match result:
            case Failure(error=error):
                # Identity exists without a profile; it resolves to no principal
                self._logger.error(
                    "employee_profile_insert_failed",
                    user_id=user.id,
                    error_code=error.code.value,
                )
            case Success(value=employee):
                self._logger.info(
                    "employee_created",
                    employee_id=employee.id,
                    role=employee.role.value,
                    created_by=actor.id,
                )
        return result
