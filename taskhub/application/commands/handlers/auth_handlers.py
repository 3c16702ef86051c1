"""Account and session command handlers.

Registration creates an identity and an employee profile. Sign-in, sign-out
and refresh are delegated to the identity provider, which publishes the
matching auth-state change to its subscribers.
"""

from dataclasses import dataclass

from taskhub.application.commands.auth_commands import (
    RefreshSession,
    RegisterPrincipal,
    SignIn,
    SignOut,
)
from taskhub.application.services.session_watcher import PrincipalResolver
from taskhub.application.validation import require_email, require_text
from taskhub.core.enums import ErrorCode
from taskhub.core.errors import DomainError
from taskhub.core.result import Failure, Result, Success
from taskhub.domain.entities import AuthSession, Principal
from taskhub.domain.enums import UserRole
from taskhub.domain.errors import AuthError
from taskhub.domain.protocols import (
    IdentityProviderProtocol,
    LoggerProtocol,
    PrincipalRepository,
)


@dataclass(frozen=True, slots=True, kw_only=True)
class SignedIn:
    """Session together with the principal it resolves to."""

    session: AuthSession
    principal: Principal


class RegisterPrincipalHandler:
    """Handler for RegisterPrincipal command. Self sign-up always yields an employee."""

    def __init__(
        self,
        identity: IdentityProviderProtocol,
        principal_repo: PrincipalRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._identity = identity
        self._principal_repo = principal_repo
        self._logger = logger

    async def handle(self, cmd: RegisterPrincipal) -> Result[Principal, DomainError]:
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

        match await self._identity.sign_up(email, cmd.password, {"full_name": full_name}):
            case Failure(error=error):
                self._logger.info("registration_rejected", reason=error.code.value)
                return Failure(error=error)
            case Success(value=user):
                pass

        result = await self._principal_repo.add(
            Principal(id=user.id, email=email, full_name=full_name, role=UserRole.EMPLOYEE)
        )
        match result:
            case Failure(error=error):
                self._logger.error(
                    "registration_profile_insert_failed",
                    user_id=user.id,
                    error_code=error.code.value,
                )
            case Success(value=principal):
                self._logger.info("principal_registered", principal_id=principal.id)
        return result


class SignInHandler:
    """Handler for SignIn command.

    A session whose user has no active profile is revoked immediately and
    reported as an authentication failure.
    """

    def __init__(
        self,
        identity: IdentityProviderProtocol,
        resolver: PrincipalResolver,
        logger: LoggerProtocol,
    ) -> None:
        self._identity = identity
        self._resolver = resolver
        self._logger = logger

    async def handle(self, cmd: SignIn) -> Result[SignedIn, DomainError]:
        match await self._identity.sign_in(cmd.email.strip().lower(), cmd.password):
            case Failure(error=error):
                self._logger.info("sign_in_rejected", reason=error.code.value)
                return Failure(error=error)
            case Success(value=session):
                pass

        principal = await self._resolver.resolve(session)
        if principal is None:
            match await self._identity.sign_out(session.access_token):
                case Failure(error=error):
                    self._logger.warning(
                        "sign_in_revoke_failed", user_id=session.user.id, reason=error.code.value
                    )
            return Failure(
                error=AuthError(
                    code=ErrorCode.AUTHENTICATION_FAILED,
                    message="Account is inactive or has no profile",
                )
            )

        self._logger.info("principal_signed_in", principal_id=principal.id)
        return Success(value=SignedIn(session=session, principal=principal))


class SignOutHandler:
    def __init__(self, identity: IdentityProviderProtocol, logger: LoggerProtocol) -> None:
        self._identity = identity
        self._logger = logger

    async def handle(self, cmd: SignOut) -> Result[None, DomainError]:
        result = await self._identity.sign_out(cmd.access_token)
        if isinstance(result, Success):
            self._logger.info("principal_signed_out")
        return result


class RefreshSessionHandler:
    def __init__(self, identity: IdentityProviderProtocol) -> None:
        self._identity = identity

    async def handle(self, cmd: RefreshSession) -> Result[AuthSession, DomainError]:
        return await self._identity.refresh(cmd.refresh_token)
