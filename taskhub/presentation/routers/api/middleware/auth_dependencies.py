"""Authentication dependencies.

Resolves the acting principal for every protected request: bearer token ->
identity provider user -> active `users` profile. Requests that fail any
step are rejected with 401 before a handler runs.

Usage:
    @router.get("/protected")
    async def protected_route(principal: CurrentPrincipal):
        return {"principal_id": principal.id}
"""

from typing import Annotated

from fastapi import Depends, HTTPException, status

from taskhub.application.services.session_watcher import PrincipalResolver
from taskhub.core.container import (
    get_access_token,
    get_identity_provider,
    get_principal_resolver,
)
from taskhub.core.result import Failure, Success
from taskhub.domain.entities import Principal
from taskhub.domain.protocols import IdentityProviderProtocol


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def require_access_token(
    access_token: Annotated[str | None, Depends(get_access_token)],
) -> str:
    """Bearer token of the request; 401 when missing."""
    if not access_token:
        raise _unauthorized("Missing bearer token")
    return access_token


async def get_current_principal(
    access_token: Annotated[str, Depends(require_access_token)],
    identity: Annotated[IdentityProviderProtocol, Depends(get_identity_provider)],
    resolver: Annotated[PrincipalResolver, Depends(get_principal_resolver)],
) -> Principal:
    """Get the active principal behind the request's bearer token.

    Raises:
        HTTPException 401: Token missing, rejected by the identity provider,
            or no active profile for the user.
    """
    match await identity.get_user(access_token):
        case Failure(error=error):
            raise _unauthorized(error.message)
        case Success(value=user):
            pass

    principal = await resolver.resolve_user(user)
    if principal is None:
        raise _unauthorized("No active profile for this account")
    return principal


CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]
AccessToken = Annotated[str, Depends(require_access_token)]
