"""Authentication resource router.

Endpoints:
    POST   /auth/registrations      - Self sign-up (employee role)
    POST   /auth/sessions           - Sign in
    POST   /auth/sessions/refresh   - Exchange a refresh token
    DELETE /auth/sessions/current   - Sign out
    GET    /auth/me                 - Current principal, sections, permissions
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, Response

from taskhub.application.commands import RefreshSession, RegisterPrincipal, SignIn, SignOut
from taskhub.application.commands.handlers.auth_handlers import (
    RefreshSessionHandler,
    RegisterPrincipalHandler,
    SignInHandler,
    SignOutHandler,
)
from taskhub.application.services import AccessPolicy, ordered_sections
from taskhub.core.container import (
    get_access_policy,
    get_refresh_session_handler,
    get_register_principal_handler,
    get_sign_in_handler,
    get_sign_out_handler,
)
from taskhub.core.result import Failure, Success
from taskhub.presentation.routers.api.middleware.auth_dependencies import (
    AccessToken,
    CurrentPrincipal,
)
from taskhub.presentation.routers.api.middleware.trace_middleware import get_trace_id
from taskhub.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from taskhub.schemas.auth_schemas import (
    MeResponse,
    RegistrationRequest,
    SectionResponse,
    SessionCreateRequest,
    SessionRefreshRequest,
    SessionResponse,
)
from taskhub.schemas.principal_schemas import PrincipalResponse

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post(
    "/registrations",
    status_code=status.HTTP_201_CREATED,
    response_model=PrincipalResponse,
    responses={
        400: {"model": ProblemDetails},
        409: {"model": ProblemDetails},
        502: {"model": ProblemDetails},
    },
    summary="Register",
)
async def register(
    request: Request,
    data: RegistrationRequest,
    handler: RegisterPrincipalHandler = Depends(get_register_principal_handler),
) -> PrincipalResponse | JSONResponse:
    """Create an identity and an employee profile.

    POST /api/v1/auth/registrations -> 201 Created
    """
    result = await handler.handle(
        RegisterPrincipal(email=data.email, password=data.password, full_name=data.full_name)
    )

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())
        case Success(value=principal):
            return PrincipalResponse.from_entity(principal)


@router.post(
    "/sessions",
    status_code=status.HTTP_201_CREATED,
    response_model=SessionResponse,
    responses={401: {"model": ProblemDetails}, 502: {"model": ProblemDetails}},
    summary="Sign in",
)
async def create_session(
    request: Request,
    data: SessionCreateRequest,
    handler: SignInHandler = Depends(get_sign_in_handler),
) -> SessionResponse | JSONResponse:
    """Authenticate with email and password.

    POST /api/v1/auth/sessions -> 201 Created
    """
    result = await handler.handle(SignIn(email=data.email, password=data.password))

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())
        case Success(value=signed_in):
            return SessionResponse.from_signed_in(signed_in)


@router.post(
    "/sessions/refresh",
    status_code=status.HTTP_201_CREATED,
    response_model=SessionResponse,
    responses={401: {"model": ProblemDetails}, 502: {"model": ProblemDetails}},
    summary="Refresh session",
)
async def refresh_session(
    request: Request,
    data: SessionRefreshRequest,
    handler: RefreshSessionHandler = Depends(get_refresh_session_handler),
) -> SessionResponse | JSONResponse:
    result = await handler.handle(RefreshSession(refresh_token=data.refresh_token))

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request, get_trace_id())
        case Success(value=session):
            return SessionResponse.from_session(session)


@router.delete(
    "/sessions/current",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={401: {"model": ProblemDetails}, 502: {"model": ProblemDetails}},
    summary="Sign out",
)
async def delete_current_session(
    request: Request,
    access_token: AccessToken,
    handler: SignOutHandler = Depends(get_sign_out_handler),
) -> Response:
    """Revoke the session behind the request's bearer token.

    DELETE /api/v1/auth/sessions/current -> 204 No Content
    """
    result = await handler.handle(SignOut(access_token=access_token))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request, get_trace_id())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/me",
    response_model=MeResponse,
    responses={401: {"model": ProblemDetails}},
    summary="Current principal",
)
async def get_me(
    principal: CurrentPrincipal,
    access_policy: AccessPolicy = Depends(get_access_policy),
) -> MeResponse:
    return MeResponse(
        principal=PrincipalResponse.from_entity(principal),
        sections=[SectionResponse.from_section(s) for s in ordered_sections(principal.role)],
        permissions=access_policy.permissions_for(principal),
    )
