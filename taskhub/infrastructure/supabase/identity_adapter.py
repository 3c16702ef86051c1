"""GoTrue implementation of IdentityProviderProtocol.

Endpoints:
    POST /auth/v1/signup
    POST /auth/v1/token?grant_type=password
    POST /auth/v1/token?grant_type=refresh_token
    POST /auth/v1/logout
    GET  /auth/v1/user

4xx responses become AuthError with an operation-specific code (invalid
credentials on sign-in, invalid session on refresh/user/logout, duplicate
email on sign-up). 5xx and transport failures keep the STORE_UNAVAILABLE code.
"""

from collections.abc import Callable
from dataclasses import replace
from typing import Any

import httpx

from taskhub.core.enums import ErrorCode
from taskhub.core.result import Failure, Result, Success
from taskhub.domain.entities import AuthSession, AuthUser
from taskhub.domain.errors import AuthError
from taskhub.domain.protocols import AuthChangeListener, AuthEvent, LoggerProtocol, Unsubscribe
from taskhub.infrastructure.identity.auth_change_notifier import AuthChangeNotifier
from taskhub.infrastructure.supabase.base_client import SupabaseHttpClient


def user_from_payload(payload: dict[str, Any]) -> AuthUser:
    """Build an AuthUser from a GoTrue user object.

    Raises:
        KeyError: ``id`` missing.
    """
    return AuthUser(
        id=str(payload["id"]),
        email=payload.get("email") or "",
        metadata=dict(payload.get("user_metadata") or {}),
    )


def session_from_payload(payload: dict[str, Any]) -> AuthSession:
    """Build an AuthSession from a GoTrue token response.

    Raises:
        KeyError: Token or user fields missing.
    """
    return AuthSession(
        access_token=payload["access_token"],
        refresh_token=payload["refresh_token"],
        expires_in=int(payload.get("expires_in") or 3600),
        token_type=payload.get("token_type") or "bearer",
        user=user_from_payload(payload["user"]),
    )


class SupabaseIdentityAdapter(SupabaseHttpClient):
    """Identity provider backed by Supabase Auth (GoTrue)."""

    error_type = AuthError

    def __init__(
        self, *, base_url: str, api_key: str, timeout: float, logger: LoggerProtocol
    ) -> None:
        super().__init__(base_url=base_url, api_key=api_key, timeout=timeout, service="auth")
        self._notifier = AuthChangeNotifier(logger)

    def current_session(self) -> AuthSession | None:
        return self._notifier.current_session()

    def subscribe(self, listener: AuthChangeListener) -> Unsubscribe:
        return self._notifier.subscribe(listener)

    async def sign_up(
        self, email: str, password: str, attributes: dict[str, Any] | None = None
    ) -> Result[AuthUser, AuthError]:
        match await self._call(
            "POST",
            "/auth/v1/signup",
            operation="sign_up",
            client_error_code=ErrorCode.EMAIL_ALREADY_EXISTS,
            json_data={"email": email, "password": password, "data": attributes or {}},
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=payload):
                # Auto-confirm projects answer with a session wrapping the user
                user_payload = payload.get("user") or payload
                return self._build(user_from_payload, user_payload, "sign_up")

    async def sign_in(self, email: str, password: str) -> Result[AuthSession, AuthError]:
        match await self._call(
            "POST",
            "/auth/v1/token",
            operation="sign_in",
            client_error_code=ErrorCode.INVALID_CREDENTIALS,
            params={"grant_type": "password"},
            json_data={"email": email, "password": password},
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=payload):
                result = self._build(session_from_payload, payload, "sign_in")
                if isinstance(result, Success):
                    self._notifier.publish(AuthEvent.SIGNED_IN, result.value)
                return result

    async def refresh(self, refresh_token: str) -> Result[AuthSession, AuthError]:
        match await self._call(
            "POST",
            "/auth/v1/token",
            operation="refresh",
            client_error_code=ErrorCode.SESSION_INVALID,
            params={"grant_type": "refresh_token"},
            json_data={"refresh_token": refresh_token},
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=payload):
                result = self._build(session_from_payload, payload, "refresh")
                if isinstance(result, Success):
                    self._notifier.publish(AuthEvent.TOKEN_REFRESHED, result.value)
                return result

    async def sign_out(self, access_token: str) -> Result[None, AuthError]:
        match await self._call(
            "POST",
            "/auth/v1/logout",
            operation="sign_out",
            client_error_code=ErrorCode.SESSION_INVALID,
            access_token=access_token,
            expect_body=False,
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success():
                self._notifier.publish(AuthEvent.SIGNED_OUT, None)
                return Success(value=None)

    async def get_user(self, access_token: str) -> Result[AuthUser, AuthError]:
        match await self._call(
            "GET",
            "/auth/v1/user",
            operation="get_user",
            client_error_code=ErrorCode.SESSION_INVALID,
            access_token=access_token,
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=payload):
                return self._build(user_from_payload, payload, "get_user")

    async def _call(
        self,
        method: str,
        path: str,
        *,
        operation: str,
        client_error_code: ErrorCode,
        access_token: str | None = None,
        params: dict[str, str] | None = None,
        json_data: dict[str, Any] | None = None,
        expect_body: bool = True,
    ) -> Result[dict[str, Any], AuthError]:
        match await self._execute_request(
            method=method,
            path=path,
            headers=self._headers(access_token),
            params=params,
            json_data=json_data,
            operation=operation,
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=response):
                pass

        if not expect_body:
            error_result = self._check_error_response(response, operation)
            if error_result is None:
                return Success(value={})
            return self._with_client_code(error_result, response, client_error_code)

        match self._parse_json(response, operation):
            case Failure() as failure:
                return self._with_client_code(failure, response, client_error_code)
            case Success(value=dict() as payload):
                return Success(value=payload)
            case _:
                return self._invalid_shape(operation, "a JSON object")

    @staticmethod
    def _with_client_code(
        failure: Failure[AuthError], response: httpx.Response, code: ErrorCode
    ) -> Failure[AuthError]:
        if 400 <= response.status_code < 500:
            return Failure(error=replace(failure.error, code=code))
        return failure

    def _build[T](
        self,
        builder: Callable[[dict[str, Any]], T],
        payload: dict[str, Any],
        operation: str,
    ) -> Result[T, AuthError]:
        try:
            return Success(value=builder(payload))
        except (KeyError, TypeError, ValueError):
            return self._invalid_shape(operation, "a user or session object")
