"""Process-local identity provider.

Accounts are kept in memory with bcrypt password hashes; access and refresh
tokens are opaque random strings. Behaves like the hosted provider where it
matters to callers: duplicate emails are rejected, refresh tokens are single
use, and signing out revokes the session's tokens.
"""

import secrets
from dataclasses import dataclass
from typing import Any

import bcrypt
from uuid_extensions import uuid7

from taskhub.core.enums import ErrorCode
from taskhub.core.result import Failure, Result, Success
from taskhub.domain.entities import AuthSession, AuthUser
from taskhub.domain.errors import AuthError
from taskhub.domain.protocols import AuthChangeListener, AuthEvent, LoggerProtocol, Unsubscribe
from taskhub.infrastructure.identity.auth_change_notifier import AuthChangeNotifier

MIN_PASSWORD_LENGTH = 6
ACCESS_TOKEN_TTL_SECONDS = 3600


@dataclass
class _Account:
    user: AuthUser
    password_hash: bytes


class InMemoryIdentityAdapter:
    """Identity provider for development and tests.

    Args:
        logger: Structured logger.
        bcrypt_rounds: bcrypt cost factor (4 is the library minimum).
    """

    def __init__(self, logger: LoggerProtocol, *, bcrypt_rounds: int = 12) -> None:
        self._logger = logger
        self._rounds = bcrypt_rounds
        self._accounts: dict[str, _Account] = {}
        self._access_tokens: dict[str, str] = {}
        self._refresh_tokens: dict[str, str] = {}
        self._notifier = AuthChangeNotifier(logger)

    def current_session(self) -> AuthSession | None:
        return self._notifier.current_session()

    def subscribe(self, listener: AuthChangeListener) -> Unsubscribe:
        return self._notifier.subscribe(listener)

    async def sign_up(
        self, email: str, password: str, attributes: dict[str, Any] | None = None
    ) -> Result[AuthUser, AuthError]:
        key = email.strip().lower()
        if key in self._accounts:
            return Failure(
                error=AuthError(
                    code=ErrorCode.EMAIL_ALREADY_EXISTS,
                    message="User already registered",
                )
            )
        if len(password) < MIN_PASSWORD_LENGTH:
            return Failure(
                error=AuthError(
                    code=ErrorCode.AUTHENTICATION_FAILED,
                    message=f"Password should be at least {MIN_PASSWORD_LENGTH} characters",
                )
            )

        user = AuthUser(id=str(uuid7()), email=key, metadata=dict(attributes or {}))
        password_hash = bcrypt.hashpw(
            password.encode("utf-8"), bcrypt.gensalt(rounds=self._rounds)
        )
        self._accounts[key] = _Account(user=user, password_hash=password_hash)
        self._logger.info("identity_created", user_id=user.id)
        return Success(value=user)

    async def sign_in(self, email: str, password: str) -> Result[AuthSession, AuthError]:
        account = self._accounts.get(email.strip().lower())
        if account is None or not bcrypt.checkpw(password.encode("utf-8"), account.password_hash):
            return Failure(
                error=AuthError(
                    code=ErrorCode.INVALID_CREDENTIALS,
                    message="Invalid login credentials",
                )
            )

        session = self._issue_session(account.user)
        self._notifier.publish(AuthEvent.SIGNED_IN, session)
        return Success(value=session)

    async def refresh(self, refresh_token: str) -> Result[AuthSession, AuthError]:
        user_id = self._refresh_tokens.pop(refresh_token, None)
        user = self._user_by_id(user_id) if user_id else None
        if user is None:
            return Failure(
                error=AuthError(
                    code=ErrorCode.SESSION_INVALID,
                    message="Invalid refresh token",
                )
            )

        session = self._issue_session(user)
        self._notifier.publish(AuthEvent.TOKEN_REFRESHED, session)
        return Success(value=session)

    async def sign_out(self, access_token: str) -> Result[None, AuthError]:
        user_id = self._access_tokens.pop(access_token, None)
        if user_id is None:
            return Failure(
                error=AuthError(code=ErrorCode.SESSION_INVALID, message="Invalid session")
            )

        # Revoke every token of the user, as a global sign-out does
        self._access_tokens = {t: u for t, u in self._access_tokens.items() if u != user_id}
        self._refresh_tokens = {t: u for t, u in self._refresh_tokens.items() if u != user_id}
        self._notifier.publish(AuthEvent.SIGNED_OUT, None)
        return Success(value=None)

    async def get_user(self, access_token: str) -> Result[AuthUser, AuthError]:
        user_id = self._access_tokens.get(access_token)
        user = self._user_by_id(user_id) if user_id else None
        if user is None:
            return Failure(
                error=AuthError(code=ErrorCode.SESSION_INVALID, message="Invalid session")
            )
        return Success(value=user)

    def _issue_session(self, user: AuthUser) -> AuthSession:
        access_token = secrets.token_urlsafe(32)
        refresh_token = secrets.token_urlsafe(32)
        self._access_tokens[access_token] = user.id
        self._refresh_tokens[refresh_token] = user.id
        return AuthSession(
            access_token=access_token,
            refresh_token=refresh_token,
            expires_in=ACCESS_TOKEN_TTL_SECONDS,
            user=user,
        )

    def _user_by_id(self, user_id: str) -> AuthUser | None:
        for account in self._accounts.values():
            if account.user.id == user_id:
                return account.user
        return None
