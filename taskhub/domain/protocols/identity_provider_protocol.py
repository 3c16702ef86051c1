"""Identity provider protocol (port).

Account and session operations of the hosted identity service, plus a
subscription to authentication state changes (sign-in, sign-out, refresh).

Implementations:
    - SupabaseIdentityAdapter: GoTrue over httpx
    - InMemoryIdentityAdapter: process-local accounts with bcrypt hashes
"""

from collections.abc import Callable
from enum import Enum
from typing import Any, Protocol

from taskhub.core.result import Result
from taskhub.domain.entities import AuthSession, AuthUser
from taskhub.domain.errors import AuthError


class AuthEvent(str, Enum):
    """Authentication state change kinds."""

    SIGNED_IN = "SIGNED_IN"
    SIGNED_OUT = "SIGNED_OUT"
    TOKEN_REFRESHED = "TOKEN_REFRESHED"


type AuthChangeListener = Callable[[AuthEvent, AuthSession | None], None]
type Unsubscribe = Callable[[], None]


class IdentityProviderProtocol(Protocol):
    """Identity operations.

    Every state-changing call (sign_in, sign_out, refresh) notifies the
    subscribed listeners after it succeeds.
    """

    async def sign_up(
        self, email: str, password: str, attributes: dict[str, Any] | None = None
    ) -> Result[AuthUser, AuthError]:
        """Create an identity. ``attributes`` become the user metadata."""
        ...

    async def sign_in(self, email: str, password: str) -> Result[AuthSession, AuthError]:
        """Exchange credentials for a session. Publishes SIGNED_IN."""
        ...

    async def sign_out(self, access_token: str) -> Result[None, AuthError]:
        """Revoke the session behind ``access_token``. Publishes SIGNED_OUT."""
        ...

    async def refresh(self, refresh_token: str) -> Result[AuthSession, AuthError]:
        """Exchange a refresh token for a new session. Publishes TOKEN_REFRESHED."""
        ...

    async def get_user(self, access_token: str) -> Result[AuthUser, AuthError]:
        """Return the identity behind a valid access token."""
        ...

    def current_session(self) -> AuthSession | None:
        """Most recent session established through this provider, if any.

        Shared by every caller of the provider instance; intended for
        single-user or embedded use, not for per-request identity.
        """
        ...

    def subscribe(self, listener: AuthChangeListener) -> Unsubscribe:
        """Register ``listener`` for state changes; call the result to remove it."""
        ...
