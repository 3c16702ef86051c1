"""Identity provider session types.

These mirror what the hosted identity service hands back: a user identity
and, after sign-in, a bearer session.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthUser:
    """Identity record held by the identity provider.

    Attributes:
        id: Identity user id; equals the principal id.
        email: Email address used to sign in.
        metadata: User attributes supplied at sign-up (full_name, ...).
    """

    id: str
    email: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthSession:
    """Bearer session issued on sign-in or refresh.

    Attributes:
        access_token: Short-lived bearer token.
        refresh_token: Token exchanged for a new session.
        expires_in: Access token lifetime in seconds.
        user: Identity the session belongs to.
        token_type: Always "bearer" for the supported providers.
    """

    access_token: str
    refresh_token: str
    expires_in: int
    user: AuthUser
    token_type: str = "bearer"
