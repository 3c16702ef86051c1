"""Account and session commands.

These run before a principal exists, so they carry no acting principal.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class RegisterPrincipal:
    """Self sign-up. The new principal always gets the employee role.

    Attributes:
        email: Sign-in email.
        password: Plaintext password (never logged).
        full_name: Display name.
    """

    email: str
    password: str
    full_name: str


@dataclass(frozen=True, kw_only=True)
class SignIn:
    """Exchange credentials for a session."""

    email: str
    password: str


@dataclass(frozen=True, kw_only=True)
class SignOut:
    """Revoke the session behind an access token."""

    access_token: str


@dataclass(frozen=True, kw_only=True)
class RefreshSession:
    """Exchange a refresh token for a new session."""

    refresh_token: str
