"""Access control denial error."""

from dataclasses import dataclass

from taskhub.core.errors import AuthorizationError


@dataclass(frozen=True, slots=True, kw_only=True)
class ForbiddenError(AuthorizationError):
    """Operation rejected by the access policy.

    Returned before any store call is made. ``role`` is the role of the
    rejected principal, None when there was no principal.

    Attributes:
        role: Role value of the rejected principal.
    """

    role: str | None = None
