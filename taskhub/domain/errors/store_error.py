"""Record store and identity provider error types.

These errors are part of the RecordStoreProtocol and IdentityProviderProtocol
contracts. Adapters return them inside Failure; they are never raised.

Usage:
    from taskhub.domain.errors import StoreError

    async def select(self, collection, query) -> Result[list[dict], StoreError]:
        if response.status_code >= 500:
            return Failure(error=StoreError(
                code=ErrorCode.STORE_UNAVAILABLE,
                message="Record store unavailable",
                collection=collection,
            ))
"""

from dataclasses import dataclass

from taskhub.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class StoreError(DomainError):
    """Record store failure (transport, rejection or malformed response).

    Attributes:
        collection: Collection the failing operation targeted, if any.
        status_code: Upstream HTTP status, when the store is remote.
    """

    collection: str | None = None
    status_code: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthError(StoreError):
    """Identity provider failure.

    Covers rejected credentials, invalid or expired sessions and duplicate
    sign-ups. Transport failures of the identity provider use the same type
    with a STORE_* code.
    """
