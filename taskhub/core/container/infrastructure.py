"""Infrastructure dependency factories.

App-scoped singletons (lru_cache) for logging and the backend adapters,
plus the request-scoped record store bound to the caller's bearer token.

Backend selection is centralized here (composition root):
- memory: process-local record store and identity provider
- supabase: PostgREST record store and GoTrue identity provider
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from taskhub.core.config import settings
from taskhub.core.enums import Environment

if TYPE_CHECKING:
    from taskhub.domain.protocols import (
        IdentityProviderProtocol,
        LoggerProtocol,
        RecordStoreProtocol,
    )

# auto_error=False: missing credentials are reported by the auth dependency
bearer_scheme = HTTPBearer(auto_error=False)


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)
    """
    from taskhub.infrastructure.logging import ConsoleAdapter

    return ConsoleAdapter(
        use_json=settings.environment != Environment.DEVELOPMENT,
        level=settings.log_level,
    )


@lru_cache()
def get_record_store() -> "RecordStoreProtocol":
    """Return the application-scoped record store (unbound, anon access)."""
    if settings.uses_supabase:
        from taskhub.infrastructure.supabase import SupabaseRecordStore

        return SupabaseRecordStore(
            base_url=settings.supabase_url or "",
            api_key=settings.supabase_anon_key or "",
            timeout=settings.http_timeout_seconds,
        )

    from taskhub.infrastructure.persistence import InMemoryRecordStore

    return InMemoryRecordStore()


@lru_cache()
def get_identity_provider() -> "IdentityProviderProtocol":
    """Return the application-scoped identity provider."""
    if settings.uses_supabase:
        from taskhub.infrastructure.supabase import SupabaseIdentityAdapter

        return SupabaseIdentityAdapter(
            base_url=settings.supabase_url or "",
            api_key=settings.supabase_anon_key or "",
            timeout=settings.http_timeout_seconds,
            logger=get_logger(),
        )

    from taskhub.infrastructure.identity import InMemoryIdentityAdapter

    return InMemoryIdentityAdapter(logger=get_logger())


def get_access_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str | None:
    """Bearer token of the current request, None when absent."""
    return credentials.credentials if credentials else None


def get_request_store(
    access_token: str | None = Depends(get_access_token),
    store: "RecordStoreProtocol" = Depends(get_record_store),
) -> "RecordStoreProtocol":
    """Record store acting on behalf of the caller (request-scoped).

    The caller's token is forwarded so the hosted backend's row-level
    security applies in addition to the in-process access policy.
    """
    return store.bind_token(access_token)
