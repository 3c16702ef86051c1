"""Identity provider adapters."""

from taskhub.infrastructure.identity.in_memory_identity_adapter import InMemoryIdentityAdapter

__all__ = ["InMemoryIdentityAdapter"]
