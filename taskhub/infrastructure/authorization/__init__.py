"""Authorization adapters."""

from taskhub.infrastructure.authorization.casbin_adapter import CasbinAdapter

__all__ = ["CasbinAdapter"]
