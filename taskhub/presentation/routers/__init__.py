"""External-facing routers.

system_router carries the non-versioned endpoints; versioned resources live
under routers.api.v1.
"""

from taskhub.presentation.routers.system import system_router

__all__ = ["system_router"]
