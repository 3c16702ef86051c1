"""Application services."""

from taskhub.application.services.access_policy import AccessPolicy
from taskhub.application.services.navigation import ordered_sections, visible_sections
from taskhub.application.services.session_watcher import PrincipalResolver, SessionWatcher

__all__ = [
    "AccessPolicy",
    "PrincipalResolver",
    "SessionWatcher",
    "ordered_sections",
    "visible_sections",
]
