"""Navigation sections of the application.

Declared in display order.
"""

from enum import Enum


class Section(str, Enum):
    """Top-level navigation sections."""

    DASHBOARD = "dashboard"
    EMPLOYEES = "employees"
    TASKS = "tasks"
    SETTINGS = "settings"

    @property
    def label(self) -> str:
        """Human-readable section label."""
        return self.value.title()
