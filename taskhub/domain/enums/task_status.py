"""Task lifecycle status.

The status relation is flat and total: any status may follow any other.
Only COMPLETED carries a completion timestamp.
"""

from enum import Enum


class TaskStatus(str, Enum):
    """Task lifecycle status."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    ON_HOLD = "on_hold"
    CANCELLED = "cancelled"

    @property
    def is_completed(self) -> bool:
        """True only for COMPLETED."""
        return self is TaskStatus.COMPLETED
