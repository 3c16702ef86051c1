"""Task priority levels."""

from enum import Enum


class TaskPriority(str, Enum):
    """Task priority levels, lowest to highest."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"
