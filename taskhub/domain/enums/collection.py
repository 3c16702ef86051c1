"""Record store collection names."""

from enum import Enum


class Collection(str, Enum):
    """Named collections in the hosted record store."""

    USERS = "users"
    TASKS = "tasks"
    KPIS = "amazon_kpis"
