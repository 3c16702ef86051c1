"""Domain value objects."""

from taskhub.domain.value_objects.record_query import (
    Filter,
    FilterOperator,
    Ordering,
    RecordQuery,
)

__all__ = ["Filter", "FilterOperator", "Ordering", "RecordQuery"]
