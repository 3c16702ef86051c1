"""Record query value object.

Describes a filtered, ordered selection from a record store collection in a
backend-neutral way. Adapters translate it (PostgREST query string, Python
predicates); callers never build backend syntax themselves.

Usage:
    query = (
        RecordQuery()
        .where_eq("assigned_to", principal.id)
        .order_by("created_at", descending=True)
    )
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any


class FilterOperator(str, Enum):
    """Supported comparison operators (PostgREST names)."""

    EQ = "eq"
    NEQ = "neq"
    LT = "lt"
    IN = "in"


@dataclass(frozen=True, slots=True)
class Filter:
    """Single field comparison."""

    field: str
    operator: FilterOperator
    value: Any

    def matches(self, record: dict[str, Any]) -> bool:
        """Evaluate the comparison against a raw record.

        Missing fields and None values never satisfy LT.
        """
        actual = record.get(self.field)
        match self.operator:
            case FilterOperator.EQ:
                return actual == self.value
            case FilterOperator.NEQ:
                return actual != self.value
            case FilterOperator.LT:
                return actual is not None and actual < self.value
            case FilterOperator.IN:
                return actual in self.value
        return False


@dataclass(frozen=True, slots=True)
class Ordering:
    """Sort key for a selection."""

    field: str
    descending: bool = False


@dataclass(frozen=True, slots=True)
class RecordQuery:
    """Immutable selection description.

    Every builder method returns a new query; the receiver is unchanged.

    Attributes:
        filters: Conjunction of field comparisons.
        ordering: Sort keys, most significant first.
        limit: Maximum number of records, None for all.
        fields: Columns to return, empty for all.
    """

    filters: tuple[Filter, ...] = ()
    ordering: tuple[Ordering, ...] = ()
    limit: int | None = None
    fields: tuple[str, ...] = ()

    def where_eq(self, field: str, value: Any) -> "RecordQuery":
        return self._with(Filter(field, FilterOperator.EQ, value))

    def where_neq(self, field: str, value: Any) -> "RecordQuery":
        return self._with(Filter(field, FilterOperator.NEQ, value))

    def where_lt(self, field: str, value: Any) -> "RecordQuery":
        return self._with(Filter(field, FilterOperator.LT, value))

    def where_in(self, field: str, values: list[Any] | tuple[Any, ...]) -> "RecordQuery":
        return self._with(Filter(field, FilterOperator.IN, tuple(values)))

    def order_by(self, field: str, *, descending: bool = False) -> "RecordQuery":
        return replace(self, ordering=(*self.ordering, Ordering(field, descending)))

    def limited(self, limit: int) -> "RecordQuery":
        if limit < 1:
            raise ValueError("limit must be positive")
        return replace(self, limit=limit)

    def selecting(self, *fields: str) -> "RecordQuery":
        return replace(self, fields=fields)

    def matches(self, record: dict[str, Any]) -> bool:
        """True when the record satisfies every filter."""
        return all(f.matches(record) for f in self.filters)

    def _with(self, new_filter: Filter) -> "RecordQuery":
        return replace(self, filters=(*self.filters, new_filter))
