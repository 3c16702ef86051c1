"""Unit tests for the RecordQuery value object.

Tests cover:
- Builders return new queries and leave the receiver unchanged
- Filter evaluation for each operator
- Limit validation
"""

from dataclasses import FrozenInstanceError

import pytest

from taskhub.domain.value_objects import Filter, FilterOperator, Ordering, RecordQuery


@pytest.mark.unit
class TestRecordQueryBuilders:
    def test_builders_do_not_mutate_receiver(self):
        base = RecordQuery()

        narrowed = base.where_eq("status", "completed").order_by("created_at", descending=True)

        assert base.filters == ()
        assert base.ordering == ()
        assert narrowed.filters == (Filter("status", FilterOperator.EQ, "completed"),)
        assert narrowed.ordering == (Ordering("created_at", True),)

    def test_query_is_frozen(self):
        with pytest.raises(FrozenInstanceError):
            RecordQuery().limit = 5

    def test_where_in_stores_a_tuple(self):
        query = RecordQuery().where_in("role", ["admin", "manager"])

        assert query.filters[0].value == ("admin", "manager")

    def test_limited_rejects_non_positive(self):
        with pytest.raises(ValueError):
            RecordQuery().limited(0)

    def test_limited_sets_limit(self):
        assert RecordQuery().limited(1).limit == 1


@pytest.mark.unit
class TestRecordQueryMatching:
    def test_all_filters_must_match(self):
        query = RecordQuery().where_eq("assigned_to", "u1").where_neq("status", "completed")

        assert query.matches({"assigned_to": "u1", "status": "in_progress"})
        assert not query.matches({"assigned_to": "u1", "status": "completed"})
        assert not query.matches({"assigned_to": "u2", "status": "in_progress"})

    def test_lt_never_matches_missing_or_null(self):
        query = RecordQuery().where_lt("due_date", "2024-06-01")

        assert query.matches({"due_date": "2024-05-31"})
        assert not query.matches({"due_date": "2024-06-01"})
        assert not query.matches({"due_date": None})
        assert not query.matches({})

    def test_in_checks_membership(self):
        query = RecordQuery().where_in("role", ["admin", "manager"])

        assert query.matches({"role": "manager"})
        assert not query.matches({"role": "employee"})

    def test_empty_query_matches_everything(self):
        assert RecordQuery().matches({"anything": 1})
