"""Integration tests for the Supabase record store and identity adapter.

HTTP traffic is intercepted with pytest-httpx; no network access.

Tests cover:
- PostgREST query rendering (filters, ordering, limit, quoting)
- Request shape per operation (method, path, headers, params, body)
- Count helpers narrow the projection to ids
- Status code translation (4xx rejected, 5xx unavailable, timeouts)
- Malformed bodies reported as STORE_INVALID_RESPONSE
- GoTrue sign-up, sign-in, refresh, sign-out and user lookup
"""

import json

import httpx
import pytest

from taskhub.core.enums import ErrorCode
from taskhub.core.result import Failure, Success
from taskhub.domain.enums import Collection
from taskhub.domain.errors import AuthError
from taskhub.domain.protocols import AuthEvent
from taskhub.domain.value_objects import Filter, FilterOperator, RecordQuery
from taskhub.infrastructure.persistence import TaskRepository
from taskhub.infrastructure.supabase import SupabaseIdentityAdapter, SupabaseRecordStore
from taskhub.infrastructure.supabase.record_store import render_filter, render_query

BASE_URL = "https://project.supabase.co"
API_KEY = "anon-key"

USER_PAYLOAD = {"id": "u1", "email": "ada@example.com", "user_metadata": {"full_name": "Ada"}}
SESSION_PAYLOAD = {
    "access_token": "access-1",
    "refresh_token": "refresh-1",
    "expires_in": 3600,
    "token_type": "bearer",
    "user": USER_PAYLOAD,
}


@pytest.fixture
def store():
    return SupabaseRecordStore(base_url=BASE_URL, api_key=API_KEY, timeout=5.0)


@pytest.fixture
def identity(mock_logger):
    return SupabaseIdentityAdapter(
        base_url=BASE_URL, api_key=API_KEY, timeout=5.0, logger=mock_logger
    )


@pytest.mark.integration
class TestQueryRendering:
    def test_scalar_filters(self):
        assert render_filter(Filter("status", FilterOperator.EQ, "completed")) == (
            "status",
            "eq.completed",
        )
        assert render_filter(Filter("is_active", FilterOperator.EQ, True)) == (
            "is_active",
            "eq.true",
        )
        assert render_filter(Filter("due_date", FilterOperator.LT, "2024-06-01")) == (
            "due_date",
            "lt.2024-06-01",
        )

    def test_null_comparisons(self):
        assert render_filter(Filter("assigned_to", FilterOperator.EQ, None)) == (
            "assigned_to",
            "is.null",
        )
        assert render_filter(Filter("assigned_to", FilterOperator.NEQ, None)) == (
            "assigned_to",
            "not.is.null",
        )

    def test_in_list_quotes_reserved_characters(self):
        item = Filter("full_name", FilterOperator.IN, ("Ada", "Smith, John"))

        assert render_filter(item) == ("full_name", 'in.(Ada,"Smith, John")')

    def test_full_query(self):
        query = (
            RecordQuery()
            .where_in("role", ["employee", "manager"])
            .order_by("full_name")
            .order_by("created_at", descending=True)
            .limited(10)
        )

        assert render_query(query) == [
            ("select", "*"),
            ("role", "in.(employee,manager)"),
            ("order", "full_name.asc,created_at.desc"),
            ("limit", "10"),
        ]

    def test_projection_narrows_select(self):
        query = RecordQuery().where_eq("role", "employee").selecting("id")

        assert render_query(query) == [("select", "id"), ("role", "eq.employee")]

    def test_no_query_selects_everything(self):
        assert render_query(None) == [("select", "*")]


@pytest.mark.integration
class TestSupabaseRecordStore:
    async def test_select_sends_query_and_anon_headers(self, store, httpx_mock):
        # Arrange
        httpx_mock.add_response(method="GET", json=[{"id": "t1", "title": "x"}])

        # Act
        result = await store.select(
            Collection.TASKS, RecordQuery().where_eq("assigned_to", "u1")
        )

        # Assert
        assert result == Success(value=[{"id": "t1", "title": "x"}])
        request = httpx_mock.get_request()
        assert request.url.path == "/rest/v1/tasks"
        assert request.url.params.multi_items() == [("select", "*"), ("assigned_to", "eq.u1")]
        assert request.headers["apikey"] == API_KEY
        assert request.headers["Authorization"] == f"Bearer {API_KEY}"

    async def test_counts_fetch_only_ids(self, store, httpx_mock):
        httpx_mock.add_response(method="GET", json=[{"id": "t1"}, {"id": "t2"}])

        result = await TaskRepository(store).count_all()

        assert result == Success(value=2)
        assert httpx_mock.get_request().url.params["select"] == "id"

    async def test_bound_token_is_forwarded(self, store, httpx_mock):
        httpx_mock.add_response(method="GET", json=[])

        await store.bind_token("user-jwt").select(Collection.USERS)

        request = httpx_mock.get_request()
        assert request.headers["Authorization"] == "Bearer user-jwt"
        assert request.headers["apikey"] == API_KEY

    async def test_insert_requests_representation(self, store, httpx_mock):
        httpx_mock.add_response(method="POST", status_code=201, json=[{"id": "k1"}])

        result = await store.insert(Collection.KPIS, {"id": "k1", "metric_name": "Units"})

        assert result == Success(value={"id": "k1"})
        request = httpx_mock.get_request()
        assert request.url.path == "/rest/v1/amazon_kpis"
        assert request.headers["Prefer"] == "return=representation"
        assert json.loads(request.content) == {"id": "k1", "metric_name": "Units"}

    async def test_update_targets_one_row(self, store, httpx_mock):
        httpx_mock.add_response(method="PATCH", json=[{"id": "t1", "title": "new"}])

        result = await store.update(Collection.TASKS, "t1", {"title": "new"})

        assert result == Success(value={"id": "t1", "title": "new"})
        request = httpx_mock.get_request()
        assert request.url.params.multi_items() == [("id", "eq.t1"), ("select", "*")]

    async def test_update_matching_nothing_is_not_found(self, store, httpx_mock):
        httpx_mock.add_response(method="PATCH", json=[])

        result = await store.update(Collection.TASKS, "gone", {"title": "new"})

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.RECORD_NOT_FOUND

    async def test_delete(self, store, httpx_mock):
        httpx_mock.add_response(method="DELETE", status_code=204)

        result = await store.delete(Collection.TASKS, "t1")

        assert result == Success(value=None)
        assert httpx_mock.get_request().url.params["id"] == "eq.t1"

    async def test_client_error_is_rejected(self, store, httpx_mock):
        httpx_mock.add_response(
            method="POST", status_code=403, json={"message": "permission denied for table"}
        )

        result = await store.insert(Collection.TASKS, {"title": "x"})

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.STORE_REJECTED
        assert result.error.status_code == 403
        assert result.error.message == "permission denied for table"
        assert result.error.collection == "tasks"

    async def test_server_error_is_unavailable(self, store, httpx_mock):
        httpx_mock.add_response(method="GET", status_code=503, text="maintenance")

        result = await store.select(Collection.TASKS)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.STORE_UNAVAILABLE

    async def test_timeout_is_unavailable(self, store, httpx_mock):
        httpx_mock.add_exception(httpx.ReadTimeout("timed out"))

        result = await store.select(Collection.TASKS)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.STORE_UNAVAILABLE

    async def test_connection_error_is_unavailable(self, store, httpx_mock):
        httpx_mock.add_exception(httpx.ConnectError("refused"))

        result = await store.delete(Collection.TASKS, "t1")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.STORE_UNAVAILABLE

    async def test_non_list_body_is_invalid(self, store, httpx_mock):
        httpx_mock.add_response(method="GET", json={"id": "t1"})

        result = await store.select(Collection.TASKS)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.STORE_INVALID_RESPONSE

    async def test_non_json_body_is_invalid(self, store, httpx_mock):
        httpx_mock.add_response(method="GET", text="<html>")

        result = await store.select(Collection.TASKS)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.STORE_INVALID_RESPONSE


@pytest.mark.integration
class TestSupabaseIdentityAdapter:
    async def test_sign_up_sends_metadata(self, identity, httpx_mock):
        httpx_mock.add_response(method="POST", json=USER_PAYLOAD)

        result = await identity.sign_up("ada@example.com", "secret123", {"full_name": "Ada"})

        assert isinstance(result, Success)
        assert result.value.id == "u1"
        assert result.value.metadata == {"full_name": "Ada"}
        request = httpx_mock.get_request()
        assert request.url.path == "/auth/v1/signup"
        assert json.loads(request.content) == {
            "email": "ada@example.com",
            "password": "secret123",
            "data": {"full_name": "Ada"},
        }

    async def test_sign_up_with_session_wrapper(self, identity, httpx_mock):
        httpx_mock.add_response(method="POST", json=SESSION_PAYLOAD)

        result = await identity.sign_up("ada@example.com", "secret123")

        assert result.value.id == "u1"

    async def test_sign_up_rejected_is_duplicate(self, identity, httpx_mock):
        httpx_mock.add_response(
            method="POST", status_code=422, json={"msg": "User already registered"}
        )

        result = await identity.sign_up("ada@example.com", "secret123")

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthError)
        assert result.error.code == ErrorCode.EMAIL_ALREADY_EXISTS
        assert result.error.message == "User already registered"

    async def test_sign_in_publishes_session(self, identity, httpx_mock):
        # Arrange
        httpx_mock.add_response(method="POST", json=SESSION_PAYLOAD)
        events = []
        identity.subscribe(lambda event, session: events.append(event))

        # Act
        result = await identity.sign_in("ada@example.com", "secret123")

        # Assert
        assert isinstance(result, Success)
        assert result.value.access_token == "access-1"
        assert result.value.user.email == "ada@example.com"
        assert events == [AuthEvent.SIGNED_IN]
        assert identity.current_session() == result.value
        request = httpx_mock.get_request()
        assert request.url.path == "/auth/v1/token"
        assert request.url.params["grant_type"] == "password"

    async def test_sign_in_bad_credentials(self, identity, httpx_mock):
        httpx_mock.add_response(
            method="POST",
            status_code=400,
            json={"error": "invalid_grant", "error_description": "Invalid login credentials"},
        )

        result = await identity.sign_in("ada@example.com", "nope")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_CREDENTIALS
        assert result.error.message == "Invalid login credentials"

    async def test_sign_in_server_error_is_unavailable(self, identity, httpx_mock):
        httpx_mock.add_response(method="POST", status_code=500, text="oops")

        result = await identity.sign_in("ada@example.com", "secret123")

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthError)
        assert result.error.code == ErrorCode.STORE_UNAVAILABLE

    async def test_session_payload_missing_tokens_is_invalid(self, identity, httpx_mock):
        httpx_mock.add_response(method="POST", json={"user": USER_PAYLOAD})

        result = await identity.sign_in("ada@example.com", "secret123")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.STORE_INVALID_RESPONSE

    async def test_refresh(self, identity, httpx_mock):
        httpx_mock.add_response(method="POST", json=SESSION_PAYLOAD)
        events = []
        identity.subscribe(lambda event, session: events.append(event))

        result = await identity.refresh("refresh-0")

        assert result.value.refresh_token == "refresh-1"
        assert events == [AuthEvent.TOKEN_REFRESHED]
        request = httpx_mock.get_request()
        assert request.url.params["grant_type"] == "refresh_token"
        assert json.loads(request.content) == {"refresh_token": "refresh-0"}

    async def test_refresh_with_revoked_token(self, identity, httpx_mock):
        httpx_mock.add_response(method="POST", status_code=400, json={"msg": "Invalid"})

        result = await identity.refresh("revoked")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.SESSION_INVALID

    async def test_sign_out_uses_caller_token(self, identity, httpx_mock):
        httpx_mock.add_response(method="POST", status_code=204)
        events = []
        identity.subscribe(lambda event, session: events.append((event, session)))

        result = await identity.sign_out("access-1")

        assert result == Success(value=None)
        assert events == [(AuthEvent.SIGNED_OUT, None)]
        request = httpx_mock.get_request()
        assert request.url.path == "/auth/v1/logout"
        assert request.headers["Authorization"] == "Bearer access-1"

    async def test_sign_out_with_expired_token(self, identity, httpx_mock):
        httpx_mock.add_response(method="POST", status_code=401, json={"msg": "expired"})

        result = await identity.sign_out("expired")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.SESSION_INVALID

    async def test_get_user(self, identity, httpx_mock):
        httpx_mock.add_response(method="GET", json=USER_PAYLOAD)

        result = await identity.get_user("access-1")

        assert result.value.id == "u1"
        request = httpx_mock.get_request()
        assert request.url.path == "/auth/v1/user"
        assert request.headers["Authorization"] == "Bearer access-1"

    async def test_get_user_with_invalid_token(self, identity, httpx_mock):
        httpx_mock.add_response(method="GET", status_code=401, json={"msg": "bad jwt"})

        result = await identity.get_user("bad")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.SESSION_INVALID
