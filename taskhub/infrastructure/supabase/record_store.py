"""PostgREST implementation of RecordStoreProtocol.

Collections map to ``/rest/v1/{collection}``. Queries render as PostgREST
query parameters:

    RecordQuery().where_eq("assigned_to", "u1").order_by("created_at", descending=True)
    -> ?select=*&assigned_to=eq.u1&order=created_at.desc

Writes ask for ``Prefer: return=representation`` so the stored row comes back.
When bound to a caller's access token every request carries it, and the
project's row-level security policies apply on top of the in-process checks.
"""

from enum import Enum
from typing import Any, Self

import httpx

from taskhub.core.enums import ErrorCode
from taskhub.core.result import Failure, Result, Success
from taskhub.domain.enums import Collection
from taskhub.domain.errors import StoreError
from taskhub.domain.value_objects import Filter, FilterOperator, RecordQuery
from taskhub.infrastructure.supabase.base_client import SupabaseHttpClient

type Record = dict[str, Any]

_RESERVED = set(',.:()"')


def render_value(value: Any) -> str:
    """Render a scalar filter operand in PostgREST syntax."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        value = value.value
    return str(value)


def _render_list_item(value: Any) -> str:
    text = render_value(value)
    if any(ch in _RESERVED for ch in text):
        escaped = text.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return text


def render_filter(item: Filter) -> tuple[str, str]:
    """Render one filter as a (column, "op.operand") query parameter."""
    match item.operator:
        case FilterOperator.IN:
            operand = ",".join(_render_list_item(v) for v in item.value)
            return item.field, f"in.({operand})"
        case FilterOperator.EQ if item.value is None:
            return item.field, "is.null"
        case FilterOperator.NEQ if item.value is None:
            return item.field, "not.is.null"
        case _:
            return item.field, f"{item.operator.value}.{render_value(item.value)}"


def render_query(query: RecordQuery | None) -> list[tuple[str, str]]:
    """Render a full query, the ``select`` projection first."""
    if query is None:
        return [("select", "*")]

    params: list[tuple[str, str]] = [("select", ",".join(query.fields) or "*")]

    params.extend(render_filter(f) for f in query.filters)
    if query.ordering:
        order = ",".join(
            f"{o.field}.{'desc' if o.descending else 'asc'}" for o in query.ordering
        )
        params.append(("order", order))
    if query.limit is not None:
        params.append(("limit", str(query.limit)))
    return params


class SupabaseRecordStore(SupabaseHttpClient):
    """Record store backed by a Supabase project's PostgREST API.

    Attributes:
        _access_token: Caller token forwarded on every request, None for anon.
    """

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str,
        timeout: float,
        access_token: str | None = None,
    ) -> None:
        super().__init__(base_url=base_url, api_key=api_key, timeout=timeout, service="rest")
        self._access_token = access_token

    def bind_token(self, access_token: str | None) -> Self:
        return type(self)(
            base_url=self._base_url,
            api_key=self._api_key,
            timeout=self._timeout,
            access_token=access_token,
        )

    async def select(
        self, collection: Collection, query: RecordQuery | None = None
    ) -> Result[list[Record], StoreError]:
        name = Collection(collection).value
        match await self._execute_request(
            method="GET",
            path=f"/rest/v1/{name}",
            headers=self._headers(self._access_token),
            params=render_query(query),
            operation="select",
            collection=name,
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=response):
                return self._parse_rows(response, "select", name)

    async def insert(self, collection: Collection, record: Record) -> Result[Record, StoreError]:
        name = Collection(collection).value
        match await self._execute_request(
            method="POST",
            path=f"/rest/v1/{name}",
            headers=self._write_headers(),
            params=[("select", "*")],
            json_data=record,
            operation="insert",
            collection=name,
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=response):
                return self._single_row(response, "insert", name, record_id=record.get("id"))

    async def update(
        self, collection: Collection, record_id: str, patch: Record
    ) -> Result[Record, StoreError]:
        name = Collection(collection).value
        match await self._execute_request(
            method="PATCH",
            path=f"/rest/v1/{name}",
            headers=self._write_headers(),
            params=[("id", f"eq.{record_id}"), ("select", "*")],
            json_data=patch,
            operation="update",
            collection=name,
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=response):
                return self._single_row(response, "update", name, record_id=record_id)

    async def delete(self, collection: Collection, record_id: str) -> Result[None, StoreError]:
        name = Collection(collection).value
        match await self._execute_request(
            method="DELETE",
            path=f"/rest/v1/{name}",
            headers=self._headers(self._access_token),
            params=[("id", f"eq.{record_id}")],
            operation="delete",
            collection=name,
        ):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=response):
                error_result = self._check_error_response(response, "delete", collection=name)
                if error_result is not None:
                    return error_result
                return Success(value=None)

    def _write_headers(self) -> dict[str, str]:
        return self._headers(self._access_token, Prefer="return=representation")

    def _parse_rows(
        self, response: httpx.Response, operation: str, name: str
    ) -> Result[list[Record], StoreError]:
        match self._parse_json(response, operation, collection=name):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=list() as rows) if all(isinstance(r, dict) for r in rows):
                return Success(value=rows)
            case _:
                return self._invalid_shape(operation, "a list of records", collection=name)

    def _single_row(
        self, response: httpx.Response, operation: str, name: str, *, record_id: Any
    ) -> Result[Record, StoreError]:
        match self._parse_rows(response, operation, name):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=[row, *_]):
                return Success(value=row)
            case Success(value=[]):
                # PATCH matching no row answers 200 with an empty list
                return Failure(
                    error=StoreError(
                        code=ErrorCode.RECORD_NOT_FOUND,
                        message=f"No record {record_id} in {name}",
                        collection=name,
                        details={"id": record_id},
                    )
                )
