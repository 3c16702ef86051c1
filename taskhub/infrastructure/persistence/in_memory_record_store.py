"""Process-local record store.

Implements RecordStoreProtocol over plain dictionaries for development and
tests. Mirrors the hosted store's column defaults: a generated ``id`` when
none is given, and ``created_at``/``updated_at`` timestamps.

Records handed out are copies; mutating them never changes stored state.
"""

from datetime import UTC, datetime
from typing import Any, Self

from uuid_extensions import uuid7

from taskhub.core.enums import ErrorCode
from taskhub.core.result import Failure, Result, Success
from taskhub.domain.enums import Collection
from taskhub.domain.errors import StoreError
from taskhub.domain.value_objects import RecordQuery

type Record = dict[str, Any]


class InMemoryRecordStore:
    """Dictionary-backed record store.

    Attributes:
        _collections: Collection name to {record id: record}.
    """

    def __init__(self, seed: dict[Collection, list[Record]] | None = None) -> None:
        self._collections: dict[str, dict[str, Record]] = {c.value: {} for c in Collection}
        for collection, records in (seed or {}).items():
            for record in records:
                self._collections[collection.value][str(record["id"])] = dict(record)

    async def select(
        self, collection: Collection, query: RecordQuery | None = None
    ) -> Result[list[Record], StoreError]:
        query = query or RecordQuery()
        rows = [dict(r) for r in self._table(collection).values() if query.matches(r)]

        # Stable sort, least significant key first
        for ordering in reversed(query.ordering):
            rows.sort(
                key=lambda r, f=ordering.field: (r.get(f) is None, r.get(f)),
                reverse=ordering.descending,
            )
        if query.limit is not None:
            rows = rows[: query.limit]
        if query.fields:
            rows = [{f: r.get(f) for f in query.fields} for r in rows]
        return Success(value=rows)

    async def insert(self, collection: Collection, record: Record) -> Result[Record, StoreError]:
        table = self._table(collection)
        now = _timestamp()
        stored = {"created_at": now, "updated_at": now, **record}
        stored["id"] = str(stored.get("id") or uuid7())

        if stored["id"] in table:
            return Failure(
                error=StoreError(
                    code=ErrorCode.STORE_REJECTED,
                    message=f"Duplicate id in {collection.value}",
                    collection=collection.value,
                    details={"id": stored["id"]},
                )
            )

        table[stored["id"]] = stored
        return Success(value=dict(stored))

    async def update(
        self, collection: Collection, record_id: str, patch: Record
    ) -> Result[Record, StoreError]:
        table = self._table(collection)
        current = table.get(record_id)
        if current is None:
            return Failure(
                error=StoreError(
                    code=ErrorCode.RECORD_NOT_FOUND,
                    message=f"No record {record_id} in {collection.value}",
                    collection=collection.value,
                    details={"id": record_id},
                )
            )

        current.update({k: v for k, v in patch.items() if k != "id"})
        current["updated_at"] = _timestamp()
        return Success(value=dict(current))

    async def delete(self, collection: Collection, record_id: str) -> Result[None, StoreError]:
        self._table(collection).pop(record_id, None)
        return Success(value=None)

    def bind_token(self, access_token: str | None) -> Self:
        # No row-level rules to apply locally
        return self

    def _table(self, collection: Collection) -> dict[str, Record]:
        return self._collections[Collection(collection).value]


def _timestamp() -> str:
    return datetime.now(UTC).isoformat()
